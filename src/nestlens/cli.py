from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Callable, Sequence, TextIO

import yaml

from nestlens.core.config import LOG_LEVELS, LensConfig, load_config
from nestlens.core.errors import ConfigError, LensError
from nestlens.core.types import ABSENT, PathSegment, parse_path
from nestlens.observability.logging import configure_logging, get_logger
from nestlens.optics import over, path_optic, set_, view

log = get_logger("nestlens.cli")


def _incr(v: Any) -> Any:
    return v + 1


def _decr(v: Any) -> Any:
    return v - 1


TRANSFORMS: dict[str, Callable[[Any], Any]] = {
    "upper": str.upper,
    "lower": str.lower,
    "strip": str.strip,
    "title": str.title,
    "incr": _incr,
    "decr": _decr,
    "negate": lambda v: -v,
    "not": lambda v: not v,
    "len": len,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nestlens",
        description="Read or update one nested value of a YAML/JSON document.",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to a YAML config file")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=sorted(LOG_LEVELS),
        default=None,
        help="Logging level (overrides config)",
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("path", help="Dotted path, e.g. phones.0.number (empty string for the root)")
    common.add_argument("--file", "-f", type=Path, default=None, help="Input document (default: stdin)")
    common.add_argument("--output", choices=["json", "yaml"], default=None, help="Output format (overrides config)")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("view", parents=[common], help="Print the focused value")

    set_p = sub.add_parser("set", parents=[common], help="Replace the focused value")
    set_p.add_argument("--value", required=True, help="New value, parsed as a YAML scalar or flow collection")

    over_p = sub.add_parser("over", parents=[common], help="Transform the focused value")
    over_p.add_argument("--fn", required=True, choices=sorted(TRANSFORMS), help="Named transform")

    return parser


def _read_document(path: Path | None, stdin: TextIO) -> Any:
    try:
        text = path.read_text(encoding="utf-8") if path is not None else stdin.read()
    except OSError as e:
        raise LensError(f"failed to read input document: {e}") from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise LensError(f"failed to parse input document: {e}") from e


def _parse_value(text: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"--value is not valid YAML: {e}") from e


def _json_default(obj: Any) -> Any:
    if obj is ABSENT:
        return None
    if isinstance(obj, tuple):
        return list(obj)
    return repr(obj)


def _render(value: Any, fmt: str) -> str:
    if value is ABSENT:
        value = None
    if fmt == "yaml":
        return yaml.safe_dump(value, allow_unicode=True, sort_keys=False)
    return json.dumps(value, ensure_ascii=False, indent=2, default=_json_default) + "\n"


def run(
    ns: argparse.Namespace,
    cfg: LensConfig,
    segments: list[PathSegment],
    *,
    value: Any = None,
    stdin: TextIO,
    stdout: TextIO,
) -> None:
    optic = path_optic(segments, policy=cfg.index_policy, fill=cfg.fill)
    document = _read_document(ns.file, stdin)

    if ns.command == "view":
        result = view(optic, document)
    elif ns.command == "set":
        result = set_(optic, value, document)
    else:
        result = over(optic, TRANSFORMS[ns.fn], document)

    log.info("lens_applied", command=ns.command, path=segments)
    stdout.write(_render(result, ns.output or cfg.output))


def main(argv: Sequence[str] | None = None, *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """CLI entrypoint referenced by pyproject.toml."""

    parser = _build_parser()

    try:
        ns = parser.parse_args(list(argv) if argv is not None else None)
    except SystemExit as e:
        # argparse has already printed help/usage to stdout/stderr.
        code = e.code
        return int(code) if isinstance(code, int) else 1

    try:
        cfg = load_config(ns.config)
    except ConfigError as e:
        sys.stderr.write(f"ConfigError: {e}\n")
        return 2

    configure_logging(level=ns.log_level or cfg.log_level)

    # Usage errors: reject before touching the document.
    try:
        segments = parse_path(ns.path)
        value = _parse_value(ns.value) if ns.command == "set" else None
    except ValueError as e:
        log.error("bad_arguments", error=str(e))
        sys.stderr.write(f"Bad arguments: {e}\n")
        return 2

    try:
        run(ns, cfg, segments, value=value, stdin=stdin or sys.stdin, stdout=stdout or sys.stdout)
        return 0
    except (LensError, TypeError, AttributeError, ValueError) as e:
        log.error("lens_error", command=ns.command, error=str(e), error_type=type(e).__name__)
        sys.stderr.write(f"{type(e).__name__}: {e}\n")
        return 1
