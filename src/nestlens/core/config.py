from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .errors import ConfigError
from .types import IndexPolicy

# re-export for contract/tests
__all__ = [
    "ConfigError",
    "LensConfig",
    "load_config",
]


_ENV_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

_OUTPUT_FORMATS = {"json", "yaml"}
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _expand_env_in_str(value: str, *, path: str) -> str:
    def repl(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in os.environ:
            raise ConfigError(f"environment variable {key!r} is missing", path=path)
        if os.environ[key] == "":
            raise ConfigError(f"environment variable {key!r} is empty", path=path)
        return os.environ[key]

    return _ENV_PATTERN.sub(repl, value)


def _expand_env(obj: Any, *, path: str) -> Any:
    if isinstance(obj, str):
        return _expand_env_in_str(obj, path=path)
    if isinstance(obj, list):
        return [_expand_env(v, path=f"{path}[{i}]") for i, v in enumerate(obj)]
    if isinstance(obj, dict):
        return {k: _expand_env(v, path=f"{path}.{k}" if path else str(k)) for k, v in obj.items()}
    return obj


def _default_log_level() -> str:
    return os.getenv("NESTLENS_LOG_LEVEL") or "WARNING"


@dataclass(frozen=True)
class LensConfig:
    index_policy: IndexPolicy = IndexPolicy.PAD
    fill: Any = None
    output: str = "json"
    log_level: str = "WARNING"


def load_config(path: str | Path | None = None) -> LensConfig:
    """Load YAML config and expand ${ENV_VAR}.

    Without a path, returns the defaults (log level still honours
    NESTLENS_LOG_LEVEL).
    """

    # Local dev: allow injecting settings from .env (do not commit it).
    load_dotenv(override=False)

    if path is None:
        return LensConfig(log_level=_default_log_level().upper())

    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError("config file not found", path=str(config_path))

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML parse failed: {e}", path=str(config_path)) from e

    if not isinstance(raw, dict):
        raise ConfigError("top level must be a YAML mapping (dict)", path=str(config_path))

    expanded = _expand_env(raw, path="")

    lens_raw = expanded.get("lens", {})
    if lens_raw is None:
        lens_raw = {}
    if not isinstance(lens_raw, dict):
        raise ConfigError("must be a dict", path="lens")

    policy_raw = str(lens_raw.get("index_policy", LensConfig.index_policy.value)).lower()
    try:
        index_policy = IndexPolicy(policy_raw)
    except ValueError:
        raise ConfigError(f"unsupported index policy: {policy_raw!r}", path="lens.index_policy") from None

    fill = lens_raw.get("fill", LensConfig.fill)

    output_raw = expanded.get("output", {})
    if output_raw is None:
        output_raw = {}
    if not isinstance(output_raw, dict):
        raise ConfigError("must be a dict", path="output")
    output = str(output_raw.get("format", LensConfig.output)).lower()
    if output not in _OUTPUT_FORMATS:
        raise ConfigError(f"unsupported output format: {output!r}", path="output.format")

    logging_raw = expanded.get("logging", {})
    if logging_raw is None:
        logging_raw = {}
    if not isinstance(logging_raw, dict):
        raise ConfigError("must be a dict", path="logging")

    # Contract: log level can default from env.
    log_level = logging_raw.get("level")
    if log_level is None or log_level == "":
        log_level = _default_log_level()
    log_level = str(log_level).upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"unsupported log level: {log_level!r}", path="logging.level")

    return LensConfig(index_policy=index_policy, fill=fill, output=output, log_level=log_level)
