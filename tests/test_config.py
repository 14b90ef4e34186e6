from __future__ import annotations

from pathlib import Path

import pytest

from nestlens.core.config import LensConfig, load_config
from nestlens.core.errors import ConfigError
from nestlens.core.types import IndexPolicy


def test_load_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NESTLENS_LOG_LEVEL", raising=False)

    cfg = load_config()
    assert cfg == LensConfig()
    assert cfg.index_policy is IndexPolicy.PAD
    assert cfg.log_level == "WARNING"


def test_load_config_log_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NESTLENS_LOG_LEVEL", "debug")

    assert load_config().log_level == "DEBUG"


def test_load_config_expands_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NESTLENS_FILL", "gap")

    p = tmp_path / "nestlens.yaml"
    p.write_text(
        """
lens:
  index_policy: FAIL
  fill: ${NESTLENS_FILL}
output:
  format: yaml
logging:
  level: info
""".lstrip(),
        encoding="utf-8",
    )

    cfg = load_config(p)
    assert cfg.index_policy is IndexPolicy.FAIL
    assert cfg.fill == "gap"
    assert cfg.output == "yaml"
    assert cfg.log_level == "INFO"


def test_load_config_missing_env_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NESTLENS_FILL", raising=False)

    p = tmp_path / "nestlens.yaml"
    p.write_text(
        """
lens:
  fill: ${NESTLENS_FILL}
""".lstrip(),
        encoding="utf-8",
    )

    with pytest.raises(ConfigError) as ei:
        load_config(p)

    assert "NESTLENS_FILL" in str(ei.value)
    assert "missing" in str(ei.value)
    assert ei.value.path == "lens.fill"


def test_load_config_empty_env_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NESTLENS_FILL", "")

    p = tmp_path / "nestlens.yaml"
    p.write_text("lens:\n  fill: ${NESTLENS_FILL}\n", encoding="utf-8")

    with pytest.raises(ConfigError) as ei:
        load_config(p)

    assert "empty" in str(ei.value)


@pytest.mark.parametrize(
    ("text", "path"),
    [
        ("lens:\n  index_policy: wrap\n", "lens.index_policy"),
        ("output:\n  format: xml\n", "output.format"),
        ("logging:\n  level: chatty\n", "logging.level"),
        ("lens: [1, 2]\n", "lens"),
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, text: str, path: str) -> None:
    p = tmp_path / "nestlens.yaml"
    p.write_text(text, encoding="utf-8")

    with pytest.raises(ConfigError) as ei:
        load_config(p)

    assert ei.value.path == path


def test_load_config_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.yaml")


def test_load_config_top_level_must_be_mapping(tmp_path: Path) -> None:
    p = tmp_path / "nestlens.yaml"
    p.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(p)


def test_repo_config_loadable() -> None:
    cfg = load_config(Path(__file__).resolve().parents[1] / "configs" / "nestlens.yaml")
    assert cfg.index_policy is IndexPolicy.PAD
    assert cfg.output == "json"
