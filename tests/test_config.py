from __future__ import annotations

import os
from pathlib import Path

import pytest
from config import ConfigurationSet

from cricviz.config import create_config, resolve_db_path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all CRICVIZ__ env vars so tests are isolated from the shell."""
    for key in list(os.environ):
        if key.startswith("CRICVIZ__"):
            monkeypatch.delenv(key)


def test_create_config_returns_defaults() -> None:
    cfg = create_config(yaml_path="/nonexistent/cricviz.yaml")
    assert isinstance(cfg, ConfigurationSet)
    assert cfg["db.path"] == "~/.config/cricviz/cricviz.db"
    assert cfg["scorecard.encoding"] == "utf-8"


def test_yaml_overrides_defaults(tmp_path: Path) -> None:
    yaml_file = tmp_path / "cricviz.yaml"
    yaml_file.write_text("db:\n  path: /data/cricket.db\n")
    cfg = create_config(yaml_path=str(yaml_file))
    assert cfg["db.path"] == "/data/cricket.db"
    assert cfg["scorecard.encoding"] == "utf-8"


def test_env_overrides_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    yaml_file = tmp_path / "cricviz.yaml"
    yaml_file.write_text("db:\n  path: /data/cricket.db\n")
    monkeypatch.setenv("CRICVIZ__DB__PATH", "/env/cricket.db")
    cfg = create_config(yaml_path=str(yaml_file))
    assert cfg["db.path"] == "/env/cricket.db"


def test_explicit_db_path_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CRICVIZ__DB__PATH", "/env/cricket.db")
    cfg = create_config(yaml_path="/nonexistent/cricviz.yaml", db_path="/cli/cricket.db")
    assert cfg["db.path"] == "/cli/cricket.db"


def test_resolve_db_path_expands_home() -> None:
    cfg = create_config(yaml_path="/nonexistent/cricviz.yaml")
    resolved = resolve_db_path(cfg)
    assert isinstance(resolved, Path)
    assert "~" not in str(resolved)


def test_resolve_db_path_keeps_memory() -> None:
    cfg = create_config(yaml_path="/nonexistent/cricviz.yaml", db_path=":memory:")
    assert resolve_db_path(cfg) == ":memory:"
