from __future__ import annotations

from pathlib import Path

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

_DEFAULTS: dict[str, object] = {
    "db": {
        "path": "~/.config/cricviz/cricviz.db",
    },
    "scorecard": {
        "encoding": "utf-8",
    },
}


def create_config(
    yaml_path: str = "cricviz.yaml",
    env_prefix: str = "CRICVIZ",
    defaults: dict[str, object] | None = None,
    *,
    db_path: str | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if db_path is not None:
        layers.insert(0, config_from_dict({"db": {"path": db_path}}))

    return ConfigurationSet(*layers)


def resolve_db_path(cfg: ConfigurationSet) -> Path | str:
    raw = str(cfg["db.path"])
    if raw == ":memory:":
        return raw
    return Path(raw).expanduser()
