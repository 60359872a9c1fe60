"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from revved_finder.deep_merge import deep_merge

REWRITE_PATTERNS = ("url", "src", "href")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_CONFIG: dict[str, Any] = {
    "search_dirs": ["."],
    "mapping": {},
    "log_level": "WARNING",
    "rewrite": {
        "patterns": list(REWRITE_PATTERNS),
    },
}


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as e:
                msg = f"Invalid YAML in {p}: {e}"
                raise ConfigError(msg) from e
            if not isinstance(user_config, dict):
                msg = f"Expected a mapping at the top of {p}"
                raise ConfigError(msg)
            config = deep_merge(config, user_config)
    _validate(config, path)
    return config


def _validate(config: dict[str, Any], path: str | None) -> None:
    source = path or "defaults"

    search_dirs = config["search_dirs"]
    if isinstance(search_dirs, str):
        config["search_dirs"] = [search_dirs]
    elif not isinstance(search_dirs, list) or not all(
        isinstance(d, str) for d in search_dirs
    ):
        msg = f"search_dirs must be a list of directories ({source})"
        raise ConfigError(msg)

    mapping = config["mapping"]
    if not isinstance(mapping, dict):
        msg = f"mapping must be a dictionary of original -> revved paths ({source})"
        raise ConfigError(msg)
    config["mapping"] = {str(k): str(v) for k, v in mapping.items()}

    log_level = str(config["log_level"]).upper()
    if log_level not in LOG_LEVELS:
        msg = f"Unknown log_level {config['log_level']!r} ({source})"
        raise ConfigError(msg)
    config["log_level"] = log_level

    rewrite = config["rewrite"]
    patterns = rewrite.get("patterns", []) if isinstance(rewrite, dict) else None
    if not isinstance(patterns, list) or not all(
        isinstance(p, str) for p in patterns
    ):
        msg = f"rewrite.patterns must be a list of names ({source})"
        raise ConfigError(msg)
    unknown = sorted(set(patterns) - set(REWRITE_PATTERNS))
    if unknown:
        msg = f"Unknown rewrite patterns {unknown} ({source})"
        raise ConfigError(msg)
