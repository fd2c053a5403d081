"""
Run configuration for distwiz.

Settings come from three layers, later ones winning: built-in defaults,
an optional YAML file, and command-line flags. A YAML file may hold the
keys at the top level or under a ``distwiz:`` section, e.g.::

    distwiz:
      compress_level: 6
      mode: auto
      threshold: 20000
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError
from .selector import DEFAULT_THRESHOLD, parse_mode
from .sink import DEFAULT_COMPRESS_LEVEL, validate_compress_level

DEFAULT_CONFIG = {
    "compress_level": DEFAULT_COMPRESS_LEVEL,
    "mode": "auto",
    "threshold": DEFAULT_THRESHOLD,
    "progress_every": 1000,
}

KNOWN_KEYS = {"input", "output"} | set(DEFAULT_CONFIG)


def load_config(config_path) -> Dict[str, Any]:
    """
    Read settings from a YAML file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Dictionary of settings (empty for an empty file)

    Raises:
        ConfigError: If the file is missing, unreadable or not a mapping
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        cfg = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if not isinstance(cfg, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    if "distwiz" in cfg:
        cfg = cfg["distwiz"] or {}
        if not isinstance(cfg, dict):
            raise ConfigError(f"'distwiz' section of {path} must be a mapping")

    unknown = set(cfg) - KNOWN_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(sorted(unknown))}")

    return cfg


def merge_config(file_config: Optional[Dict[str, Any]] = None,
                 overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Layer defaults, file settings and non-None overrides."""
    config = dict(DEFAULT_CONFIG)
    config.update(file_config or {})
    for key, value in (overrides or {}).items():
        if value is not None:
            config[key] = value
    return config


def _non_negative_int(config, key):
    value = config.get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"'{key}' must be a non-negative integer, got {value!r}")
    return value


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check a merged configuration before any file is touched.

    Returns:
        A normalised copy: paths as Path, mode as Mode, level as int

    Raises:
        ConfigError: On a missing path or an out-of-range value
    """
    for key in ("input", "output"):
        if not config.get(key):
            raise ConfigError(f"Missing required setting: {key} path")

    return {
        "input": Path(config["input"]),
        "output": Path(config["output"]),
        "compress_level": validate_compress_level(config.get("compress_level")),
        "mode": parse_mode(config.get("mode")),
        "threshold": _non_negative_int(config, "threshold"),
        "progress_every": _non_negative_int(config, "progress_every"),
    }
