"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from wordcase.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "default_style": "kebab",
    "normalization": {
        "strip_diacritics": True,
    },
    "batch": {
        "skip_blank_lines": True,
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if not path:
        return config

    p = Path(path)
    if not p.exists():
        logger.warning("Config file not found, using defaults: %s", p)
        return config

    user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(user_config, dict):
        msg = f"Config file must contain a mapping: {p}"
        raise ValueError(msg)

    logger.info("Loaded config from %s", p)
    merged = deep_merge(config, user_config)
    _check_types(merged, p)
    return merged


def _check_types(config: dict[str, Any], source: Path) -> None:
    """Reject values whose type differs from the matching default."""
    if not isinstance(config["default_style"], str):
        msg = f"default_style must be a string in {source}"
        raise ValueError(msg)
    for section in ("normalization", "batch"):
        value = config[section]
        if not isinstance(value, dict):
            msg = f"{section} must be a mapping in {source}"
            raise ValueError(msg)
        for key in DEFAULT_CONFIG[section]:
            if not isinstance(value.get(key), bool):
                msg = f"{section}.{key} must be true or false in {source}"
                raise ValueError(msg)
