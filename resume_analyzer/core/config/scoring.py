from __future__ import annotations

import logging
from importlib.resources import files
from typing import Any

import yaml

logger = logging.getLogger(__name__)

_SCORING_CONFIG_CACHE: dict[str, Any] | None = None
_SCORING_CONFIG_PATH = files("resume_analyzer.core.config") / "scoring.yaml"


def get_scoring_config() -> dict[str, Any]:
    """Load the packaged scoring.yaml once and cache it.

    A missing file yields an empty mapping, so every lookup falls back to the
    default given at its call site. An unreadable or malformed file raises
    ``RuntimeError``.
    """
    global _SCORING_CONFIG_CACHE

    if _SCORING_CONFIG_CACHE is not None:
        return _SCORING_CONFIG_CACHE

    if not _SCORING_CONFIG_PATH.is_file():
        logger.warning("scoring_config_missing path=%s using_defaults=true", _SCORING_CONFIG_PATH)
        _SCORING_CONFIG_CACHE = {}
        return _SCORING_CONFIG_CACHE

    try:
        raw = _SCORING_CONFIG_PATH.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(
            f"Failed to read scoring config '{_SCORING_CONFIG_PATH}': {exc}"
        ) from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(
            f"Invalid YAML in scoring config '{_SCORING_CONFIG_PATH}': {exc}"
        ) from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(
            f"Invalid scoring config '{_SCORING_CONFIG_PATH}': expected a top-level mapping."
        )

    _SCORING_CONFIG_CACHE = parsed
    return _SCORING_CONFIG_CACHE


def reload_scoring_config() -> dict[str, Any]:
    """Drop the cached mapping and read the file again."""
    global _SCORING_CONFIG_CACHE
    _SCORING_CONFIG_CACHE = None
    return get_scoring_config()


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Get nested config value using dot path notation, e.g. 'keywords.max_missing'."""
    if not path:
        return default

    current: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current
