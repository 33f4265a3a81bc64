"""
Validation helpers for environment-driven settings.

Bad values fail at startup with a ConfigurationError naming the variable,
instead of surfacing later in the middle of an import.
"""
import os
import warnings
from pathlib import Path
from typing import Optional
from .exceptions import ConfigurationError

_PLACEHOLDER_MARKERS = ("your_", "placeholder", "replace_me", "changeme")


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Read an environment variable that may be unset.
    
    Template values left over from an example .env file (e.g.
    "your_catalog_dir") are treated as unset, with a warning.
    
    :param key: Variable name
    :param default: Value used when unset or a template value
    """
    raw = os.environ.get(key)
    if raw is None or not raw.strip():
        return default
    
    if looks_like_placeholder(raw):
        warnings.warn(f"Ignoring template value for {key}: {raw!r}", UserWarning)
        return default
    
    return raw.strip()


def parse_threshold(value: str, name: str) -> float:
    """
    Parse a matching threshold.
    
    :param value: Raw value
    :param name: Setting name (for error messages)
    :return: Threshold between 0.0 and 1.0
    :raises: ConfigurationError if not a float in range
    """
    try:
        threshold = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    
    if not 0.0 <= threshold <= 1.0:
        raise ConfigurationError(f"{name} must be between 0.0 and 1.0, got {threshold}")
    
    return threshold


def parse_ceiling(value: str, name: str) -> int:
    """
    Parse a non-negative level/grade ceiling.
    
    :raises: ConfigurationError if not a non-negative integer
    """
    try:
        ceiling = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    
    if ceiling < 0:
        raise ConfigurationError(f"{name} must not be negative, got {ceiling}")
    
    return ceiling


def validate_catalog_dir(path: str, name: str) -> str:
    """
    Check that a catalog directory exists.
    
    :raises: ConfigurationError if the path is missing or not a directory
    """
    directory = Path(path).expanduser()
    if not directory.exists():
        raise ConfigurationError(f"{name} points to a missing directory: {path}")
    if not directory.is_dir():
        raise ConfigurationError(f"{name} must be a directory of catalog JSON files, got a file: {path}")
    return str(directory)


def looks_like_placeholder(value: str) -> bool:
    lowered = value.lower()
    return any(marker in lowered for marker in _PLACEHOLDER_MARKERS)
