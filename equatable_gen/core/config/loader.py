"""
Configuration loader — reads equatable.yml into EmitterSettings.

The file is optional.  When none is found the defaults apply
(4-space indent, ``public`` access).
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from equatable_gen.core.models.settings import EmitterSettings

logger = logging.getLogger(__name__)

# Default config filename
SETTINGS_FILE = "equatable.yml"

# Optional wrapping key: "equatable: {indent_width: 2}"
_SECTION_KEY = "equatable"


class ConfigError(Exception):
    """Raised when the settings file is invalid or missing."""


def find_settings_file(start_dir: Path | None = None) -> Path | None:
    """Search for equatable.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to equatable.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / SETTINGS_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_settings(path: Path | None = None, *, search: bool = True) -> EmitterSettings:
    """Load and validate emitter settings.

    Args:
        path: Explicit path to equatable.yml.  Must exist when given.
        search: When ``path`` is None, look upward from cwd for the file.

    Returns:
        Validated EmitterSettings (defaults when no file is found).

    Raises:
        ConfigError: If an explicit file is missing or any file is invalid.
    """
    if path is None:
        path = find_settings_file() if search else None
        if path is None:
            logger.debug("No %s found, using defaults", SETTINGS_FILE)
            return EmitterSettings()
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    section = data.get(_SECTION_KEY, data)
    if not isinstance(section, dict):
        raise ConfigError(f"Expected '{_SECTION_KEY}' to be a mapping in {path}")

    try:
        settings = EmitterSettings.model_validate(section)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {path}: {e}") from e

    logger.info(
        "Loaded settings from %s (indent=%d, access=%s)",
        path,
        settings.indent_width,
        settings.access_level,
    )
    return settings
