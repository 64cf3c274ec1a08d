"""
Configuration loader — reads constgen.yml into GeneratorSettings.

This is the primary entry point for loading generator configuration.
It reads YAML, validates against Pydantic schemas, and returns a
typed settings object. A project without a config file gets the
defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from constgen.core.models.settings import GeneratorSettings

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "constgen.yml"


class ConfigError(Exception):
    """Raised when generator configuration is invalid or unreadable."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for constgen.yml starting from the given directory, walking up.

    This allows running commands from inside ``Assets/`` and still
    finding the project root.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to constgen.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_settings(path: Path | None = None) -> GeneratorSettings:
    """Load and validate generator settings.

    Args:
        path: Explicit path to constgen.yml. If None, searches upward
            and falls back to defaults when nothing is found.

    Returns:
        Validated GeneratorSettings.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No %s found, using default settings", CONFIG_FILE)
            return GeneratorSettings()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading generator config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"{path} is not UTF-8 text: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = GeneratorSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid generator configuration: {e}") from e

    logger.info(
        "Loaded settings from %s (output: %s/%s)",
        path, settings.assets_dir, settings.output.base_dir,
    )
    return settings