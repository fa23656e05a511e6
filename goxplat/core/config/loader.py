"""
Configuration loader — reads goxplat.yml into a Settings model.

The file is optional. It is looked up from the working directory upwards
unless a path is given explicitly. ``GOXPLAT_GO_VERSION`` overrides the
file's ``go_version``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from goxplat.core.models.settings import Settings

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "goxplat.yml"

ENV_GO_VERSION = "GOXPLAT_GO_VERSION"


class ConfigError(Exception):
    """Raised when the configuration file is invalid."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for goxplat.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to goxplat.yml, or None if not found.
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


def load_settings(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Load settings from a config file and the environment.

    Args:
        path: Explicit path to goxplat.yml. If None, searches upward;
            a missing file yields default settings.
        environ: Environment mapping (default: ``os.environ``).

    Returns:
        Validated Settings.

    Raises:
        ConfigError: If an explicit path is missing, or the file is not
            valid YAML or doesn't match the schema.
    """
    env = os.environ if environ is None else environ

    explicit = path is not None
    if path is None:
        path = find_config_file()

    if path is None:
        settings = Settings()
    elif not path.is_file():
        if explicit:
            raise ConfigError(f"Config file not found: {path}")
        settings = Settings()
    else:
        settings = _read_settings(path)

    go_version = env.get(ENV_GO_VERSION)
    if go_version:
        logger.debug("Go version %r taken from %s", go_version, ENV_GO_VERSION)
        settings = settings.model_copy(update={"go_version": go_version})

    return settings


def _read_settings(path: Path) -> Settings:
    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return Settings()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.info("Loaded config from %s", path)
    return settings
