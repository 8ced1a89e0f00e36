"""
Configuration loader — reads mockgen.yml into a GeneratorConfig.

The config file is optional: without one the generator runs with
defaults rooted at the working directory (``old-config`` → ``new-config``).
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from mockgen.core.models.config import GeneratorConfig

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "mockgen.yml"


class ConfigError(Exception):
    """Raised when generator configuration is invalid or missing."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for mockgen.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to mockgen.yml, or None if not found.
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


def load_config(path: Path) -> GeneratorConfig:
    """Load and validate a generator config file.

    Relative ``input`` and ``output`` paths are resolved against the
    directory holding the config file.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading generator config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

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
        config = GeneratorConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid generator configuration: {e}") from e

    base = path.parent.resolve()
    config = config.model_copy(
        update={
            "input": _anchor(config.input, base),
            "output": _anchor(config.output, base),
        }
    )
    logger.info("Loaded config: %s → %s (%s layout)", config.input, config.output, config.layout)
    return config


def default_config(cwd: Path | None = None) -> GeneratorConfig:
    """Defaults with input/output rooted at the working directory."""
    base = (cwd or Path.cwd()).resolve()
    config = GeneratorConfig()
    return config.model_copy(
        update={
            "input": _anchor(config.input, base),
            "output": _anchor(config.output, base),
        }
    )


def resolve_config(path: Path | None = None) -> tuple[GeneratorConfig, Path | None]:
    """Load an explicit config, a discovered one, or fall back to defaults.

    Returns:
        (config, config_path) — config_path is None when defaults are used.

    Raises:
        ConfigError: If an explicit or discovered file is invalid.
    """
    if path is None:
        path = find_config_file()
    if path is None:
        logger.debug("No %s found, using defaults", CONFIG_FILE)
        return default_config(), None
    return load_config(path), path


def _anchor(p: Path, base: Path) -> Path:
    return p if p.is_absolute() else base / p
