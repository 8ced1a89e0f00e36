"""
Config check use case — validate mockgen.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from mockgen.core.config.loader import CONFIG_FILE, ConfigError, find_config_file, load_config
from mockgen.core.models.config import GeneratorConfig


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: GeneratorConfig | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "input": str(self.config.input) if self.config else None,
            "output": str(self.config.output) if self.config else None,
            "layout": self.config.layout if self.config else None,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate generator configuration and report issues.

    Args:
        config_path: Optional explicit path to mockgen.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()

    if config_path is None:
        result.errors.append(f"No {CONFIG_FILE} found.")
        return result

    result.config_path = config_path

    try:
        config = load_config(config_path)
        result.config = config
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    # Semantic checks
    if not config.input.is_dir():
        result.warnings.append(f"Input root does not exist: {config.input}")

    if config.output.resolve() == config.input.resolve():
        result.errors.append("Output root must differ from the input root.")
    elif config.output.resolve().is_relative_to(config.input.resolve()):
        result.warnings.append(
            "Output root is inside the input root; generated files will be "
            "picked up as input on the next run."
        )

    if config.fallback_symbol is not None and config.layout != "flat":
        result.warnings.append("fallback_symbol is only used by the flat layout; ignored.")

    result.valid = len(result.errors) == 0
    return result
