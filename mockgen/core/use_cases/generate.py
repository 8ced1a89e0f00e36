"""
Generate use case — resolve config, run the walk, summarise the result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from mockgen.core.config.loader import ConfigError, resolve_config
from mockgen.core.models.config import GeneratorConfig, Layout
from mockgen.core.models.unit import OutputUnit
from mockgen.core.services.tree_walker import generate_classes


@dataclass
class GenerateResult:
    """Outcome of one generation run."""

    config: GeneratorConfig | None = None
    config_path: Path | None = None
    units: list[OutputUnit] = field(default_factory=list)
    dry_run: bool = False
    error: str | None = None

    @property
    def unit_count(self) -> int:
        return len(self.units)

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        if self.error:
            return {"error": self.error}

        assert self.config is not None
        return {
            "config_path": str(self.config_path) if self.config_path else None,
            "input": str(self.config.input),
            "output": str(self.config.output),
            "layout": self.config.layout,
            "dry_run": self.dry_run,
            "units": [u.to_dict() for u in self.units],
            "total": self.unit_count,
        }


def run_generate(
    config_path: Path | None = None,
    *,
    input_root: Path | None = None,
    output_root: Path | None = None,
    layout: Layout | None = None,
    dry_run: bool = False,
) -> GenerateResult:
    """Generate mock action classes for a whole config tree.

    Args:
        config_path: Explicit mockgen.yml (default: search upward, else defaults).
        input_root: Overrides the configured input root.
        output_root: Overrides the configured output root.
        layout: Overrides the configured layout.
        dry_run: Plan units without writing.
    """
    result = GenerateResult(dry_run=dry_run)

    try:
        config, result.config_path = resolve_config(config_path)
    except ConfigError as e:
        result.error = str(e)
        return result

    overrides: dict = {}
    if input_root is not None:
        overrides["input"] = input_root.resolve()
    if output_root is not None:
        overrides["output"] = output_root.resolve()
    if layout is not None:
        overrides["layout"] = layout
    if overrides:
        config = config.model_copy(update=overrides)
    result.config = config

    if not config.input.is_dir():
        result.error = f"Input root does not exist: {config.input}"
        return result

    result.units = generate_classes(config.input, config.output, config, dry_run=dry_run)
    return result
