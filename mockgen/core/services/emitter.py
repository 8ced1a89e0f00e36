"""
Unit emitter — write one output unit to disk.

A unit folder receives:

    generator<ext>   verbatim copy of the generator source
    default.yaml     resolved default data (if any)
    save-data.yaml   save data (if any)
    class<ext>       rendered mock action class

Existing files are overwritten.  File-system errors propagate.
"""

from __future__ import annotations

import logging
import shutil

from mockgen.core.models.config import GeneratorConfig
from mockgen.core.models.unit import OutputUnit
from mockgen.core.services.generators.mock_class import render_mock_class

logger = logging.getLogger(__name__)

# Filenames the rendered class loads at runtime
DEFAULT_DATA_FILENAME = "default.yaml"
SAVE_DATA_FILENAME = "save-data.yaml"


def emit(unit: OutputUnit, config: GeneratorConfig, *, dry_run: bool = False) -> OutputUnit:
    """Write a unit folder.

    Args:
        unit: The unit to emit.
        config: Run configuration (filenames, import paths).
        dry_run: Log what would be written, touch nothing.

    Returns:
        The same unit, for chaining into result lists.
    """
    rendered = render_mock_class(
        unit.symbol,
        unit.class_name,
        unit.display_name,
        base_import=config.base_import,
        session_import=config.session_import,
        filename=config.class_filename,
    )

    if dry_run:
        logger.info("[dry-run] Would generate %s for %s in %s", rendered.path, unit.symbol, unit.folder)
        return unit

    unit.folder.mkdir(parents=True, exist_ok=True)

    shutil.copyfile(unit.generator_source, unit.folder / config.generator_filename)

    if unit.default_data is not None:
        shutil.copyfile(unit.default_data, unit.folder / DEFAULT_DATA_FILENAME)

    if unit.save_data is not None:
        shutil.copyfile(unit.save_data, unit.folder / SAVE_DATA_FILENAME)

    (unit.folder / rendered.path).write_text(rendered.content, encoding="utf-8")
    logger.info("Generated %s for %s in %s", rendered.path, unit.symbol, unit.folder)
    return unit
