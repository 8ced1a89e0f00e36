"""
Tree walker — mirror the input config tree and emit one unit per generator.

The input root is laid out as::

    <root>/[default.yaml]
    <root>/<domain>/[default.yaml]
    <root>/<domain>/<version>/<api>/.../generator*.ts

Walking starts at each version folder and recurses through every API
folder below it.  The default-data path resolved at one level is handed
to the next, so a folder inherits the nearest ancestor's default.yaml.

Two layouts are supported (``GeneratorConfig.layout``):

    nested   every exported generator symbol becomes its own unit folder
             ``<api>_<symbol>[_<n>]`` under the mirrored output folder
    flat     a folder holding ``generator.ts`` is itself the unit
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from mockgen.core.models.config import GeneratorConfig
from mockgen.core.models.unit import OutputUnit
from mockgen.core.services.data_files import resolve_default_data, resolve_save_data
from mockgen.core.services.emitter import emit
from mockgen.core.services.generators.mock_class import folder_class_name, symbol_class_name
from mockgen.core.services.generators.symbols import (
    detect_generator_symbol,
    is_generator_file,
    read_generator_symbols,
)

logger = logging.getLogger(__name__)


def _subfolders(folder: Path) -> list[Path]:
    return sorted((p for p in folder.iterdir() if p.is_dir()), key=lambda p: p.name)


# ── Unit planning ───────────────────────────────────────────────


def _plan_nested(
    input_folder: Path,
    output_folder: Path,
    entries: list[Path],
    default_data: Path | None,
    save_data: Path | None,
    config: GeneratorConfig,
) -> Iterator[OutputUnit]:
    generator_files = [e for e in entries if is_generator_file(e, config.extension)]
    planned: set[str] = set()

    for generator_file in generator_files:
        names = read_generator_symbols(generator_file)
        if not names:
            logger.debug("No exported generator in %s, skipping", generator_file)
            continue

        for index, name in enumerate(names, start=1):
            suffix = f"_{index}" if len(names) > 1 else ""
            unit_name = f"{input_folder.name}_{name}{suffix}"
            if unit_name in planned:
                # Same symbol from another file in this folder: keep both units
                unit_name = f"{input_folder.name}_{generator_file.stem}_{name}{suffix}"
                logger.warning(
                    "%s also exports %s; writing it to %s", generator_file, name, unit_name
                )
            planned.add(unit_name)
            yield OutputUnit(
                folder=output_folder / unit_name,
                symbol=name,
                class_name=symbol_class_name(name),
                display_name=name,
                generator_source=generator_file,
                default_data=default_data,
                save_data=save_data,
            )


def _plan_flat(
    input_folder: Path,
    output_folder: Path,
    entries: list[Path],
    default_data: Path | None,
    save_data: Path | None,
    config: GeneratorConfig,
) -> Iterator[OutputUnit]:
    generator_file = next(
        (e for e in entries if is_generator_file(e, config.extension, exact=True)),
        None,
    )
    if generator_file is None:
        return

    symbol = detect_generator_symbol(generator_file.read_text(encoding="utf-8", errors="replace"))
    if symbol is None:
        if config.fallback_symbol is None:
            logger.debug("No exported generator in %s, skipping", generator_file)
            return
        logger.debug("No exported generator in %s, using %s", generator_file, config.fallback_symbol)
        symbol = config.fallback_symbol

    yield OutputUnit(
        folder=output_folder,
        symbol=symbol,
        class_name=folder_class_name(input_folder.name),
        display_name=input_folder.name,
        generator_source=generator_file,
        default_data=default_data,
        save_data=save_data,
    )


# ── Public API ──────────────────────────────────────────────────


def walk(
    input_folder: Path,
    output_folder: Path,
    inherited_default: Path | None,
    config: GeneratorConfig,
    *,
    dry_run: bool = False,
) -> list[OutputUnit]:
    """Process one folder and everything below it.

    Args:
        input_folder: Folder to scan.
        output_folder: Mirrored output folder, created if missing.
        inherited_default: Nearest ancestor's default-data file.
        config: Run configuration.
        dry_run: Plan units without writing anything.

    Returns:
        Units emitted for this subtree, in walk order.
    """
    if not input_folder.is_dir():
        logger.error("Input folder does not exist: %s", input_folder)
        return []

    if not dry_run:
        output_folder.mkdir(parents=True, exist_ok=True)

    entries = sorted(input_folder.iterdir(), key=lambda p: p.name)
    default_data = resolve_default_data(input_folder, inherited_default, config.default_data)
    save_data = resolve_save_data(input_folder, config.save_data)

    plan = _plan_flat if config.layout == "flat" else _plan_nested
    units = [
        emit(unit, config, dry_run=dry_run)
        for unit in plan(input_folder, output_folder, entries, default_data, save_data, config)
    ]

    for entry in entries:
        if entry.is_dir():
            units.extend(
                walk(entry, output_folder / entry.name, default_data, config, dry_run=dry_run)
            )

    return units


def generate_classes(
    input_root: Path,
    output_root: Path,
    config: GeneratorConfig | None = None,
    *,
    dry_run: bool = False,
) -> list[OutputUnit]:
    """Walk every ``<domain>/<version>`` folder under the input root.

    A missing input root is logged and nothing is processed.

    Returns:
        All emitted units.
    """
    config = config or GeneratorConfig()

    if not input_root.is_dir():
        logger.error("Input root does not exist: %s", input_root)
        return []

    root_default = resolve_default_data(input_root, None, config.default_data)
    units: list[OutputUnit] = []

    for domain in _subfolders(input_root):
        domain_default = resolve_default_data(domain, root_default, config.default_data)

        for version in _subfolders(domain):
            units.extend(
                walk(
                    version,
                    output_root / domain.name / version.name,
                    domain_default,
                    config,
                    dry_run=dry_run,
                )
            )

    logger.info("All API folders processed: %d unit(s) generated", len(units))
    return units
