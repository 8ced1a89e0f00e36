"""
Data file resolution — which default.yaml / save-data.yaml a folder uses.

Default data is an override chain: a folder's own file wins, otherwise
the nearest ancestor's is inherited.  Save data never inherits.
Both files are opaque here; they are only ever copied.
"""

from __future__ import annotations

from pathlib import Path


def resolve_default_data(
    folder: Path,
    inherited: Path | None,
    filename: str = "default.yaml",
) -> Path | None:
    """Return the folder's own default-data file, else the inherited one.

    Returns None when neither exists on disk.
    """
    local = folder / filename
    if local.is_file():
        return local
    if inherited is not None and inherited.is_file():
        return inherited
    return None


def resolve_save_data(folder: Path, filename: str = "save-data.yaml") -> Path | None:
    """Return the folder's save-data file if it exists."""
    candidate = folder / filename
    return candidate if candidate.is_file() else None
