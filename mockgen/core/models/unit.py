"""
Output unit models — what the walker discovers and the emitter writes.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class OutputUnit(BaseModel):
    """One generated folder: class file, generator copy and data files.

    Attributes:
        folder:           Output folder the unit is written to.
        symbol:           Generator symbol imported and called by the class.
        class_name:       Identifier of the rendered class.
        display_name:     Value returned by ``name()`` in the class.
        generator_source: Generator file copied into the unit.
        default_data:     Resolved default-data file, if any.
        save_data:        Save-data file, if any.
    """

    folder: Path
    symbol: str
    class_name: str
    display_name: str
    generator_source: Path
    default_data: Path | None = None
    save_data: Path | None = None

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return self.model_dump(mode="json")
