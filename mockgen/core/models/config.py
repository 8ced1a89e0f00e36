"""
Generator configuration — loaded from mockgen.yml or built from defaults.

Paths are stored as given; relative ``input``/``output`` values are
resolved against the config file's directory by the loader.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, field_validator

# Default folder names under the working directory
DEFAULT_INPUT_DIR = "old-config"
DEFAULT_OUTPUT_DIR = "new-config"

Layout = Literal["nested", "flat"]


class GeneratorConfig(BaseModel):
    """Settings for one generation run.

    Attributes:
        input:           Input root (old config tree).
        output:          Output root (new config tree).
        layout:          ``nested`` — one numbered unit folder per symbol;
                         ``flat`` — the API folder itself is the unit.
        extension:       Extension of generator and class source files.
        default_data:    Default-data filename, looked up per folder.
        save_data:       Save-data filename, looked up per folder.
        base_import:     Import path of the MockAction base module.
        session_import:  Import path of the SessionData types module.
        fallback_symbol: Flat layout only — symbol to use when the
                         generator file exports none.
    """

    input: Path = Path(DEFAULT_INPUT_DIR)
    output: Path = Path(DEFAULT_OUTPUT_DIR)
    layout: Layout = "nested"
    extension: str = ".ts"
    default_data: str = "default.yaml"
    save_data: str = "save-data.yaml"
    base_import: str = "../../../../classes/mock-action"
    session_import: str = "../../../../session-types"
    fallback_symbol: str | None = None

    @field_validator("extension")
    @classmethod
    def _dotted_extension(cls, v: str) -> str:
        if not v:
            raise ValueError("extension must not be empty")
        return v if v.startswith(".") else f".{v}"

    @property
    def generator_filename(self) -> str:
        """Fixed filename of the copied generator source."""
        return f"generator{self.extension}"

    @property
    def class_filename(self) -> str:
        """Fixed filename of the rendered class source."""
        return f"class{self.extension}"
