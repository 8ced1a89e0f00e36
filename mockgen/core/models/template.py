"""
Generated file model — produced by the class template renderer.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A rendered source file, not yet on disk.

    Attributes:
        path:    Filename relative to the unit folder.
        content: Full file content.
        reason:  What the file was generated for.
    """

    path: str
    content: str
    reason: str = ""
