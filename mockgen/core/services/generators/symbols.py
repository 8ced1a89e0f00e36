"""
Generator symbol scanner — find exported generator functions in source text.

This is a lexical scan, not a parser.  Two declaration shapes are
recognised, both requiring ``generator`` (any case) inside the name:

    export [async] function fooGenerator(...)
    export const fooGenerator[: Type] = [async] (...) => ...
    export const fooGenerator[: Type] = [async] function (...)

Anything else (multi-line signatures, function-type annotations
containing "=>", re-bound names) is silently missed.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

_IDENT = r"([A-Za-z0-9_]*generator[A-Za-z0-9_]*)"

_FUNC_DECL_RE = re.compile(
    r"export\s+(?:async\s+)?function\s+" + _IDENT,
    re.IGNORECASE,
)

# Optional type annotation, then an arrow, generic arrow or function expression
_ARROW_CONST_RE = re.compile(
    r"export\s+const\s+" + _IDENT
    + r"(?:\s*:\s*[^=]+?)?\s*=\s*(?:async\s+)?(?:function\b|\(|<)",
    re.IGNORECASE,
)


def extract_generator_symbols(source: str) -> list[str]:
    """Return generator names in source order, without exact duplicates."""
    matches = [
        (m.start(), m.group(1))
        for pattern in (_FUNC_DECL_RE, _ARROW_CONST_RE)
        for m in pattern.finditer(source)
    ]
    matches.sort(key=lambda pair: pair[0])
    return list(dict.fromkeys(name for _, name in matches))


def detect_generator_symbol(source: str) -> str | None:
    """Single-symbol detector used by the flat layout.

    A function declaration wins over an arrow constant regardless of
    position; within a shape the first match wins.
    """
    for pattern in (_FUNC_DECL_RE, _ARROW_CONST_RE):
        m = pattern.search(source)
        if m:
            return m.group(1)
    return None


def read_generator_symbols(path: Path) -> list[str]:
    """Scan a generator file on disk.  Missing file → empty list."""
    if not path.is_file():
        return []
    names = extract_generator_symbols(path.read_text(encoding="utf-8", errors="replace"))
    logger.debug("Found %d generator symbol(s) in %s: %s", len(names), path, names)
    return names


def is_generator_file(path: Path, extension: str, *, exact: bool = False) -> bool:
    """Whether a directory entry is a generator source file.

    Args:
        path: Candidate entry.
        extension: Required file extension, e.g. ``.ts``.
        exact: Require the name to be exactly ``generator<extension>``
            (flat layout) instead of merely containing ``generator``.
    """
    if not path.is_file():
        return False
    name = path.name
    if exact:
        return name == f"generator{extension}"
    return "generator" in name.lower() and name.endswith(extension)
