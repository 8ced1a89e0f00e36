"""
Mock action class generator — render the class file for one output unit.

The rendered class is a thin adapter around the generator symbol: it
loads the copied YAML data files, forwards ``generator()`` to the
symbol and always validates.  Its base type (``MockAction``) lives in
the runtime framework, not here.
"""

from __future__ import annotations

import json
import re

from mockgen.core.models.template import GeneratedFile


_MOCK_CLASS_TEMPLATE = """\
import {{ readFileSync }} from "fs";
import yaml from "js-yaml";
import path from "path";
import {{ MockAction, MockOutput, saveType }} from "{base_import}";
import {{ SessionData }} from "{session_import}";
import {{ {symbol} }} from "./generator";

export class {class_name} extends MockAction {{
  get saveData(): saveType {{
    return yaml.load(
      readFileSync(path.resolve(__dirname, "./save-data.yaml"), "utf8")
    ) as saveType;
  }}

  get defaultData(): any {{
    return yaml.load(
      readFileSync(path.resolve(__dirname, "./default.yaml"), "utf8")
    );
  }}

  get inputs(): any {{
    return {{}};
  }}

  name(): string {{
    return "{display_name}";
  }}

  generator(existingPayload: any, sessionData: SessionData): Promise<any> {{
    return {symbol}(existingPayload, sessionData);
  }}

  get description(): string {{
    return "Mock for {display_name}";
  }}

  async validate(targetPayload: any, sessionData: SessionData): Promise<MockOutput> {{
    return {{ valid: true }};
  }}

  async meetRequirements(sessionData: SessionData): Promise<MockOutput> {{
    return {{ valid: true }};
  }}
}}
"""


def _ts_string(value: str) -> str:
    """Escape a value for use inside a double-quoted TypeScript string."""
    return json.dumps(value)[1:-1]


def symbol_class_name(symbol: str) -> str:
    """``fooGenerator`` → ``FooGeneratorClass``."""
    return symbol[:1].upper() + symbol[1:] + "Class"


def folder_class_name(folder_name: str) -> str:
    """``get_user_api`` → ``MockGetUserApiClass``.

    Any run of characters that cannot appear in an identifier separates
    words; empty segments are dropped.
    """
    words = [w for w in re.split(r"[^A-Za-z0-9]+", folder_name) if w]
    return "Mock" + "".join(w[0].upper() + w[1:] for w in words) + "Class"


def render_mock_class(
    symbol: str,
    class_name: str,
    display_name: str,
    *,
    base_import: str,
    session_import: str,
    filename: str = "class.ts",
) -> GeneratedFile:
    """Render the mock action class source.

    Args:
        symbol: Generator symbol, imported from ``./generator`` and called.
        class_name: Identifier of the exported class.
        display_name: Returned by ``name()`` and used in ``description``.
        base_import: Module path providing MockAction/MockOutput/saveType.
        session_import: Module path providing SessionData.
        filename: Output filename inside the unit folder.
    """
    content = _MOCK_CLASS_TEMPLATE.format(
        symbol=symbol,
        class_name=class_name,
        display_name=_ts_string(display_name),
        base_import=_ts_string(base_import),
        session_import=_ts_string(session_import),
    )
    return GeneratedFile(
        path=filename,
        content=content,
        reason=f"Mock action class for {symbol}",
    )
