"""
Shared test fixtures and configuration.
"""

import logging
import textwrap
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Drop handlers installed by setup_logging() during CLI and logging tests."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


FOO_GENERATOR = textwrap.dedent("""\
    import { SessionData } from "../../session-types";

    export async function fooGenerator(existingPayload: any, sessionData: SessionData) {
      return existingPayload;
    }
""")

BAR_GENERATORS = textwrap.dedent("""\
    export async function barGenerator(existingPayload: any, sessionData: any) {
      return existingPayload;
    }

    export const barListGenerator = async (existingPayload: any, sessionData: any) => {
      return [existingPayload];
    };

    function helper() {}
""")


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


@pytest.fixture
def config_tree(tmp_path: Path) -> Path:
    """Build a small old-config tree.

    old-config/
      default.yaml                          (root default)
      domainA/default.yaml                  (domain default)
      domainA/v1/fooApi/generator.ts        fooGenerator, save-data.yaml
      domainA/v1/barApi/barGenerators.ts    barGenerator + barListGenerator,
                                            local default.yaml
      domainA/v1/group/deepApi/generator.ts deepGenerator (no generator in group/)
      domainB/v2/bazApi/generator.ts        bazGenerator (root default only)
    """
    root = tmp_path / "old-config"
    _write(root / "default.yaml", "source: root\n")
    _write(root / "domainA" / "default.yaml", "source: domainA\n")

    foo = root / "domainA" / "v1" / "fooApi"
    _write(foo / "generator.ts", FOO_GENERATOR)
    _write(foo / "save-data.yaml", "token: $.context.token\n")

    bar = root / "domainA" / "v1" / "barApi"
    _write(bar / "barGenerators.ts", BAR_GENERATORS)
    _write(bar / "default.yaml", "source: barApi\n")

    deep = root / "domainA" / "v1" / "group" / "deepApi"
    _write(deep / "generator.ts", "export const deepGenerator = (payload, session) => payload;\n")

    baz = root / "domainB" / "v2" / "bazApi"
    _write(baz / "generator.ts", "export function bazGenerator(payload, session) {}\n")

    return root


@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    """Return a not-yet-existing output root."""
    return tmp_path / "new-config"
