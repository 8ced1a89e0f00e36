"""
Tests for the mock action class renderer.
"""

from mockgen.core.services.generators.mock_class import (
    folder_class_name,
    render_mock_class,
    symbol_class_name,
)


def _render(**overrides):
    kwargs = dict(
        symbol="fooGenerator",
        class_name="FooGeneratorClass",
        display_name="fooGenerator",
        base_import="../../../../classes/mock-action",
        session_import="../../../../session-types",
    )
    kwargs.update(overrides)
    symbol = kwargs.pop("symbol")
    class_name = kwargs.pop("class_name")
    display_name = kwargs.pop("display_name")
    return render_mock_class(symbol, class_name, display_name, **kwargs)


class TestClassNames:
    def test_symbol_class_name(self):
        assert symbol_class_name("fooGenerator") == "FooGeneratorClass"

    def test_symbol_class_name_already_capitalised(self):
        assert symbol_class_name("BarGenerator") == "BarGeneratorClass"

    def test_folder_class_name(self):
        assert folder_class_name("get_user_api") == "MockGetUserApiClass"

    def test_folder_class_name_single_word(self):
        assert folder_class_name("search") == "MockSearchClass"

    def test_folder_class_name_skips_empty_segments(self):
        assert folder_class_name("_on__search_") == "MockOnSearchClass"

    def test_folder_class_name_non_identifier_characters(self):
        assert folder_class_name("on-search.v2") == "MockOnSearchV2Class"


class TestRenderMockClass:
    def test_metadata(self):
        result = _render()
        assert result.path == "class.ts"
        assert "fooGenerator" in result.reason

    def test_custom_filename(self):
        assert _render(filename="class.js").path == "class.js"

    def test_import_and_call(self):
        """The symbol is both the imported binding and the call target."""
        content = _render().content
        assert 'import { fooGenerator } from "./generator";' in content
        assert "return fooGenerator(existingPayload, sessionData);" in content

    def test_class_declaration(self):
        content = _render().content
        assert "export class FooGeneratorClass extends MockAction {" in content

    def test_imports(self):
        content = _render(base_import="@runtime/mock-action", session_import="@runtime/session").content
        assert 'import { MockAction, MockOutput, saveType } from "@runtime/mock-action";' in content
        assert 'import { SessionData } from "@runtime/session";' in content
        assert 'import yaml from "js-yaml";' in content

    def test_display_name(self):
        content = _render(display_name="fooApi").content
        assert 'return "fooApi";' in content
        assert 'return "Mock for fooApi";' in content

    def test_display_name_escaped(self):
        content = _render(display_name='say "hi" \\ bye').content
        assert 'return "say \\"hi\\" \\\\ bye";' in content
        assert 'return "Mock for say \\"hi\\" \\\\ bye";' in content

    def test_contract_members(self):
        """Every member the runtime framework expects is present."""
        content = _render().content
        for member in (
            "get saveData(): saveType {",
            "get defaultData(): any {",
            "get inputs(): any {",
            "name(): string {",
            "generator(existingPayload: any, sessionData: SessionData): Promise<any> {",
            "get description(): string {",
            "async validate(targetPayload: any, sessionData: SessionData): Promise<MockOutput> {",
            "async meetRequirements(sessionData: SessionData): Promise<MockOutput> {",
        ):
            assert member in content, f"Missing: {member}"

    def test_data_file_paths(self):
        content = _render().content
        assert 'path.resolve(__dirname, "./save-data.yaml")' in content
        assert 'path.resolve(__dirname, "./default.yaml")' in content

    def test_braces_rendered_literally(self):
        content = _render().content
        assert "return {};" in content
        assert "return { valid: true };" in content
        assert "{{" not in content
        assert content.count("{") == content.count("}")

    def test_deterministic(self):
        assert _render().content == _render().content
