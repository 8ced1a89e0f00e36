"""
Tests for default-data / save-data resolution.
"""

from pathlib import Path

from mockgen.core.services.data_files import resolve_default_data, resolve_save_data


class TestResolveDefaultData:
    def test_local_wins(self, tmp_path: Path):
        inherited = tmp_path / "parent.yaml"
        inherited.write_text("a: 1\n")
        local = tmp_path / "default.yaml"
        local.write_text("a: 2\n")
        assert resolve_default_data(tmp_path, inherited) == local

    def test_inherited_when_no_local(self, tmp_path: Path):
        inherited = tmp_path / "parent.yaml"
        inherited.write_text("a: 1\n")
        folder = tmp_path / "api"
        folder.mkdir()
        assert resolve_default_data(folder, inherited) == inherited

    def test_none_when_inherited_missing(self, tmp_path: Path):
        assert resolve_default_data(tmp_path, tmp_path / "missing.yaml") is None

    def test_none_without_inherited(self, tmp_path: Path):
        assert resolve_default_data(tmp_path, None) is None

    def test_custom_filename(self, tmp_path: Path):
        local = tmp_path / "defaults.yml"
        local.write_text("a: 1\n")
        assert resolve_default_data(tmp_path, None, "defaults.yml") == local

    def test_directory_named_like_file_ignored(self, tmp_path: Path):
        (tmp_path / "default.yaml").mkdir()
        assert resolve_default_data(tmp_path, None) is None


class TestResolveSaveData:
    def test_present(self, tmp_path: Path):
        path = tmp_path / "save-data.yaml"
        path.write_text("k: v\n")
        assert resolve_save_data(tmp_path) == path

    def test_absent(self, tmp_path: Path):
        assert resolve_save_data(tmp_path) is None
