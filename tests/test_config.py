"""
Tests for configuration loading — equatable.yml parsing and validation.
"""

import textwrap
from pathlib import Path

import pytest

from equatable_gen.core.config.loader import ConfigError, find_settings_file, load_settings


@pytest.fixture
def flat_settings_yml(tmp_path: Path) -> Path:
    path = tmp_path / "equatable.yml"
    path.write_text("indent_width: 2\naccess_level: internal\n")
    return path


@pytest.fixture
def wrapped_settings_yml(tmp_path: Path) -> Path:
    """Settings nested under an 'equatable:' key."""
    content = textwrap.dedent("""\
        equatable:
          indent_width: 3
    """)
    path = tmp_path / "equatable.yml"
    path.write_text(content)
    return path


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_load_flat(self, flat_settings_yml: Path):
        settings = load_settings(flat_settings_yml)
        assert settings.indent_width == 2
        assert settings.access_level == "internal"

    def test_load_wrapped(self, wrapped_settings_yml: Path):
        settings = load_settings(wrapped_settings_yml)
        assert settings.indent_width == 3
        assert settings.access_level == "public"

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "equatable.yml"
        path.write_text("")
        assert load_settings(path).indent_width == 4

    def test_no_file_gives_defaults(self, isolated_cwd: Path):
        settings = load_settings()
        assert settings.indent_width == 4
        assert settings.access_level == "public"

    def test_auto_search_finds_parent(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        (tmp_path / "equatable.yml").write_text("indent_width: 8\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        assert load_settings().indent_width == 8

    def test_search_disabled(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        (tmp_path / "equatable.yml").write_text("indent_width: 8\n")
        monkeypatch.chdir(tmp_path)
        assert load_settings(search=False).indent_width == 4

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path / "nonexistent.yml")

    def test_invalid_yaml_raises(self, tmp_path: Path):
        path = tmp_path / "equatable.yml"
        path.write_text(":: invalid: yaml: [")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(path)

    def test_non_mapping_raises(self, tmp_path: Path):
        path = tmp_path / "equatable.yml"
        path.write_text("- just\n- a\n- list\n")
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_settings(path)

    def test_non_mapping_section_raises(self, tmp_path: Path):
        path = tmp_path / "equatable.yml"
        path.write_text("equatable: 4\n")
        with pytest.raises(ConfigError, match="to be a mapping"):
            load_settings(path)

    def test_invalid_value_raises(self, tmp_path: Path):
        path = tmp_path / "equatable.yml"
        path.write_text("access_level: open\n")
        with pytest.raises(ConfigError, match="Invalid settings"):
            load_settings(path)


class TestFindSettingsFile:
    """Tests for find_settings_file()."""

    def test_find_in_current_dir(self, tmp_path: Path):
        (tmp_path / "equatable.yml").write_text("indent_width: 2\n")
        result = find_settings_file(tmp_path)
        assert result is not None
        assert result.name == "equatable.yml"

    def test_find_in_parent_dir(self, tmp_path: Path):
        (tmp_path / "equatable.yml").write_text("indent_width: 2\n")
        subdir = tmp_path / "src" / "models"
        subdir.mkdir(parents=True)
        result = find_settings_file(subdir)
        assert result is not None
        assert result.parent == tmp_path

    def test_not_found_returns_none(self, tmp_path: Path):
        subdir = tmp_path / "deep" / "nested"
        subdir.mkdir(parents=True)
        assert find_settings_file(subdir) is None
