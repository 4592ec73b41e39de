"""Tests for build configuration loading and command-line overrides."""

import json
from pathlib import Path

import pytest

from mould.codegen import DEFAULT_THEME
from mould.config import BuildConfig, load_build_config, locate_config_file


class TestLocateConfigFile:
    """Test configuration file discovery."""

    def test_no_file(self, tmp_path):
        """Test that an empty workspace has no configuration file."""
        assert locate_config_file(tmp_path) is None

    def test_toml_preferred_over_rc(self, tmp_path):
        """Test that mould.toml wins over .mouldrc."""
        (tmp_path / "mould.toml").write_text("[build]\n", encoding="utf-8")
        (tmp_path / ".mouldrc").write_text("{}", encoding="utf-8")
        assert locate_config_file(tmp_path) == tmp_path / "mould.toml"

    def test_explicit_path_is_returned_as_given(self, tmp_path):
        """Test that an explicit path is never swapped for a discovered one."""
        (tmp_path / "mould.toml").write_text("[build]\n", encoding="utf-8")
        explicit = tmp_path / "other.toml"
        assert locate_config_file(tmp_path, explicit) == explicit


class TestLoadBuildConfig:
    """Test load_build_config() with and without a file."""

    def test_defaults_without_file(self, tmp_path):
        """Test that the workspace becomes the output directory by default."""
        config = load_build_config(tmp_path)
        assert config.out == tmp_path.resolve()
        assert config.package == "myform"
        assert config.default_user == "mouldy"
        assert config.theme_defaults == DEFAULT_THEME
        assert config.source is None

    def test_toml(self, tmp_path):
        """Test every [build] key and a partial [theme] section."""
        (tmp_path / "mould.toml").write_text(
            "[build]\n"
            'out = "dist"\n'
            'package = "stickers"\n'
            'default_user = "robin"\n'
            'stylesheet = "styles/site.css"\n'
            "strict = true\n"
            "\n"
            "[theme]\n"
            'title_color = "gold"\n',
            encoding="utf-8",
        )
        config = load_build_config(tmp_path)
        root = tmp_path.resolve()
        assert config.source == root / "mould.toml"
        assert config.out == root / "dist"
        assert config.package_dir == root / "dist" / "stickers"
        assert config.default_user == "robin"
        assert config.stylesheet == root / "styles" / "site.css"
        assert config.strict is True
        assert config.theme_defaults.title_color == "gold"
        assert config.theme_defaults.background == DEFAULT_THEME.background

    def test_json_rc(self, tmp_path):
        """Test that .mouldrc is read as JSON."""
        (tmp_path / ".mouldrc").write_text(
            json.dumps({"build": {"form_page": "form.html"}}),
            encoding="utf-8",
        )
        config = load_build_config(tmp_path)
        assert config.form_page == "form.html"
        assert config.response_page == "response-template.html"

    def test_missing_explicit_file_is_an_error(self, tmp_path):
        """Test that a missing explicit file is not replaced by the defaults."""
        with pytest.raises(FileNotFoundError):
            load_build_config(tmp_path, tmp_path / "missing.toml")


class TestOverrides:
    """Test BuildConfig.with_overrides()."""

    def test_none_values_are_ignored(self):
        """Test that unset command-line flags keep the file values."""
        config = BuildConfig(package="stickers").with_overrides(package=None, out=Path("build"))
        assert config.package == "stickers"
        assert config.out == Path("build")

    def test_original_is_unchanged(self):
        """Test that overrides return a copy."""
        config = BuildConfig()
        config.with_overrides(strict=True)
        assert config.strict is False
