"""
Unit tests for the bundler configuration.
"""
import json
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from packcore import config as config_module
from packcore.config import BundleConfig, load_config
from packcore.errors import ConfigError


@pytest.fixture
def no_config_files(tmp_path, monkeypatch):
    """Run with no config file on the search path."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config_module, "CONFIG_PATHS", [str(tmp_path / "minipack.json")])
    return tmp_path


def write_config(path, data):
    with open(path, "w") as f:
        f.write(data if isinstance(data, str) else json.dumps(data))
    return str(path)


class TestBundleConfig:
    """Tests for the BundleConfig model."""

    def test_defaults(self):
        config = BundleConfig()
        assert config.root == os.getcwd()
        assert config.source_root == "src"
        assert config.loader_name == "require"
        assert config.strict_imports is True
        assert config.resolve_from == "source_root"

    def test_root_made_absolute(self, no_config_files):
        config = BundleConfig(root="project")
        assert config.root == os.path.join(str(no_config_files), "project")

    def test_entry_and_output_paths(self):
        config = BundleConfig(root="/work", entry="app/main.js", output="out/app.js")
        assert config.entry_path() == "/work/app/main.js"
        assert config.output_path() == "/work/out/app.js"

    @pytest.mark.parametrize("name", ["1abc", "my-loader", "", "module"])
    def test_invalid_loader_name(self, name):
        with pytest.raises(ValueError):
            BundleConfig(loader_name=name)

    @pytest.mark.parametrize("name", ["modules", "installedModules", "moduleId", "Object"])
    def test_loader_name_clashing_with_runtime(self, name):
        with pytest.raises(ValueError) as exc_info:
            BundleConfig(loader_name=name)
        assert "bundle runtime" in str(exc_info.value)

    @pytest.mark.parametrize("name", ["class", "if", "this", "return", "yield"])
    def test_loader_name_reserved_word(self, name):
        with pytest.raises(ValueError) as exc_info:
            BundleConfig(loader_name=name)
        assert "reserved word" in str(exc_info.value)

    def test_custom_loader_name_accepted(self):
        assert BundleConfig(loader_name="__load").loader_name == "__load"

    def test_invalid_resolve_from(self):
        with pytest.raises(ValueError):
            BundleConfig(resolve_from="somewhere")


class TestLoadConfig:
    """Tests for load_config()."""

    def test_no_file_gives_defaults(self, no_config_files):
        config = load_config()
        assert config == BundleConfig(root=str(no_config_files))

    def test_reads_config_file(self, no_config_files):
        write_config(no_config_files / "minipack.json", {"source_root": "lib", "strict_imports": False})
        config = load_config()
        assert config.source_root == "lib"
        assert config.strict_imports is False

    def test_root_relative_to_config_file(self, tmp_path):
        (tmp_path / "conf").mkdir()
        path = write_config(tmp_path / "conf" / "minipack.json", {"root": ".."})
        config = load_config(path)
        assert config.root == str(tmp_path)

    def test_overrides_take_precedence(self, no_config_files):
        write_config(no_config_files / "minipack.json", {"loader_name": "load"})
        config = load_config(loader_name="req", entry=None)
        assert config.loader_name == "req"
        assert config.entry == "src/index.js"

    def test_invalid_json(self, no_config_files):
        write_config(no_config_files / "minipack.json", "{not json")
        with pytest.raises(ConfigError):
            load_config()

    def test_not_an_object(self, no_config_files):
        write_config(no_config_files / "minipack.json", [1, 2])
        with pytest.raises(ConfigError):
            load_config()

    def test_invalid_value(self, no_config_files):
        write_config(no_config_files / "minipack.json", {"loader_name": "not valid"})
        with pytest.raises(ConfigError) as exc_info:
            load_config()
        assert "loader_name" in str(exc_info.value)

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(str(tmp_path / "missing.json"))
