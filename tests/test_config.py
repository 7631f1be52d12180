"""Tests for GeneratorConfig and ConfigManager."""

import json
from pathlib import Path

import pytest

from mojo_codegen.codegen.core.config import (
    DEFAULT_MEDIA_TYPE_PACKAGE,
    SYSTEM_MIME_TYPES,
    ConfigManager,
    GeneratorConfig,
    load_config,
)
from mojo_codegen.errors import ConfigError


class TestGeneratorConfig:
    def test_defaults_derived_from_project(self, tmp_path):
        config = GeneratorConfig(project_directory=tmp_path)

        assert config.generated_sources_directory == tmp_path / "src" / "main" / "generated"
        assert config.resources_directory == tmp_path / "src" / "main" / "resources"
        assert config.output_directory == tmp_path / "target" / "classes"
        assert config.message_file_pattern == r".*_messages.xml"
        assert config.media_type_package == DEFAULT_MEDIA_TYPE_PACKAGE
        assert config.media_type_class == "MediaType"
        assert config.ignore_missing is False
        assert config.create_properties_file is False

    def test_default_overrides_system_then_user(self):
        config = GeneratorConfig()
        assert config.media_type_overrides == [
            SYSTEM_MIME_TYPES,
            Path.home() / ".mime.types",
        ]

    def test_paths_coerced(self, tmp_path):
        config = GeneratorConfig(
            project_directory=str(tmp_path), message_files=["a_messages.xml"]
        )
        assert isinstance(config.project_directory, Path)
        assert config.message_files == [Path("a_messages.xml")]

    def test_resolve(self, tmp_path):
        config = GeneratorConfig(project_directory=tmp_path)
        assert config.resolve("x/y.xml") == tmp_path / "x" / "y.xml"
        assert config.resolve(tmp_path / "abs") == tmp_path / "abs"


class TestConfigManager:
    def test_camel_case_aliases(self, tmp_path):
        config = ConfigManager().get_config(
            {
                "projectDirectory": tmp_path,
                "mediaTypePackage": "info.example",
                "generatedSourcesDirectory": "gen",
            }
        )
        assert config.media_type_package == "info.example"
        assert config.generated_sources_directory == tmp_path / "gen"

    def test_none_overrides_ignored(self, tmp_path):
        config_file = tmp_path / "codegen.json"
        config_file.write_text(json.dumps({"indent_size": 2}), encoding="utf-8")

        config = ConfigManager().get_config({"indent_size": None}, config_file)
        assert config.indent_size == 2

    def test_overrides_beat_file(self, tmp_path):
        config_file = tmp_path / "codegen.json"
        config_file.write_text(json.dumps({"indent_size": 2}), encoding="utf-8")

        config = load_config({"indent_size": 8}, config_file)
        assert config.indent_size == 8

    def test_unknown_keys_go_to_custom(self, tmp_path):
        config = ConfigManager().get_config(
            {"project_directory": tmp_path, "flavor": "vanilla"}
        )
        assert config.custom == {"flavor": "vanilla"}

    def test_comma_separated_message_files(self, tmp_path):
        config = ConfigManager().get_config(
            {"project_directory": tmp_path, "messageFiles": "a.xml, sub/b.xml"}
        )
        assert config.message_files == [tmp_path / "a.xml", tmp_path / "sub" / "b.xml"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            ConfigManager().get_config(config_file=tmp_path / "missing.json")

    def test_not_json_suffix(self, tmp_path):
        path = tmp_path / "codegen.yaml"
        path.write_text("{}", encoding="utf-8")
        with pytest.raises(ConfigError, match="must be JSON"):
            ConfigManager().get_config(config_file=path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "codegen.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            ConfigManager().get_config(config_file=path)

    def test_non_object_json(self, tmp_path):
        path = tmp_path / "codegen.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigError, match="JSON object"):
            ConfigManager().get_config(config_file=path)

    def test_validate_config(self, tmp_path):
        manager = ConfigManager()
        assert manager.validate_config(GeneratorConfig(project_directory=tmp_path)) == []

        bad = GeneratorConfig(
            project_directory=tmp_path,
            media_type_package="a..b",
            media_type_class="1Bad",
            message_file_pattern="(",
            indent_size=0,
        )
        warnings = manager.validate_config(bad)
        assert len(warnings) == 4
