"""Tests for the generator registry."""

import pytest

from mojo_codegen.codegen import generate_artifact
from mojo_codegen.codegen.core.config import GeneratorConfig
from mojo_codegen.codegen.core.schema import ArtifactKind
from mojo_codegen.codegen.languages.java import (
    JavaConstantsGenerator,
    JavaMediaTypeGenerator,
)
from mojo_codegen.codegen.registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_kind_info,
    list_artifact_kinds,
)


class TestGlobalRegistry:
    def test_builtin_kinds(self):
        assert list_artifact_kinds() == ["constants", "enum"]

    @pytest.mark.parametrize(
        "kind, expected",
        [
            ("constants", JavaConstantsGenerator),
            ("codes", JavaConstantsGenerator),
            (ArtifactKind.TYPE_ENUM, JavaMediaTypeGenerator),
            ("MediaType", JavaMediaTypeGenerator),
        ],
    )
    def test_lookup_by_kind_or_alias(self, kind, expected, tmp_path):
        generator = get_generator(kind, GeneratorConfig(project_directory=tmp_path))
        assert isinstance(generator, expected)

    def test_kind_info(self):
        info = get_kind_info("codes")
        assert info == {
            "kind": "constants",
            "language": "java",
            "class": "JavaConstantsGenerator",
            "file_extension": ".java",
            "aliases": ["codes"],
        }

    def test_dict_config(self, tmp_path):
        generator = get_generator(
            "enum", {"project_directory": tmp_path, "indent_size": 2}
        )
        assert generator.config.indent_size == 2

    def test_generate_artifact(self, codes_spec, tmp_path):
        result = generate_artifact(codes_spec, GeneratorConfig(project_directory=tmp_path))
        assert result.success
        assert "public final class Codes {" in result.code


class TestGeneratorRegistry:
    def test_unknown_kind(self):
        with pytest.raises(RegistryError, match="No generator registered"):
            GeneratorRegistry().get_generator_class("kotlin")

    def test_rejects_non_generator(self):
        with pytest.raises(RegistryError):
            GeneratorRegistry().register("bogus", dict)

    def test_register_without_replace_keeps_first(self):
        registry = GeneratorRegistry()
        registry.register("constants", JavaConstantsGenerator)
        registry.register("constants", JavaMediaTypeGenerator)
        assert registry.get_generator_class("constants") is JavaConstantsGenerator

    def test_replace(self):
        registry = GeneratorRegistry()
        registry.register("constants", JavaConstantsGenerator)
        registry.register("constants", JavaMediaTypeGenerator, replace=True)
        assert registry.get_generator_class("constants") is JavaMediaTypeGenerator

    def test_alias_conflict(self):
        registry = GeneratorRegistry()
        registry.register("constants", JavaConstantsGenerator, aliases=["x"])
        with pytest.raises(RegistryError, match="already points"):
            registry.register("enum", JavaMediaTypeGenerator, aliases=["x"])

    def test_invalid_config_type(self):
        registry = GeneratorRegistry()
        registry.register("constants", JavaConstantsGenerator)
        with pytest.raises(RegistryError, match="Invalid config type"):
            registry.create_generator("constants", 42)
