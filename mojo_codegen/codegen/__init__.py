"""
Code Generation Module

Generates Java source artifacts from catalog entry models.
"""

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_kind_info,
    list_artifact_kinds,
)
from .core.generator import CodeGenerator, GenerationResult, generate_code, write_artifact
from .core.schema import ArtifactKind, ArtifactSpec, CatalogEntry
from .core.config import GeneratorConfig, ConfigManager, load_config


def generate_artifact(spec, config=None):
    """
    Generate the source for an artifact spec with the registered generator.

    Args:
        spec: ArtifactSpec to generate
        config: Generator configuration (GeneratorConfig, dict or path)

    Returns:
        GenerationResult with generated code
    """
    generator = get_generator(spec.kind, config)
    return generate_code(generator, spec)


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "ArtifactKind",
    "ArtifactSpec",
    "CatalogEntry",
    "GeneratorConfig",
    "ConfigManager",
    "generate_artifact",
    "generate_code",
    "write_artifact",
    "get_generator",
    "get_kind_info",
    "list_artifact_kinds",
    "load_config",
]
