"""
Core code generation components.

Provides the entry model, naming rules, templates and the base generator
used by every language emitter.
"""

from .generator import (
    CodeGenerator,
    GenerationResult,
    generate_code,
    write_artifact,
    ensure_package_directory,
)
from .schema import ArtifactKind, ArtifactSpec, CatalogEntry, split_class_name
from .naming import IdentifierRegistry, normalize_media_type, normalize_message_key
from .config import GeneratorConfig, ConfigManager, load_config
from .templates import TemplateEngine, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
    "write_artifact",
    "ensure_package_directory",
    # Entry model
    "ArtifactKind",
    "ArtifactSpec",
    "CatalogEntry",
    "split_class_name",
    # Identifier normalization
    "IdentifierRegistry",
    "normalize_media_type",
    "normalize_message_key",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "load_config",
    # Template system
    "TemplateEngine",
    "create_template_engine",
]
