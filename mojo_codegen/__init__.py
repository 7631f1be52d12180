"""
mojo-codegen

Build-time generators for Java sources: message-code constant classes
from XML message catalogs and a media-type enum from mime.types files.
"""

from .codegen import (
    ArtifactKind,
    ArtifactSpec,
    CatalogEntry,
    GeneratorConfig,
    generate_artifact,
    load_config,
)
from .errors import CodegenError, MojoExecutionError
from .mojos import MediaTypeMojo, MessageCodesMojo, run_mojo

__version__ = "0.1.0"

__all__ = [
    "ArtifactKind",
    "ArtifactSpec",
    "CatalogEntry",
    "GeneratorConfig",
    "generate_artifact",
    "load_config",
    "CodegenError",
    "MojoExecutionError",
    "MediaTypeMojo",
    "MessageCodesMojo",
    "run_mojo",
]
