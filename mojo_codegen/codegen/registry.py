"""
Generator registry system for managing available code generators.

Maps artifact kinds (and their aliases) to generator classes.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from ..errors import CodegenError
from .core.config import GeneratorConfig, load_config
from .core.generator import CodeGenerator
from .core.schema import ArtifactKind


class RegistryError(CodegenError):
    """Exception raised for registry-related errors."""

    pass


class GeneratorRegistry:
    """Registry for managing available code generators."""

    def __init__(self):
        """Initialize empty registry."""
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        kind: Union[str, ArtifactKind],
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a generator for an artifact kind.

        Args:
            kind: Artifact kind or its name (e.g., 'constants', 'enum')
            generator_class: Generator class implementing CodeGenerator
            aliases: Alternative names for this kind
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If generator class is invalid or an alias conflicts
        """
        if not isinstance(generator_class, type) or not issubclass(
            generator_class, CodeGenerator
        ):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        kind_key = self._key(kind)

        if kind_key in self._generators and not replace:
            return

        self._generators[kind_key] = generator_class

        for alias in aliases or []:
            alias_key = alias.lower()

            if alias_key == kind_key:
                continue

            if not replace:
                if alias_key in self._generators:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing artifact kind"
                    )
                if alias_key in self._aliases and self._aliases[alias_key] != kind_key:
                    raise RegistryError(
                        f"Alias '{alias}' already points to '{self._aliases[alias_key]}'"
                    )

            self._aliases[alias_key] = kind_key

    def get_generator_class(self, kind: Union[str, ArtifactKind]) -> Type[CodeGenerator]:
        """
        Get generator class for an artifact kind.

        Raises:
            RegistryError: If kind not found
        """
        kind_key = self._key(kind)

        if kind_key in self._generators:
            return self._generators[kind_key]

        if kind_key in self._aliases:
            return self._generators[self._aliases[kind_key]]

        raise RegistryError(
            f"No generator registered for artifact kind: {kind_key}. "
            f"Available: {', '.join(self.list_kinds())}"
        )

    def create_generator(
        self,
        kind: Union[str, ArtifactKind],
        config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
    ) -> CodeGenerator:
        """
        Create generator instance for an artifact kind.

        Args:
            kind: Artifact kind or alias
            config: Configuration as GeneratorConfig, dict, or file path

        Raises:
            RegistryError: If generator creation fails
        """
        generator_class = self.get_generator_class(kind)

        if isinstance(config, GeneratorConfig):
            final_config = config
        elif isinstance(config, (str, Path)):
            final_config = load_config(config_file=config)
        elif isinstance(config, dict):
            final_config = load_config(custom_config=config)
        elif config is None:
            final_config = load_config()
        else:
            raise RegistryError(f"Invalid config type: {type(config)}")

        return generator_class(final_config)

    def list_kinds(self) -> List[str]:
        """Get list of registered artifact kind names."""
        return sorted(self._generators.keys())

    def get_aliases(self, kind: Union[str, ArtifactKind]) -> List[str]:
        kind_key = self._key(kind)
        return sorted(a for a, target in self._aliases.items() if target == kind_key)

    def get_kind_info(self, kind: Union[str, ArtifactKind]) -> Dict[str, Any]:
        """
        Get information about a registered artifact kind.

        Raises:
            RegistryError: If kind not found
        """
        generator_class = self.get_generator_class(kind)
        kind_key = self._key(kind)
        kind_key = self._aliases.get(kind_key, kind_key)
        generator = generator_class(GeneratorConfig())

        return {
            "kind": kind_key,
            "language": generator.language_name,
            "class": generator_class.__name__,
            "file_extension": generator.file_extension,
            "aliases": self.get_aliases(kind_key),
        }

    @staticmethod
    def _key(kind: Union[str, ArtifactKind]) -> str:
        if isinstance(kind, ArtifactKind):
            return kind.value
        return kind.lower()


# Global registry instance - created once
_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _auto_register_generators(_global_registry)
    return _global_registry


def _auto_register_generators(registry: GeneratorRegistry):
    """Register the built-in Java generators with their aliases."""
    from .languages.java import JavaConstantsGenerator, JavaMediaTypeGenerator

    registry.register(
        ArtifactKind.CONSTANTS_CLASS, JavaConstantsGenerator, aliases=["codes"]
    )
    registry.register(
        ArtifactKind.TYPE_ENUM, JavaMediaTypeGenerator, aliases=["mediatype"]
    )


def get_generator(
    kind: Union[str, ArtifactKind],
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
) -> CodeGenerator:
    """Get generator instance from global registry."""
    return get_registry().create_generator(kind, config)


def list_artifact_kinds() -> List[str]:
    """List all registered artifact kinds."""
    return get_registry().list_kinds()


def get_kind_info(kind: Union[str, ArtifactKind]) -> Dict[str, Any]:
    """Get information about a registered artifact kind."""
    return get_registry().get_kind_info(kind)
