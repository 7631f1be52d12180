"""
Exception hierarchy for the code generation mojos.

Every error raised by the loaders, the emitters and the mojos derives
from CodegenError so callers can catch the whole family at once.
"""

from pathlib import Path
from typing import Optional, Union


class CodegenError(Exception):
    """Base exception for all code generation errors."""

    pass


class CatalogError(CodegenError):
    """Exception raised when a catalog file cannot be read or parsed."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class MissingInputFileError(CatalogError):
    """A declared catalog file does not exist."""

    pass


class MissingMetadataKeyError(CatalogError):
    """A message catalog lacks a required metadata key."""

    def __init__(self, key: str, path: Optional[Union[str, Path]] = None):
        super().__init__(f"Required key '{key}' not found in {path}", path)
        self.key = key


class GeneratorError(CodegenError):
    """Base exception for code generation errors."""

    pass


class DirectoryCreationError(GeneratorError):
    """The target package directory could not be created."""

    def __init__(self, message: str, path: Union[str, Path]):
        super().__init__(message)
        self.path = Path(path)


class IdentifierError(CodegenError):
    """Base exception for identifier normalization problems."""

    pass


class IdentifierCollisionError(IdentifierError):
    """Two distinct catalog keys normalize to the same identifier."""

    def __init__(self, identifier: str, first_key: str, second_key: str):
        super().__init__(
            f"Keys '{first_key}' and '{second_key}' both normalize to '{identifier}'"
        )
        self.identifier = identifier
        self.first_key = first_key
        self.second_key = second_key


class InvalidIdentifierError(IdentifierError):
    """A catalog key cannot be turned into a legal source identifier."""

    def __init__(self, identifier: str, key: str, reason: str):
        super().__init__(f"Key '{key}' yields invalid identifier '{identifier}': {reason}")
        self.identifier = identifier
        self.key = key


class ConfigError(CodegenError):
    """Exception raised for configuration-related errors."""

    pass


class TemplateError(CodegenError):
    """Exception raised for template-related errors."""

    pass


class MojoExecutionError(CodegenError):
    """Fatal failure of a mojo; summarizes the underlying cause."""

    pass
