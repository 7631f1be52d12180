"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ...errors import ConfigError

DEFAULT_MESSAGE_FILE_PATTERN = r".*_messages.xml"
DEFAULT_MEDIA_TYPE_PACKAGE = "info.freelibrary.util"
DEFAULT_MEDIA_TYPE_CLASS = "MediaType"
SYSTEM_MIME_TYPES = Path("/etc/mime.types")
USER_MIME_TYPES_NAME = ".mime.types"

# Build tool option names mapped onto GeneratorConfig fields
OPTION_ALIASES = {
    "basedir": "project_directory",
    "projectDirectory": "project_directory",
    "messageFiles": "message_files",
    "generatedSourcesDirectory": "generated_sources_directory",
    "resourcesDirectory": "resources_directory",
    "outputDirectory": "output_directory",
    "messageFilePattern": "message_file_pattern",
    "ignoreMissing": "ignore_missing",
    "createPropertiesFile": "create_properties_file",
    "mediaTypePackage": "media_type_package",
    "mediaTypeClass": "media_type_class",
    "defaultMediaTypes": "default_media_types",
    "mediaTypeOverrides": "media_type_overrides",
}

_PATH_FIELDS = {
    "project_directory",
    "generated_sources_directory",
    "resources_directory",
    "output_directory",
    "default_media_types",
}

_JAVA_PACKAGE_PATTERN = re.compile(r"^[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)*$")


def default_media_type_overrides() -> List[Path]:
    """System file first, then the per-user file."""
    return [SYSTEM_MIME_TYPES, Path.home() / USER_MIME_TYPES_NAME]


@dataclass
class GeneratorConfig:
    """Configuration shared by the generators and the mojos."""

    # Project layout
    project_directory: Path = field(default_factory=Path.cwd)
    generated_sources_directory: Optional[Path] = None
    resources_directory: Optional[Path] = None
    output_directory: Optional[Path] = None

    # Message codes
    message_files: List[Path] = field(default_factory=list)
    message_file_pattern: str = DEFAULT_MESSAGE_FILE_PATTERN
    ignore_missing: bool = False
    create_properties_file: bool = False

    # Media types
    media_type_package: str = DEFAULT_MEDIA_TYPE_PACKAGE
    media_type_class: str = DEFAULT_MEDIA_TYPE_CLASS
    default_media_types: Optional[Path] = None
    media_type_overrides: List[Path] = field(
        default_factory=default_media_type_overrides
    )

    # Code style settings
    indent_size: int = 4
    add_comments: bool = True

    # Custom settings
    custom: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.project_directory = Path(self.project_directory)
        self.message_files = [Path(p) for p in self.message_files]
        self.media_type_overrides = [Path(p) for p in self.media_type_overrides]

        if self.generated_sources_directory is None:
            self.generated_sources_directory = (
                self.project_directory / "src" / "main" / "generated"
            )
        if self.resources_directory is None:
            self.resources_directory = (
                self.project_directory / "src" / "main" / "resources"
            )
        if self.output_directory is None:
            self.output_directory = self.project_directory / "target" / "classes"

        self.generated_sources_directory = Path(self.generated_sources_directory)
        self.resources_directory = Path(self.resources_directory)
        self.output_directory = Path(self.output_directory)
        if self.default_media_types is not None:
            self.default_media_types = Path(self.default_media_types)

    def resolve(self, path: Union[str, Path]) -> Path:
        """Resolve a relative path against the project directory."""
        path = Path(path).expanduser()
        return path if path.is_absolute() else self.project_directory / path


class ConfigManager:
    """Manages configuration loading and merging."""

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Overrides applied last
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        base_config: Dict[str, Any] = {}

        if config_file:
            base_config.update(self._normalize_keys(self._load_config_file(config_file)))

        if custom_config:
            overrides = self._normalize_keys(custom_config)
            base_config.update({k: v for k, v in overrides.items() if v is not None})

        return self._dict_to_config(base_config)

    def _normalize_keys(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """Map camelCase build tool option names onto field names."""
        return {OPTION_ALIASES.get(key, key): value for key, value in config_dict.items()}

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"Invalid JSON in configuration file {path}: {str(e)}"
            ) from e
        except OSError as e:
            raise ConfigError(
                f"Failed to load configuration file {path}: {str(e)}"
            ) from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        if custom_args:
            existing_custom = dict(config_args.get("custom", {}))
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        if isinstance(config_args.get("message_files"), (str, Path)):
            config_args["message_files"] = _split_list(config_args["message_files"])

        try:
            config = GeneratorConfig(**config_args)
        except TypeError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

        # Relative paths are relative to the project, not the working directory
        for name in _PATH_FIELDS - {"project_directory"}:
            value = getattr(config, name)
            if value is not None and name in config_args:
                setattr(config, name, config.resolve(value))
        config.message_files = [config.resolve(p) for p in config.message_files]

        return config

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if not _JAVA_PACKAGE_PATTERN.match(config.media_type_package):
            warnings.append(f"Invalid Java package name: {config.media_type_package}")

        if not config.media_type_class.isidentifier():
            warnings.append(f"Invalid Java class name: {config.media_type_class}")

        try:
            re.compile(config.message_file_pattern)
        except re.error as e:
            warnings.append(
                f"Invalid message file pattern {config.message_file_pattern!r}: {e}"
            )

        if config.indent_size < 1:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        return warnings


def _split_list(value: Union[str, Path]) -> List[str]:
    """Split a comma separated option value, as build tools pass lists."""
    return [part.strip() for part in str(value).split(",") if part.strip()]


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    return ConfigManager().get_config(custom_config, config_file)
