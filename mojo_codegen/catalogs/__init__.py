"""
Catalog loaders.

Read message catalogs and media-type mapping files into entry models.
"""

from .message_catalog import (
    MESSAGE_CLASS_NAME,
    build_artifact_spec,
    discover_message_files,
    load_message_catalog,
    parse_message_catalog,
    parse_message_catalog_text,
    require_class_name,
)
from .media_types import (
    MediaTypeIndex,
    build_media_type_spec,
    load_media_types,
    parse_media_type_lines,
    read_default_media_types,
    read_user_media_types,
)
from .properties import properties_path_for, write_properties

__all__ = [
    "MESSAGE_CLASS_NAME",
    "build_artifact_spec",
    "discover_message_files",
    "load_message_catalog",
    "parse_message_catalog",
    "parse_message_catalog_text",
    "require_class_name",
    "MediaTypeIndex",
    "build_media_type_spec",
    "load_media_types",
    "parse_media_type_lines",
    "read_default_media_types",
    "read_user_media_types",
    "properties_path_for",
    "write_properties",
]
