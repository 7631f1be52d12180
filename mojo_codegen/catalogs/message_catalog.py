"""Message catalog loading.

A message catalog is a Java property-list XML document::

    <properties>
      <comment>optional</comment>
      <entry key="message-class-name">a.b.MessageCodes</entry>
      <entry key="MVN-001">Some message with a {} placeholder</entry>
    </properties>

The reserved ``message-class-name`` key names the constants class to
generate; every other entry becomes one constant.
"""

import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, List, Optional

from .. import messages
from ..codegen.core.schema import (
    ArtifactKind,
    ArtifactSpec,
    CatalogEntry,
    split_class_name,
)
from ..errors import CatalogError, MissingInputFileError, MissingMetadataKeyError
from ..logging_config import get_logger

logger = get_logger(__name__)

MESSAGE_CLASS_NAME = "message-class-name"

_ROOT_TAG = "properties"
_ENTRY_TAG = "entry"


def _entries_from_root(root: ET.Element, source: str) -> Dict[str, str]:
    if root.tag != _ROOT_TAG:
        raise CatalogError(
            f"Invalid message catalog {source}: root element is <{root.tag}>, "
            f"expected <{_ROOT_TAG}>"
        )

    properties: Dict[str, str] = {}
    for element in root.iter(_ENTRY_TAG):
        key = element.get("key")
        if key is None:
            raise CatalogError(f"Invalid message catalog {source}: entry without key")
        if not key:
            raise CatalogError(f"Invalid message catalog {source}: entry with empty key")

        # First definition of a key wins
        if key in properties:
            logger.debug("Ignoring duplicate key %s in %s", key, source)
            continue

        properties[key] = element.text or ""

    return properties


def parse_message_catalog_text(text: str, source: str = "<string>") -> Dict[str, str]:
    """Parse property-list XML text into an ordered key/value dict."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise CatalogError(f"Malformed message catalog {source}: {e}") from e

    return _entries_from_root(root, source)


def parse_message_catalog(path: Path) -> Dict[str, str]:
    """
    Parse a property-list XML file into an ordered key/value dict.

    Raises:
        MissingInputFileError: If the file does not exist
        CatalogError: If the file cannot be read or is not a valid catalog
    """
    path = Path(path)

    try:
        with open(path, "rb") as f:
            root = ET.parse(f).getroot()
    except FileNotFoundError as e:
        raise MissingInputFileError(f"Message file not found: {path}", path) from e
    except ET.ParseError as e:
        raise CatalogError(f"Malformed message catalog {path}: {e}", path) from e
    except OSError as e:
        raise CatalogError(f"Error reading message catalog {path}: {e}", path) from e

    try:
        return _entries_from_root(root, str(path))
    except CatalogError as e:
        e.path = path
        raise


def bundle_name_for(path: Path) -> str:
    """Bundle name of a catalog: its file name without the extension."""
    return Path(path).stem


def require_class_name(properties: Dict[str, str], path: Optional[Path] = None) -> str:
    """
    Return the fully qualified class name a catalog declares.

    Raises:
        MissingMetadataKeyError: If the catalog lacks the class name key
    """
    full_class_name = (properties.get(MESSAGE_CLASS_NAME) or "").strip()
    if not full_class_name:
        raise MissingMetadataKeyError(MESSAGE_CLASS_NAME, path)
    return full_class_name


def build_artifact_spec(
    properties: Dict[str, str], path: Path
) -> Optional[ArtifactSpec]:
    """
    Build the constants-class spec for a parsed catalog.

    Returns None, after logging a warning, when the catalog does not name
    its class.
    """
    path = Path(path)

    try:
        full_class_name = require_class_name(properties, path)
    except MissingMetadataKeyError:
        logger.warning("%s", messages.Message(messages.MVN_002, MESSAGE_CLASS_NAME, path))
        return None

    package_name, class_name = split_class_name(full_class_name)
    entries = [
        CatalogEntry(key=key, value=value)
        for key, value in properties.items()
        if key != MESSAGE_CLASS_NAME
    ]

    return ArtifactSpec(
        package_name=package_name,
        class_name=class_name,
        kind=ArtifactKind.CONSTANTS_CLASS,
        entries=entries,
        bundle_name=bundle_name_for(path),
        source_path=path,
    )


def load_message_catalog(path: Path) -> Optional[ArtifactSpec]:
    """Parse a catalog file and build its constants-class spec."""
    return build_artifact_spec(parse_message_catalog(path), path)


def discover_message_files(resources_dir: Path, pattern: str) -> List[Path]:
    """
    Find catalog files in resources_dir whose names fully match pattern.

    A missing directory yields an empty list.
    """
    resources_dir = Path(resources_dir)
    if not resources_dir.is_dir():
        logger.debug("Resources directory not found: %s", resources_dir)
        return []

    regex = re.compile(pattern)
    found = sorted(
        child
        for child in resources_dir.iterdir()
        if child.is_file() and regex.fullmatch(child.name)
    )

    for child in found:
        logger.debug("%s", messages.Message(messages.MVN_020, child))

    return found
