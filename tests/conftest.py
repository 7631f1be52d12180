"""Shared test fixtures for the mojo-codegen test suite."""

import logging
import textwrap
from pathlib import Path
from xml.sax.saxutils import escape, quoteattr

import pytest

from mojo_codegen.codegen.core.config import GeneratorConfig
from mojo_codegen.codegen.core.schema import ArtifactKind, ArtifactSpec, CatalogEntry
from mojo_codegen.logging_config import PACKAGE_LOGGER_NAME


def catalog_xml(entries: dict, comment: str = None) -> str:
    """Render a Java property-list XML document."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<!DOCTYPE properties SYSTEM "http://java.sun.com/dtd/properties.dtd">',
        "<properties>",
    ]
    if comment:
        lines.append(f"  <comment>{escape(comment)}</comment>")
    for key, value in entries.items():
        lines.append(f"  <entry key={quoteattr(key)}>{escape(value)}</entry>")
    lines.append("</properties>")
    return "\n".join(lines) + "\n"


@pytest.fixture
def write_catalog(tmp_path):
    """Factory fixture that writes a message catalog and returns its path."""
    def _write(name: str, entries: dict, directory: Path = None) -> Path:
        directory = directory or tmp_path / "src" / "main" / "resources"
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text(catalog_xml(entries), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def write_mime_types(tmp_path):
    """Factory fixture that writes a mime.types file and returns its path."""
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def project_config(tmp_path):
    """A config rooted at tmp_path that never reads the real mime.types overrides."""
    return GeneratorConfig(project_directory=tmp_path, media_type_overrides=[])


@pytest.fixture
def codes_spec():
    """The message-code spec from a catalog named codes_messages.xml."""
    return ArtifactSpec(
        package_name="a.b",
        class_name="Codes",
        kind=ArtifactKind.CONSTANTS_CLASS,
        entries=[
            CatalogEntry("FOO-1", "Hello {}"),
            CatalogEntry("FOO-2", "Goodbye"),
        ],
        bundle_name="codes_messages",
        source_path=Path("codes_messages.xml"),
    )


@pytest.fixture
def media_spec():
    """A small media-type enum spec."""
    return ArtifactSpec(
        package_name="info.example",
        class_name="MediaType",
        kind=ArtifactKind.TYPE_ENUM,
        entries=[
            CatalogEntry("image/jpeg", extensions=["jpeg", "jpg", "jpe"]),
            CatalogEntry("image/svg+xml", extensions=["svg", "svgz"]),
            CatalogEntry("application/pdf", extensions=["pdf"]),
        ],
    )


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo any setup_logging() call a test (e.g. a CLI run) made."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
