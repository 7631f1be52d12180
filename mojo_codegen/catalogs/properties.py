"""Transcoding of message catalogs into flat .properties files."""

from pathlib import Path
from typing import Iterable, Mapping, Optional, Tuple, Union

from ..errors import CatalogError
from ..logging_config import get_logger

logger = get_logger(__name__)

PROPERTIES_SUFFIX = ".properties"

_SPECIAL_ESCAPES = {
    "\\": "\\\\",
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
    "\f": "\\f",
    "=": "\\=",
    ":": "\\:",
    "#": "\\#",
    "!": "\\!",
}


def _unicode_escape(char: str) -> str:
    code = ord(char)
    if code > 0xFFFF:
        # Java strings are UTF-16; astral characters become surrogate pairs
        code -= 0x10000
        high, low = 0xD800 + (code >> 10), 0xDC00 + (code & 0x3FF)
        return f"\\u{high:04X}\\u{low:04X}"
    return f"\\u{code:04X}"


def escape_property(text: str, is_key: bool) -> str:
    """
    Escape text the way java.util.Properties.store() does.

    Keys escape every space, values only a leading one. Characters outside
    printable ASCII become \\uXXXX escapes.
    """
    escaped = []
    for index, char in enumerate(text):
        if char == " ":
            escaped.append("\\ " if is_key or index == 0 else " ")
        elif char in _SPECIAL_ESCAPES:
            escaped.append(_SPECIAL_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) > 0x7E:
            escaped.append(_unicode_escape(char))
        else:
            escaped.append(char)
    return "".join(escaped)


def format_properties(
    entries: Union[Mapping[str, str], Iterable[Tuple[str, str]]],
    comment: Optional[str] = None,
) -> str:
    """Render key/value pairs as .properties text, in the given order."""
    pairs = entries.items() if isinstance(entries, Mapping) else entries
    lines = []

    if comment:
        for comment_line in comment.splitlines():
            lines.append(
                "#"
                + "".join(
                    _unicode_escape(c) if ord(c) > 0x7E else c for c in comment_line
                )
            )

    for key, value in pairs:
        lines.append(
            f"{escape_property(key, is_key=True)}={escape_property(value, is_key=False)}"
        )

    return "\n".join(lines) + "\n"


def properties_path_for(catalog_path: Path, output_directory: Path) -> Path:
    """<output_directory>/<catalog base name>.properties"""
    return Path(output_directory) / (Path(catalog_path).stem + PROPERTIES_SUFFIX)


def write_properties(
    entries: Union[Mapping[str, str], Iterable[Tuple[str, str]]],
    path: Path,
    comment: Optional[str] = None,
) -> Path:
    """
    Write key/value pairs to a .properties file, creating parent directories.

    Raises:
        CatalogError: If the file cannot be written
    """
    path = Path(path)
    text = format_properties(entries, comment)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="ascii", newline="\n") as f:
            f.write(text)
    except OSError as e:
        raise CatalogError(f"Failed to write properties file {path}: {e}", path) from e

    logger.debug("Wrote %d bytes to %s", len(text), path)
    return path
