"""Media-type catalog loading.

Reads ``mime.types`` style files (``type ext1 ext2 ...`` per line) and
merges them into one ordered list of entries. The bundled defaults are
read first, then the system and per-user override files; a type already
seen is never replaced by a later definition.
"""

from importlib import resources
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .. import messages
from ..codegen.core.schema import ArtifactKind, ArtifactSpec, CatalogEntry
from ..errors import CatalogError, MissingInputFileError
from ..logging_config import get_logger

logger = get_logger(__name__)

MIME_TYPES_FILE = "mime.types"
COMMENT_CHAR = "#"


def parse_media_type_lines(
    lines: Iterable[str], entries: Optional[List[CatalogEntry]] = None
) -> List[CatalogEntry]:
    """
    Parse mime.types lines into the entries accumulator.

    Empty lines, comments and types without extensions are skipped. A type
    already in entries (compared case-insensitively) is left untouched.

    Args:
        lines: Lines of a mime.types file
        entries: Accumulator to append to; a new list when None

    Returns:
        The accumulator
    """
    if entries is None:
        entries = []

    seen = {entry.key.lower() for entry in entries}

    for line in lines:
        line = line.strip()
        if not line or line.startswith(COMMENT_CHAR):
            continue

        parts = line.split()
        if len(parts) < 2:
            continue

        media_type, extensions = parts[0], parts[1:]
        if media_type.lower() in seen:
            continue

        entries.append(CatalogEntry(key=media_type, extensions=extensions))
        seen.add(media_type.lower())

    return entries


def _read_lines(path: Path) -> List[str]:
    with open(path, "r", encoding="utf-8") as f:
        return f.read().splitlines()


def read_default_media_types(
    path: Optional[Path] = None, project_dir: Optional[Path] = None
) -> List[CatalogEntry]:
    """
    Read the default media types.

    Uses path when given; otherwise the mime.types bundled with this
    package, falling back to src/main/resources/mime.types of project_dir.

    Raises:
        MissingInputFileError: If no default mime.types can be found
        CatalogError: If the file cannot be read
    """
    if path is None:
        bundled = resources.files(messages.__package__) / "resources" / MIME_TYPES_FILE
        if bundled.is_file():
            entries = parse_media_type_lines(
                bundled.read_text(encoding="utf-8").splitlines()
            )
            logger.debug(
                "%s",
                messages.Message(messages.MVN_121, len(entries), "bundled defaults"),
            )
            return entries

        base = Path(project_dir) if project_dir is not None else Path.cwd()
        path = base / "src" / "main" / "resources" / MIME_TYPES_FILE

    path = Path(path)
    try:
        entries = parse_media_type_lines(_read_lines(path))
    except FileNotFoundError as e:
        raise MissingInputFileError(
            messages.get_message(messages.MVN_120, path), path
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogError(f"Error reading media types from {path}: {e}", path) from e

    logger.debug("%s", messages.Message(messages.MVN_121, len(entries), path))
    return entries


def read_user_media_types(path: Path, entries: List[CatalogEntry]) -> List[CatalogEntry]:
    """
    Merge an override mime.types file into entries.

    A missing file is not an error.

    Raises:
        CatalogError: If the file exists but cannot be read
    """
    path = Path(path).expanduser()
    before = len(entries)

    try:
        parse_media_type_lines(_read_lines(path), entries)
    except FileNotFoundError:
        logger.debug("%s", messages.Message(messages.MVN_122, path))
        return entries
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogError(f"Error reading media types from {path}: {e}", path) from e

    logger.debug("%s", messages.Message(messages.MVN_121, len(entries) - before, path))
    return entries


def load_media_types(
    default_path: Optional[Path] = None,
    override_paths: Sequence[Path] = (),
    project_dir: Optional[Path] = None,
) -> List[CatalogEntry]:
    """Read the defaults, then each override file in order."""
    entries = read_default_media_types(default_path, project_dir)
    for override in override_paths:
        read_user_media_types(override, entries)
    return entries


def build_media_type_spec(
    entries: List[CatalogEntry], package_name: str, class_name: str = "MediaType"
) -> ArtifactSpec:
    """Wrap merged media-type entries in an enum artifact spec."""
    return ArtifactSpec(
        package_name=package_name,
        class_name=class_name,
        kind=ArtifactKind.TYPE_ENUM,
        entries=list(entries),
    )


class MediaTypeIndex:
    """
    Lookups over a merged media-type list.

    Applies the lookup rules of the generated enum, so media types can be
    resolved from Python without compiling Java.
    """

    def __init__(self, entries: Iterable[CatalogEntry]):
        self.entries = list(entries)

    def __iter__(self):
        return iter(self.entries)

    def get(self, media_type: str) -> CatalogEntry:
        """Return the entry for media_type; KeyError when unknown."""
        entry = self.from_string(media_type)
        if entry is None:
            raise KeyError(media_type)
        return entry

    def get_ext(self, media_type: str) -> str:
        """Preferred extension of media_type."""
        return self.get(media_type).extensions[0]

    def get_exts(self, media_type: str) -> List[str]:
        """All extensions of media_type, preferred first."""
        return list(self.get(media_type).extensions)

    def from_string(self, media_type: Optional[str]) -> Optional[CatalogEntry]:
        """Case-insensitive exact match on the type string."""
        if media_type is None:
            return None
        for entry in self.entries:
            if entry.same_key(media_type):
                return entry
        return None

    def from_ext(self, ext: str, hint: Optional[str] = None) -> Optional[CatalogEntry]:
        """
        Find the media type for a file extension.

        With a hint (e.g. 'image') the first match whose type starts with
        the hint wins; otherwise, or when no match fits the hint, the first
        match found.
        """
        hint = hint.lower() if hint is not None else None
        chosen = None

        for entry in self.entries:
            for candidate in entry.extensions:
                if candidate.lower() == ext.lower():
                    if hint is not None and entry.key.lower().startswith(hint):
                        return entry
                    if chosen is None:
                        chosen = entry

        return chosen

    def get_types(self, class_prefix: str) -> List[CatalogEntry]:
        """All media types of a class, e.g. every 'image/*' type."""
        prefix = class_prefix.lower() + "/"
        return [entry for entry in self.entries if entry.key.lower().startswith(prefix)]

    def parse(self, uri: str, hint: Optional[str] = None) -> Optional[CatalogEntry]:
        """
        Find the media type of the resource at uri.

        The fragment is dropped, then the extension of the last path
        segment is resolved with from_ext. Without an extension the whole
        fragment-less string is tried with from_string.
        """
        uri = str(uri).split("#", 1)[0]
        ext = extension_of(uri)

        if ext is not None:
            return self.from_ext(ext, hint)

        return self.from_string(uri)


def extension_of(uri: str) -> Optional[str]:
    """Extension of the last path segment of uri, or None."""
    name = uri[uri.rfind("/") + 1 :]
    index = name.rfind(".")

    if index == -1 or index == len(name) - 1:
        return None

    return name[index + 1 :].strip() or None
