"""
Identifier normalization for generated source.

Turns raw catalog keys (message codes, media type strings) into source
level identifiers and tracks which identifiers a run has already used.
"""

import re
from typing import Callable, Dict, Optional, Set

from ...errors import IdentifierCollisionError, InvalidIdentifierError

MESSAGE_KEY_DELIMITER = "_"

_MESSAGE_KEY_PATTERN = re.compile(r"[.\-]")
_MEDIA_TYPE_SEPARATORS = re.compile(r"[/.\-]+")
_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

# Owner recorded for identifiers a template emits on its own
RESERVED_OWNER = "<reserved>"


def normalize_message_key(key: str) -> str:
    """
    Normalize a message code into a constant name.

    Every '.' and '-' becomes '_': 'MVN-010' -> 'MVN_010'.
    """
    return _MESSAGE_KEY_PATTERN.sub(MESSAGE_KEY_DELIMITER, key)


def normalize_media_type(media_type: str) -> str:
    """
    Normalize a media type string into an enum constant name.

    Runs of '/', '.' and '-' collapse into one '_', the result is upper
    cased, then '+' becomes '_PLUS_': 'image/svg+xml' -> 'IMAGE_SVG_PLUS_XML'.
    """
    name = _MEDIA_TYPE_SEPARATORS.sub("_", media_type).upper()
    return name.replace("+", "_PLUS_")


class IdentifierRegistry:
    """Tracks identifiers claimed during one generation run."""

    def __init__(
        self,
        reserved_words: Optional[Set[str]] = None,
        pattern: re.Pattern = _IDENTIFIER_PATTERN,
    ):
        """
        Initialize identifier registry.

        Args:
            reserved_words: Words the target language will not accept as names
            pattern: Regex a legal identifier must match
        """
        self.reserved_words = reserved_words or set()
        self.pattern = pattern
        self._claimed: Dict[str, str] = {}

    def check(self, identifier: str, key: str) -> str:
        """Raise InvalidIdentifierError unless identifier is legal."""
        if not self.pattern.fullmatch(identifier):
            raise InvalidIdentifierError(identifier, key, "not a valid identifier")
        if identifier in self.reserved_words:
            raise InvalidIdentifierError(identifier, key, "reserved word")
        return identifier

    def claim(self, identifier: str, key: str) -> str:
        """
        Record that key produced identifier.

        Claiming the same identifier again for the same key is a no-op.

        Raises:
            IdentifierCollisionError: If another key already produced it
            InvalidIdentifierError: If the identifier is not legal
        """
        self.check(identifier, key)

        owner = self._claimed.get(identifier)
        if owner is not None and owner != key:
            raise IdentifierCollisionError(identifier, owner, key)

        self._claimed[identifier] = key
        return identifier

    def normalize(self, key: str, normalizer: Callable[[str], str]) -> str:
        """Normalize key with normalizer and claim the result."""
        return self.claim(normalizer(key), key)

    def reset(self):
        """Forget every claimed identifier."""
        self._claimed.clear()

    def add_used_name(self, identifier: str, key: Optional[str] = None):
        """Reserve an identifier that the template emits itself (e.g. BUNDLE)."""
        self._claimed[identifier] = key if key is not None else RESERVED_OWNER
