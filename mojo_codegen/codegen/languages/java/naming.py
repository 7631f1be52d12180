"""
Java-specific naming rules.

Handles Java reserved words and the identifier registries the Java
emitters claim their constant names from.
"""

from ....errors import InvalidIdentifierError
from ...core.naming import IdentifierRegistry

# Java keywords and reserved literals
JAVA_RESERVED_WORDS = {
    "abstract", "assert", "boolean", "break", "byte", "case", "catch",
    "char", "class", "const", "continue", "default", "do", "double",
    "else", "enum", "extends", "final", "finally", "float", "for", "goto",
    "if", "implements", "import", "instanceof", "int", "interface", "long",
    "native", "new", "package", "private", "protected", "public", "return",
    "short", "static", "strictfp", "super", "switch", "synchronized",
    "this", "throw", "throws", "transient", "try", "void", "volatile",
    "while", "true", "false", "null", "_",
}

# Name of the constant holding a message catalog's bundle name
BUNDLE_FIELD = "BUNDLE"


def create_java_registry() -> IdentifierRegistry:
    """Create an identifier registry configured for Java."""
    return IdentifierRegistry(JAVA_RESERVED_WORDS)


def is_valid_package_name(name: str) -> bool:
    """True for '' (default package) or dotted Java identifiers."""
    if not name:
        return True
    registry = create_java_registry()
    for part in name.split("."):
        try:
            registry.check(part, name)
        except InvalidIdentifierError:
            return False
    return True
