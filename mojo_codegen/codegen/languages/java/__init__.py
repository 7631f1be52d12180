"""
Java code generator module.

Generates message-code constant classes and media-type enumerations.
"""

from .generator import (
    JavaGenerator,
    JavaConstantsGenerator,
    JavaMediaTypeGenerator,
)
from .naming import JAVA_RESERVED_WORDS, create_java_registry, is_valid_package_name

__all__ = [
    "JavaGenerator",
    "JavaConstantsGenerator",
    "JavaMediaTypeGenerator",
    "JAVA_RESERVED_WORDS",
    "create_java_registry",
    "is_valid_package_name",
]
