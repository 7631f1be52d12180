"""
Language-specific code generators.

This module contains generators for different programming languages.
"""

from .java import JavaConstantsGenerator, JavaMediaTypeGenerator

__all__ = ["JavaConstantsGenerator", "JavaMediaTypeGenerator"]
