"""
Java code generator implementations.

Generates message-code constant classes and media-type enumerations
from artifact specs using the templates in this package.
"""

import re
from abc import abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from ....errors import GeneratorError
from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.naming import (
    IdentifierRegistry,
    normalize_media_type,
    normalize_message_key,
)
from ...core.schema import ArtifactKind, ArtifactSpec
from .naming import BUNDLE_FIELD, create_java_registry, is_valid_package_name

GENERATOR_NAME = "mojo-codegen"
BUNDLE_COMMENT = "Message bundle name."
TEMPLATE_INDENT = 4

_LEADING_SPACES = re.compile(r"^( +)")


class JavaGenerator(CodeGenerator):
    """Shared behavior of the Java emitters."""

    template_name: str

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Java generator with configuration."""
        super().__init__(config)
        self.registry = self.create_identifier_registry()

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "java"

    @property
    def file_extension(self) -> str:
        """Return Java file extension."""
        return ".java"

    def get_template_directory(self) -> Optional[Path]:
        """Return the Java templates directory."""
        template_dir = Path(__file__).parent / "templates"
        return template_dir if template_dir.exists() else None

    def create_identifier_registry(self) -> IdentifierRegistry:
        return create_java_registry()

    def validate(self, spec: ArtifactSpec) -> List[str]:
        """Validate spec for Java generation."""
        warnings = super().validate(spec)

        if not is_valid_package_name(spec.package_name):
            raise GeneratorError(f"Invalid Java package name: {spec.package_name}")

        self.registry.reset()
        self.registry.check(spec.class_name, spec.qualified_name)

        if not self.template_exists(self.template_name):
            raise GeneratorError(f"{self.template_name} template not found")

        return warnings

    def generate(self, spec: ArtifactSpec) -> str:
        """Generate the Java source file for spec."""
        self.registry.reset()
        context = {
            "package_name": spec.package_name,
            "class_name": spec.class_name,
            "marker": self.generated_marker(),
            "generator_name": GENERATOR_NAME,
            "add_comments": self.config.add_comments,
        }
        context.update(self.build_context(spec))
        return self.render_template(self.template_name, context)

    @abstractmethod
    def build_context(self, spec: ArtifactSpec) -> Dict[str, Any]:
        """Template variables specific to the artifact kind."""
        pass

    def format_code(self, code: str) -> str:
        """Apply basic formatting, then re-indent to the configured size."""
        code = super().format_code(code)

        indent_size = self.config.indent_size
        if indent_size == TEMPLATE_INDENT:
            return code

        def reindent(match: re.Match) -> str:
            levels, rest = divmod(len(match.group(1)), TEMPLATE_INDENT)
            return " " * (levels * indent_size + rest)

        return "\n".join(_LEADING_SPACES.sub(reindent, line) for line in code.split("\n"))


class JavaConstantsGenerator(JavaGenerator):
    """Emits a final class of String constants, one per message code."""

    kind = ArtifactKind.CONSTANTS_CLASS
    template_name = "constants_class.java.j2"

    def build_context(self, spec: ArtifactSpec) -> Dict[str, Any]:
        fields = []

        if spec.bundle_name is not None:
            self.registry.add_used_name(BUNDLE_FIELD)
            fields.append(
                {
                    "name": BUNDLE_FIELD,
                    "value": spec.bundle_name,
                    "comment": BUNDLE_COMMENT,
                }
            )

        for entry in spec.entries:
            fields.append(
                {
                    # Constant value is the key; the message text is documentation
                    "name": self.registry.normalize(entry.key, normalize_message_key),
                    "value": entry.key,
                    "comment": f"Message: {entry.value}",
                }
            )

        return {
            "fields": fields,
            "source_name": spec.source_path.name if spec.source_path else None,
        }


class JavaMediaTypeGenerator(JavaGenerator):
    """Emits an enum of media types with lookup methods."""

    kind = ArtifactKind.TYPE_ENUM
    template_name = "media_type_enum.java.j2"

    def validate(self, spec: ArtifactSpec) -> List[str]:
        warnings = super().validate(spec)

        for entry in spec.entries:
            if not entry.extensions:
                raise GeneratorError(f"Media type '{entry.key}' has no extensions")

        return warnings

    def build_context(self, spec: ArtifactSpec) -> Dict[str, Any]:
        constants = []

        for entry in spec.entries:
            constants.append(
                {
                    "name": self.registry.normalize(entry.key, normalize_media_type),
                    "type": entry.key,
                    "extensions": entry.extensions,
                }
            )

        return {"constants": constants}

