"""
Base generator interface for all code generation targets.

Defines the contract that all source emitters must implement, plus the
helpers that validate, format and write a generated artifact.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ...errors import DirectoryCreationError, GeneratorError
from ...logging_config import get_logger
from ... import messages
from .config import GeneratorConfig
from .naming import IdentifierRegistry
from .schema import ArtifactKind, ArtifactSpec
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    #: Artifact kind this generator emits
    kind: ArtifactKind

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        template_dir = self.get_template_directory()
        self._template_engine = create_template_engine(template_dir)

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.java')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def create_identifier_registry(self) -> IdentifierRegistry:
        """Return a fresh registry for one generation run."""
        pass

    @abstractmethod
    def generate(self, spec: ArtifactSpec) -> str:
        """
        Generate the complete source file for an artifact spec.

        Args:
            spec: Artifact to generate

        Returns:
            Generated code as a string
        """
        pass

    def generated_marker(self) -> str:
        """Header text that lets linters recognize and skip generated code."""
        return messages.get_message(messages.MVN_008)

    def validate(self, spec: ArtifactSpec) -> List[str]:
        """
        Validate a spec for basic structural issues.

        Language generators should override this to add their own checks.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        if spec.kind != self.kind:
            raise GeneratorError(
                f"{type(self).__name__} cannot generate {spec.kind.value} artifacts"
            )

        if not spec.class_name:
            raise GeneratorError("Artifact spec has no class name")

        if not spec.entries:
            warnings.append(f"{spec.qualified_name} has no entries")

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply basic formatting to generated code.

        Strips trailing whitespace, collapses more than one consecutive
        blank line and ends the file with a single newline.
        """
        formatted_lines = []
        blank_count = 0

        for line in code.split("\n"):
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result

    def raise_for_error(self):
        """Re-raise the original exception of a failed result."""
        if not self.success:
            if self.exception is not None:
                raise self.exception
            raise GeneratorError(self.error_message or "Code generation failed")


def generate_code(generator: CodeGenerator, spec: ArtifactSpec) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        spec: Artifact to generate

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate(spec)
        for warning in warnings:
            logger.warning(warning)

        code = generator.format_code(generator.generate(spec))

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "kind": spec.kind.value,
            "class_name": spec.qualified_name,
            "entry_count": len(spec.entries),
        }

        return GenerationResult(code, warnings, metadata)

    except Exception as e:
        logger.debug("Generation of %s failed", spec.qualified_name, exc_info=True)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)


def ensure_package_directory(package_dir: Path, class_name: str) -> Path:
    """
    Create package_dir (and parents) if it does not exist.

    Raises:
        DirectoryCreationError: If the directory cannot be created
    """
    try:
        package_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        message = messages.get_message(messages.MVN_003, class_name, package_dir)
        raise DirectoryCreationError(message, package_dir) from e

    if not package_dir.is_dir():
        message = messages.get_message(messages.MVN_003, class_name, package_dir)
        raise DirectoryCreationError(message, package_dir)

    return package_dir


def write_artifact(
    code: str, spec: ArtifactSpec, root: Union[str, Path], extension: str
) -> Path:
    """
    Write generated code to <root>/<package-path>/<ClassName><extension>.

    Returns:
        Path of the written file

    Raises:
        DirectoryCreationError: If the package directory cannot be created
        GeneratorError: If the file cannot be written
    """
    target = Path(root) / spec.relative_path(extension)
    ensure_package_directory(target.parent, spec.qualified_name)

    try:
        with open(target, "w", encoding="utf-8", newline="\n") as f:
            f.write(code)
    except OSError as e:
        raise GeneratorError(f"Failed to write {target}: {e}") from e

    logger.debug("Wrote %s (%d bytes)", target, len(code))
    return target
