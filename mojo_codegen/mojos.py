"""
Build step entry points ("mojos").

Each mojo takes a GeneratorConfig, runs one generator pipeline from
catalog files to written source files, and raises MojoExecutionError
for anything that should stop the build.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from . import messages
from .catalogs.media_types import build_media_type_spec, load_media_types
from .catalogs.message_catalog import (
    build_artifact_spec,
    discover_message_files,
    parse_message_catalog,
)
from .catalogs.properties import properties_path_for, write_properties
from .codegen.core.config import GeneratorConfig
from .codegen.core.generator import CodeGenerator, generate_code, write_artifact
from .codegen.core.schema import ArtifactKind, ArtifactSpec
from .codegen.registry import get_generator
from .errors import (
    CodegenError,
    DirectoryCreationError,
    IdentifierError,
    MissingInputFileError,
    MojoExecutionError,
)
from .logging_config import get_logger

logger = get_logger(__name__)

GENERATE_CODES = "generate-codes"
GENERATE_MEDIATYPE = "generate-mediatype"


class Mojo(ABC):
    """Common plumbing for the generator mojos."""

    name: str
    kind: ArtifactKind

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig()
        self.generator: CodeGenerator = get_generator(self.kind, self.config)

    @abstractmethod
    def execute(self):
        """Run the mojo; raises MojoExecutionError to fail the build."""
        pass

    def emit(self, spec: ArtifactSpec) -> Path:
        """
        Generate and write the source file for spec.

        Raises:
            DirectoryCreationError: If the package directory cannot be created
            CodegenError: If generation or writing fails
        """
        result = generate_code(self.generator, spec)
        result.raise_for_error()

        path = write_artifact(
            result.code,
            spec,
            self.config.generated_sources_directory,
            self.generator.file_extension,
        )
        logger.info(
            "%s",
            messages.Message(
                messages.MVN_016, spec.qualified_name, spec.source_path or self.name
            ),
        )
        return path


class MessageCodesMojo(Mojo):
    """Generates a message-code constants class per message catalog."""

    name = GENERATE_CODES
    kind = ArtifactKind.CONSTANTS_CLASS

    def message_files(self) -> List[Path]:
        """Configured catalog files, or those discovered in the resources directory."""
        if self.config.message_files:
            return [self.config.resolve(path) for path in self.config.message_files]

        return discover_message_files(
            self.config.resources_directory, self.config.message_file_pattern
        )

    def execute(self) -> List[Path]:
        """
        Process every catalog file in order.

        Per-file problems (missing file, missing class name, unreadable or
        malformed catalog) are logged and the file skipped. Directory
        creation failures and identifier collisions stop the run.

        Returns:
            Paths of the generated source files

        Raises:
            MojoExecutionError: For fatal failures
        """
        files = self.message_files()
        if not files:
            logger.warning("%s", messages.Message(messages.MVN_001))
            return []

        generated = []
        for path in files:
            try:
                written = self.process_file(path)
            except MissingInputFileError:
                if not self.config.ignore_missing:
                    logger.warning("%s", messages.Message(messages.MVN_017, path))
                continue
            except (DirectoryCreationError, IdentifierError) as e:
                raise MojoExecutionError(str(e)) from e
            except CodegenError as e:
                logger.error("%s", messages.Message(messages.MVN_018, path, e))
                continue

            if written is not None:
                generated.append(written)

        return generated

    def process_file(self, path: Path) -> Optional[Path]:
        """
        Generate the constants class for one catalog.

        Returns:
            Path of the generated file, or None if the catalog was skipped
        """
        properties = parse_message_catalog(path)
        spec = build_artifact_spec(properties, path)
        if spec is None:
            return None

        written = self.emit(spec)

        if self.config.create_properties_file:
            self.transcode(properties, path)

        return written

    def transcode(self, properties: dict, path: Path) -> Path:
        """Write the catalog's pairs as a flat .properties file."""
        target = properties_path_for(path, self.config.output_directory)
        write_properties(properties, target)
        logger.info("%s", messages.Message(messages.MVN_019, target))
        return target


class MediaTypeMojo(Mojo):
    """Generates the media-type enumeration."""

    name = GENERATE_MEDIATYPE
    kind = ArtifactKind.TYPE_ENUM

    def load_spec(self) -> ArtifactSpec:
        entries = load_media_types(
            default_path=self.config.default_media_types,
            override_paths=self.config.media_type_overrides,
            project_dir=self.config.project_directory,
        )
        return build_media_type_spec(
            entries, self.config.media_type_package, self.config.media_type_class
        )

    def execute(self) -> Path:
        """
        Generate the enum from the merged media types.

        Returns:
            Path of the generated source file

        Raises:
            MojoExecutionError: If anything fails
        """
        gen_src_dir = Path(self.config.generated_sources_directory)
        try:
            gen_src_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise MojoExecutionError(
                messages.get_message(messages.MVN_116, gen_src_dir)
            ) from e

        try:
            spec = self.load_spec()
            path = self.emit(spec)
        except DirectoryCreationError as e:
            raise MojoExecutionError(
                messages.get_message(messages.MVN_118, e.path)
            ) from e
        except CodegenError as e:
            raise MojoExecutionError(str(e)) from e

        logger.info(
            "%s",
            messages.Message(messages.MVN_123, spec.qualified_name, len(spec.entries)),
        )
        return path


MOJOS = {
    GENERATE_CODES: MessageCodesMojo,
    GENERATE_MEDIATYPE: MediaTypeMojo,
}


def run_mojo(name: str, config: Optional[GeneratorConfig] = None):
    """Run the mojo registered under name."""
    try:
        mojo_class = MOJOS[name]
    except KeyError:
        raise MojoExecutionError(
            f"Unknown mojo: {name}. Available: {', '.join(sorted(MOJOS))}"
        ) from None
    return mojo_class(config).execute()
