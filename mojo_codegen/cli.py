"""
Command line interface for the generator mojos.

    mojo-codegen generate-codes --message-file src/main/resources/x_messages.xml
    mojo-codegen generate-mediatype --package info.example.util
    mojo-codegen list-kinds
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from .codegen.core.config import ConfigManager, GeneratorConfig
from .codegen.registry import get_kind_info, list_artifact_kinds
from .errors import CodegenError
from .logging_config import get_logger, setup_logging
from .mojos import GENERATE_CODES, GENERATE_MEDIATYPE, run_mojo

logger = get_logger(__name__)

# Initialize rich console
console = Console()


def _add_common_args(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--project-dir",
        metavar="DIR",
        type=Path,
        help="Project base directory (default: current directory)",
    )
    parser.add_argument(
        "--generated-sources",
        metavar="DIR",
        type=Path,
        help="Generated sources root (default: <project>/src/main/generated)",
    )
    parser.add_argument(
        "--config", metavar="FILE", help="JSON configuration file for code generation"
    )
    parser.add_argument(
        "--indent-size", metavar="N", type=int, help="Indent size of generated code"
    )
    parser.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't generate Javadoc for constants",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one subcommand per mojo."""
    parser = argparse.ArgumentParser(
        prog="mojo-codegen",
        description="Generate Java sources from message catalogs and mime.types files",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show debug logging"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Only log errors"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    codes = subparsers.add_parser(
        GENERATE_CODES, help="Generate message-code constant classes"
    )
    _add_common_args(codes)
    codes.add_argument(
        "--message-file",
        "-m",
        dest="message_files",
        metavar="FILE",
        action="append",
        type=Path,
        help="Message catalog to generate from (repeatable; default: discover "
        "*_messages.xml in src/main/resources)",
    )
    codes.add_argument(
        "--ignore-missing",
        action="store_true",
        default=None,
        help="Don't warn about message files that don't exist",
    )
    codes.add_argument(
        "--create-properties-file",
        action="store_true",
        default=None,
        help="Also write each catalog as a .properties file",
    )
    codes.add_argument(
        "--output-directory",
        metavar="DIR",
        type=Path,
        help="Where .properties files go (default: <project>/target/classes)",
    )

    media = subparsers.add_parser(
        GENERATE_MEDIATYPE, help="Generate the media-type enumeration"
    )
    _add_common_args(media)
    media.add_argument(
        "--package", "-p", metavar="PACKAGE", help="Package of the generated enum"
    )
    media.add_argument(
        "--class-name", metavar="NAME", help="Name of the generated enum"
    )
    media.add_argument(
        "--default-mime-types",
        metavar="FILE",
        type=Path,
        help="Default mime.types (default: the bundled one)",
    )
    media.add_argument(
        "--mime-types",
        dest="media_type_overrides",
        metavar="FILE",
        action="append",
        type=Path,
        help="Override mime.types file (repeatable; default: /etc/mime.types "
        "and ~/.mime.types)",
    )

    subparsers.add_parser("list-kinds", help="List the artifact kinds that can be generated")

    return parser


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Merge the config file with the command line options."""
    overrides: Dict[str, Any] = {
        "project_directory": getattr(args, "project_dir", None),
        "generated_sources_directory": getattr(args, "generated_sources", None),
        "indent_size": getattr(args, "indent_size", None),
        "message_files": getattr(args, "message_files", None),
        "ignore_missing": getattr(args, "ignore_missing", None),
        "create_properties_file": getattr(args, "create_properties_file", None),
        "output_directory": getattr(args, "output_directory", None),
        "media_type_package": getattr(args, "package", None),
        "media_type_class": getattr(args, "class_name", None),
        "default_media_types": getattr(args, "default_mime_types", None),
        "media_type_overrides": getattr(args, "media_type_overrides", None),
    }
    if getattr(args, "no_comments", False):
        overrides["add_comments"] = False

    manager = ConfigManager()
    config = manager.get_config(overrides, getattr(args, "config", None))

    for warning in manager.validate_config(config):
        logger.warning(warning)

    return config


def _list_kinds() -> int:
    table = Table(title="Artifact kinds", box=box.SIMPLE)
    table.add_column("Kind", style="cyan")
    table.add_column("Aliases")
    table.add_column("Generator")
    table.add_column("Extension")

    for kind in list_artifact_kinds():
        info = get_kind_info(kind)
        table.add_row(
            info["kind"],
            ", ".join(info["aliases"]),
            info["class"],
            info["file_extension"],
        )

    console.print(table)
    return 0


def _report(command: str, result: Any):
    paths: List[Path] = result if isinstance(result, list) else [result]
    if not paths:
        console.print(f"[yellow]{command}: nothing generated[/yellow]")
        return
    for path in paths:
        console.print(f"[green]✓[/green] {path}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line interface.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.INFO
    setup_logging(level)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "list-kinds":
        return _list_kinds()

    try:
        config = build_config(args)
        result = run_mojo(args.command, config)
    except CodegenError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        logger.debug("%s failed", args.command, exc_info=True)
        return 1

    _report(args.command, result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
