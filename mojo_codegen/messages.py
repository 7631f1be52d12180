"""
Message codes used in log output and error reports.

The message texts live in the bundled mojo-codegen_messages.xml catalog,
the same XML property-list format the generate-codes mojo consumes.
"""

from functools import lru_cache
from importlib import resources
from typing import Any, Dict

BUNDLE = "mojo-codegen_messages"

MVN_001 = "MVN-001"
MVN_002 = "MVN-002"
MVN_003 = "MVN-003"
MVN_008 = "MVN-008"
MVN_016 = "MVN-016"
MVN_017 = "MVN-017"
MVN_018 = "MVN-018"
MVN_019 = "MVN-019"
MVN_020 = "MVN-020"
MVN_116 = "MVN-116"
MVN_118 = "MVN-118"
MVN_120 = "MVN-120"
MVN_121 = "MVN-121"
MVN_122 = "MVN-122"
MVN_123 = "MVN-123"

PLACEHOLDER = "{}"


@lru_cache(maxsize=1)
def _load_bundle() -> Dict[str, str]:
    from .catalogs.message_catalog import parse_message_catalog_text

    bundle_file = resources.files(__package__) / "resources" / f"{BUNDLE}.xml"
    text = bundle_file.read_text(encoding="utf-8")
    return parse_message_catalog_text(text, source=f"{BUNDLE}.xml")


def format_template(template: str, *args: Any) -> str:
    """Substitute positional '{}' placeholders in order; extras are ignored."""
    parts = template.split(PLACEHOLDER)
    if len(parts) == 1:
        return template

    result = [parts[0]]
    for index, part in enumerate(parts[1:]):
        result.append(str(args[index]) if index < len(args) else PLACEHOLDER)
        result.append(part)
    return "".join(result)


def get_message(code: str, *args: Any) -> str:
    """Return the text for a message code with its placeholders filled in."""
    template = _load_bundle().get(code)
    if template is None:
        return code
    return format_template(template, *args)


def format_message(code: str, *args: Any) -> str:
    """Return '[CODE] text', the form used for log records."""
    return f"[{code}] {get_message(code, *args)}"


class Message:
    """
    A message code and its arguments, rendered only when logged.

    Pass as the argument of a '%s' log format so that records below the
    logger's level never look up or fill in the message text.
    """

    def __init__(self, code: str, *args: Any):
        self.code = code
        self.args = args

    def __str__(self) -> str:
        return format_message(self.code, *self.args)
