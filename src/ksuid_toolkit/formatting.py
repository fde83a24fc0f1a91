"""
Output views - every way the CLI can print an identifier

Each OutputFormat maps to one rendering of a Ksuid. The template view
substitutes a fixed set of Go-template-style placeholders literally; it does
not evaluate a template language, so unknown or malformed placeholders are
printed as written.
"""

from collections.abc import Callable
from datetime import tzinfo
from enum import Enum

from ksuid_toolkit.ksuid import Ksuid


class OutputFormat(str, Enum):
    """How an identifier is printed"""

    STRING = "string"  # 27-char base62 form
    INSPECT = "inspect"  # multi-line breakdown
    TIME = "time"  # human-readable time component
    TIMESTAMP = "timestamp"  # seconds since the KSUID epoch
    PAYLOAD = "payload"  # payload as hex
    RAW = "raw"  # 20 raw bytes as hex
    TEMPLATE = "template"  # user-supplied template


TzArg = tzinfo | str | None

TEMPLATE_FIELDS: dict[str, Callable[[Ksuid, TzArg], str]] = {
    "{{.String}}": lambda ksuid, tz: ksuid.as_string(),
    "{{.Raw}}": lambda ksuid, tz: ksuid.as_raw(),
    "{{.Time}}": lambda ksuid, tz: ksuid.time(tz),
    "{{.Timestamp}}": lambda ksuid, tz: str(ksuid.timestamp),
    "{{.Payload}}": lambda ksuid, tz: ksuid.payload_hex,
}


def render_template(ksuid: Ksuid, template: str, tz: TzArg = None) -> str:
    """
    Substitute placeholders in template

    Example:
        >>> render_template(ksuid, "{{.Timestamp}}:{{.Payload}}")
        '107608047:B5A1CD34B5F99D1154FB6853345C9735'
    """
    result = template
    for placeholder, view in TEMPLATE_FIELDS.items():
        if placeholder in result:
            result = result.replace(placeholder, view(ksuid, tz))
    return result


def render(
    ksuid: Ksuid,
    fmt: OutputFormat | str = OutputFormat.STRING,
    template: str = "",
    tz: TzArg = None,
) -> str:
    """
    Render one identifier in the requested format

    Args:
        ksuid: Identifier to render
        fmt: OutputFormat or its string value
        template: Template text, used only by OutputFormat.TEMPLATE
        tz: Zone for time-bearing views (system local zone if None)

    Raises:
        ValueError: If fmt is not a known format
    """
    fmt = OutputFormat(fmt)

    if fmt is OutputFormat.STRING:
        return ksuid.as_string()
    if fmt is OutputFormat.INSPECT:
        return ksuid.to_inspect_string(tz)
    if fmt is OutputFormat.TIME:
        return ksuid.time(tz)
    if fmt is OutputFormat.TIMESTAMP:
        return str(ksuid.timestamp)
    if fmt is OutputFormat.PAYLOAD:
        return ksuid.payload_hex
    if fmt is OutputFormat.RAW:
        return ksuid.as_raw()
    return render_template(ksuid, template, tz)
