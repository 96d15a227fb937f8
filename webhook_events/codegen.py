from __future__ import annotations

from typing import List

import black

from .errors import EmitError
from .schema import EventMapping


def render_module(
    mapping: EventMapping,
    *,
    source_url: str,
    tool_name: str = "generate-webhook-events",
    variable_name: str = "ALL_WEBHOOK_TYPES",
) -> str:
    """
    Render mapping as an unformatted Python module.

    Entries keep document order. Strings go through repr() so any quote or
    backslash in the source document stays a valid literal.
    """
    lines: List[str] = [
        f"# Code generated by {tool_name}. DO NOT EDIT.",
        "#",
        f"# {variable_name} is a table of all webhooks with their activity types. It was",
        f"# generated by {tool_name} based on",
        f"# {source_url}",
        "",
        f"{variable_name}: dict[str, list[str]] = {{",
    ]
    for event in mapping.events:
        types = ", ".join(repr(t) for t in event.types)
        lines.append(f"    {event.name!r}: [{types}],")
    lines.append("}")
    return "\n".join(lines) + "\n"


def format_source(source: str) -> str:
    try:
        return black.format_str(source, mode=black.Mode())
    except Exception as exc:
        raise EmitError(f"could not format Python source: {exc}") from exc
