"""Output formatters for CLI commands.

This module provides formatting functions for different output formats:
- JSON: Pretty-printed JSON
- JSONL: Newline-delimited JSON (one object per line)
- Table: Rich ASCII table
- Plain: Minimal text output (one item per line)
"""

from __future__ import annotations

import json
from datetime import date, datetime
from typing import Any

from rich.table import Table


def _json_serializer(obj: Any) -> str:
    """Custom JSON serializer for non-standard types."""
    if isinstance(obj, datetime | date):
        return obj.isoformat()
    return str(obj)


def format_json(data: dict[str, Any] | list[Any]) -> str:
    """Format a snapshot or step list as indented JSON.

    Month names and the range separator are written as-is, not escaped.
    """
    return json.dumps(data, indent=2, default=_json_serializer, ensure_ascii=False)


def format_jsonl(data: dict[str, Any] | list[Any]) -> str:
    """Format data as newline-delimited JSON (JSONL).

    For lists, outputs one JSON object per line.
    For dicts, outputs a single JSON object.
    """
    if isinstance(data, list):
        return "\n".join(
            json.dumps(item, default=_json_serializer, ensure_ascii=False)
            for item in data
        )
    return json.dumps(data, default=_json_serializer, ensure_ascii=False)


def format_table(
    data: dict[str, Any] | list[Any],
    columns: list[str] | None = None,
) -> Table:
    """Format data as a Rich ASCII table.

    A single dict (a snapshot or period) is rendered as a KEY/VALUE table.
    A list of step rows gets one column per key of the first row.

    Args:
        data: Snapshot dict or list of row dicts.
        columns: Keys to show. Defaults to the keys of the first row.

    Returns:
        Rich Table ready for printing.
    """
    table = Table(show_header=True, header_style="bold")

    if isinstance(data, dict):
        table.add_column("KEY")
        table.add_column("VALUE")
        for key, value in data.items():
            table.add_row(key, _format_cell(value))
        return table

    if not data:
        return table

    if columns is None:
        columns = list(data[0]) if isinstance(data[0], dict) else ["value"]

    for col in columns:
        # ISO instants are never broken across lines
        table.add_column(col.upper().replace("_", " "), no_wrap=col.endswith("_date"))

    for item in data:
        cells = [item.get(col) for col in columns] if isinstance(item, dict) else [item]
        table.add_row(*(_format_cell(cell) for cell in cells))
    return table


def _format_cell(value: Any) -> str:
    """Format a single cell value for table display."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, datetime | date):
        return value.isoformat()
    if isinstance(value, list):
        return " – ".join(_format_cell(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, default=_json_serializer, ensure_ascii=False)
    return str(value)


def format_plain(data: dict[str, Any] | list[Any]) -> str:
    """Format data as minimal plain text.

    For lists of dicts, outputs the "label" (or first) value of each item.
    For dicts, outputs key=value pairs.
    """
    if isinstance(data, list):
        lines = []
        for item in data:
            if isinstance(item, dict):
                if "label" in item:
                    lines.append(str(item["label"]))
                elif item:
                    lines.append(str(next(iter(item.values()))))
                else:
                    lines.append("")
            else:
                lines.append(str(item))
        return "\n".join(lines)

    return "\n".join(f"{k}={_format_cell(v)}" for k, v in data.items())
