"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML dumps of result payloads
- Rich tables for demo listings and run results
- Plain text for terminals and pipes
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "json":
        return json.dumps(data, indent=2, default=str, ensure_ascii=False)
    elif format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    else:
        return format_text_output(data)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "demos" in data:
        return format_demos_table(data["demos"])
    elif isinstance(data, dict) and "results" in data:
        return format_results_table(data["results"])
    elif isinstance(data, dict) and "demo" in data:
        return format_demos_table([data["demo"]])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str, ensure_ascii=False)


def format_text_output(data: Any) -> str:
    """Format data as plain text."""
    if isinstance(data, dict) and "demos" in data:
        return format_demos_list(data["demos"])
    elif isinstance(data, dict) and "results" in data:
        return format_results_text(data["results"])
    elif isinstance(data, dict) and "demo" in data:
        return format_demo_details(data["demo"])
    else:
        return json.dumps(data, indent=2, default=str, ensure_ascii=False)


def _render(table: Table) -> str:
    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_demos_table(demos: List[Dict[str, Any]]) -> str:
    """Format demo metadata as a Rich table."""
    if not demos:
        return "No demos found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Category", style="green")
    table.add_column("Description", style="white")

    for info in demos:
        table.add_row(
            str(info.get("name", "N/A")),
            str(info.get("category", "N/A")),
            str(info.get("description", "")),
        )
    return _render(table)


def format_results_table(results: List[Dict[str, Any]]) -> str:
    """Format demo run results as a Rich table, one row per emitted line."""
    if not results:
        return "No demos run."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Demo", style="cyan", no_wrap=True)
    table.add_column("#", style="yellow", justify="right")
    table.add_column("Output", style="white")

    for result in results:
        for index, line in enumerate(result.get("lines", []), start=1):
            table.add_row(str(result.get("name", "N/A")), str(index), line)
    return _render(table)


def format_demos_list(demos: List[Dict[str, Any]]) -> str:
    """Format demo metadata as aligned plain text."""
    if not demos:
        return "No demos found."

    name_width = max(len(str(info.get("name", ""))) for info in demos)
    category_width = max(len(str(info.get("category", ""))) for info in demos)
    lines = [
        f"{str(info.get('name', '')):<{name_width}}  "
        f"{str(info.get('category', '')):<{category_width}}  "
        f"{info.get('description', '')}"
        for info in demos
    ]
    return "\n".join(lines)


def format_demo_details(info: Dict[str, Any]) -> str:
    """Format a single demo's metadata."""
    return "\n".join(
        [
            f"Name:        {info.get('name', 'N/A')}",
            f"Category:    {info.get('category', 'N/A')}",
            f"Description: {info.get('description', '')}",
            f"Intent:      {info.get('intent', '')}",
        ]
    )


def format_results_text(results: List[Dict[str, Any]]) -> str:
    """Format demo run results as the lines they emitted."""
    blocks = []
    for result in results:
        lines = result.get("lines", [])
        if len(results) > 1:
            lines = [f"=== {result.get('name')} ({result.get('category')}) ==="] + lines
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
