"""Panel rendering helpers."""

from __future__ import annotations

from rich.color import Color, ColorParseError
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

DEFAULT_BORDER = "cyan"
WARN_BORDER = "yellow"


def border_for(background_color: str | None, has_errors: bool = False) -> str | Style:
    if has_errors:
        return WARN_BORDER
    if not background_color:
        return DEFAULT_BORDER
    try:
        color = Color.parse(background_color)
    except ColorParseError:
        return DEFAULT_BORDER
    return Style(color=color)


def empty_panel(title: str, message: str = "No widgets") -> Panel:
    return Panel(Text(message, style="dim"), title=f"[bold]{title}[/bold]", border_style=DEFAULT_BORDER)


def kv_table(rows: list[tuple[str, str]]) -> Table:
    table = Table(box=None, show_header=False, expand=True, pad_edge=False)
    table.add_column("key", style="bold")
    table.add_column("value", style="default")
    for key, value in rows:
        table.add_row(key, value)
    return table


def panel_from_table(title: str, border: str | Style, table: Table) -> Panel:
    return Panel(table, title=f"[bold]{title}[/bold]", border_style=border)
