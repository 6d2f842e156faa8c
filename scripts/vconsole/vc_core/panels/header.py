"""Header renderer."""

from __future__ import annotations

from rich.markup import escape
from rich.panel import Panel

from vc_core.console import VisualConsole
from vc_core.formatting import shorten
from vc_core.panels import border_for, kv_table


def render(console: VisualConsole, layout_mode: str) -> Panel:
    props = console.props
    favorite = " [yellow]*[/yellow]" if props.is_favorite else ""
    title = f"[bold]#{props.id} {escape(props.name)}[/bold]{favorite}"
    border = border_for(props.background_color)
    background = escape(shorten(props.background_url, 32))

    if layout_mode == "narrow":
        table = kv_table(
            [
                ("Group", str(props.group_id)),
                ("Size", f"{props.width}x{props.height}"),
                ("Background", background),
                ("Widgets", f"{len(console.widgets)} ({len(console.errors)} rejected)"),
            ]
        )
        return Panel(table, title=title, border_style=border)

    text = (
        f"Group: [bold]{props.group_id}[/bold]   "
        f"Size: [bold]{props.width}x{props.height}[/bold]   "
        f"Background: [bold]{background}[/bold]   "
        f"Widgets: [bold]{len(console.widgets)}[/bold]   "
        f"Rejected: [bold]{len(console.errors)}[/bold]   "
        f"Layout: [bold]{layout_mode}[/bold]"
    )
    return Panel(text, title=title, border_style=border)
