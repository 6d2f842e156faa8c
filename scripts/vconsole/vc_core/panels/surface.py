"""Surface renderer: the widgets in stacking order, bottom layer first."""

from __future__ import annotations

from rich.console import Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from vc_core.console import VisualConsole
from vc_core.formatting import widget_type_label
from vc_core.layout import scale_factor
from vc_core.panels import border_for, empty_panel, panel_from_table


def _layer(is_on_top: bool) -> str:
    return "top" if is_on_top else "base"


def _rejections(console: VisualConsole) -> list[Text]:
    return [
        Text(f"! item {failure.index}: {failure.error}", style="yellow")
        for failure in console.errors
    ]


def render(console: VisualConsole, layout_mode: str, width: int = 120) -> Panel:
    title = f"Surface ({len(console.widgets)} widgets)"
    border = border_for(console.props.background_color, has_errors=bool(console.errors))

    if not console.widgets and not console.errors:
        return empty_panel(title)

    if layout_mode == "narrow":
        lines = [
            Text(f"{widget.props.id:>4} {widget_type_label(widget.props.type)}: {widget.describe()}")
            for widget in console.widgets
        ]
        return Panel(Group(*lines, *_rejections(console)), title=f"[bold]{title}[/bold]", border_style=border)

    scale = scale_factor(console.props.width, width)
    table = Table(box=None, expand=True)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Type", no_wrap=True)
    table.add_column("Layer", no_wrap=True)
    table.add_column("Position", justify="right", no_wrap=True)
    table.add_column("Size", justify="right", no_wrap=True)
    if layout_mode == "wide":
        table.add_column("Column", justify="right", no_wrap=True)
    table.add_column("Content", overflow="fold")

    for widget in console.widgets:
        props = widget.props
        row = [
            str(props.id),
            widget_type_label(props.type),
            _layer(props.is_on_top),
            f"{props.x},{props.y}",
            f"{props.width}x{props.height}",
        ]
        if layout_mode == "wide":
            row.append(str(int(props.x / scale)))
        row.append(escape(widget.describe()))
        table.add_row(*row)

    rejections = _rejections(console)
    if rejections:
        return Panel(Group(table, *rejections), title=f"[bold]{title}[/bold]", border_style=border)
    return panel_from_table(title, border, table)
