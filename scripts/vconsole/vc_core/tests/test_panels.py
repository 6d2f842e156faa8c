from __future__ import annotations

import unittest
from pathlib import Path
import sys

from rich.console import Console, Group
from rich.style import Style
from rich.table import Table

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from vc_core.console import VisualConsole  # noqa: E402
from vc_core.decoders import console_props_decoder  # noqa: E402
from vc_core.formatting import css_url, px, shorten, widget_type_label  # noqa: E402
from vc_core.models import WidgetType  # noqa: E402
from vc_core.panels import border_for  # noqa: E402
from vc_core.panels.header import render as render_header  # noqa: E402
from vc_core.panels.surface import render as render_surface  # noqa: E402
from vc_core.surface import Element  # noqa: E402

CONSOLE = {"id": 4, "name": "Datacenter", "groupId": 1, "width": 1600, "height": 900, "isFavorite": True}
ITEMS = [
    {"id": 1, "type": 5, "width": 10, "height": 10, "x": 800, "imageSrc": "icon.png"},
    {"id": 2, "type": 20, "width": 10, "height": 10, "color": "#00ff00", "isOnTop": True},
]


def make_console(items=ITEMS, **overrides) -> VisualConsole:
    return VisualConsole(Element(), console_props_decoder({**CONSOLE, **overrides}), items, on_error=lambda _: None)


def plain_text(renderable) -> str:
    console = Console(width=200, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


class FormattingTests(unittest.TestCase):
    def test_widget_type_label(self):
        self.assertEqual(widget_type_label(WidgetType.STATIC_GRAPH), "Static Graph")
        self.assertEqual(widget_type_label(WidgetType.SIMPLE_VALUE_AVG), "Simple Value Avg")
        self.assertEqual(widget_type_label(WidgetType.GROUP_ITEM), "Group")
        self.assertEqual(widget_type_label(14), "Auto SLA Graph")
        self.assertEqual(widget_type_label(999), "Unknown (999)")
        self.assertEqual(widget_type_label(None), "Unknown")

    def test_css_helpers(self):
        self.assertEqual(px(12), "12px")
        self.assertEqual(css_url("a.png"), 'url("a.png")')
        self.assertIsNone(css_url(None))

    def test_shorten(self):
        self.assertEqual(shorten(None), "-")
        self.assertEqual(shorten("short"), "short")
        shortened = shorten("x" * 100, 20)
        self.assertEqual(len(shortened), 20)
        self.assertIn("...", shortened)


class BorderTests(unittest.TestCase):
    def test_border_for(self):
        self.assertEqual(border_for(None), "cyan")
        self.assertEqual(border_for("not-a-color"), "cyan")
        self.assertIsInstance(border_for("#ff0000"), Style)
        self.assertEqual(border_for("#ff0000", has_errors=True), "yellow")


class HeaderPanelTests(unittest.TestCase):
    def test_header_title_and_counts(self):
        panel = render_header(make_console(), "medium")
        self.assertIn("#4 Datacenter", str(panel.title))
        text = plain_text(panel)
        self.assertIn("1600x900", text)
        self.assertIn("Widgets: 2", text)

    def test_header_narrow_uses_key_value_table(self):
        panel = render_header(make_console(), "narrow")
        self.assertIsInstance(panel.renderable, Table)


class SurfacePanelTests(unittest.TestCase):
    def test_medium_columns(self):
        panel = render_surface(make_console(), "medium")
        headers = [column.header for column in panel.renderable.columns]
        self.assertEqual(headers, ["#", "Type", "Layer", "Position", "Size", "Content"])

    def test_wide_adds_terminal_column(self):
        panel = render_surface(make_console(), "wide", width=200)
        headers = [column.header for column in panel.renderable.columns]
        self.assertIn("Column", headers)
        self.assertIn("100", plain_text(panel))

    def test_rows_follow_stacking_order(self):
        text = plain_text(render_surface(make_console(), "medium"))
        self.assertLess(text.index("Icon"), text.index("Color Cloud"))
        self.assertIn("top", text)

    def test_narrow_is_a_list(self):
        panel = render_surface(make_console(), "narrow")
        self.assertIsInstance(panel.renderable, Group)

    def test_empty_console(self):
        text = plain_text(render_surface(make_console(items=[]), "medium"))
        self.assertIn("No widgets", text)

    def test_rejections_listed(self):
        panel = render_surface(make_console(items=ITEMS + [{"type": 999}]), "medium")
        self.assertIsInstance(panel.renderable, Group)
        self.assertIn("item 2", plain_text(panel))


if __name__ == "__main__":
    unittest.main()
