"""Terminal viewer entrypoint for visual console descriptors."""

from __future__ import annotations

import argparse
import json
import logging
import time
from datetime import datetime, timezone
from pathlib import Path

from rich.console import Console, Group
from rich.live import Live

from vc_core.config import env_data_path, resolve_options
from vc_core.console import VisualConsole
from vc_core.decoders import console_props_decoder
from vc_core.layout import LAYOUT_MODES, select_layout_mode
from vc_core.loader import load_descriptor, read_json, split_descriptor
from vc_core.logs import LOG_LEVELS, configure_logging
from vc_core.panels.header import render as render_header
from vc_core.panels.surface import render as render_surface
from vc_core.surface import Element

logger = logging.getLogger(__name__)

SURFACE_CLASS = "visual-console-container"


def build_console(console_data: dict, items: list) -> VisualConsole:
    props = console_props_decoder(console_data)
    return VisualConsole(Element("div", class_name=SURFACE_CLASS), props, items)


def render_console(console: VisualConsole, width: int, layout: str | None = None) -> Group:
    mode = layout or select_layout_mode(width)
    return Group(render_header(console, mode), render_surface(console, mode, width))


def _json_output(console: VisualConsole) -> str:
    payload = {
        "rendered_at": datetime.now(timezone.utc).isoformat(),
        **console.to_dict(),
        "surface": {
            "style": dict(console.surface.style),
            "children": [child.attributes.get("data-id") for child in console.surface.children],
        },
    }
    return json.dumps(payload, indent=2)


class LiveSession:
    """Keeps a console in sync with its descriptor file.

    Console-only edits go through ``set_props`` so the surface is patched
    in place; any change to the widget list rebuilds the console.
    """

    def __init__(self, path: Path, console_data: dict, items: list) -> None:
        self.path = path
        self.items = items
        self.console = build_console(console_data, items)

    def refresh(self) -> VisualConsole:
        data = read_json(self.path)
        if data is None:
            logger.warning("could not read %s, keeping the previous console", self.path)
            return self.console
        try:
            console_data, items = split_descriptor(data)
            props = console_props_decoder(console_data)
        except ValueError as exc:
            logger.error("ignoring invalid descriptor update: %s", exc)
            return self.console

        if items != self.items:
            logger.info("widget list changed, rebuilding console #%s", props.id)
            self.console.dispose()
            self.console = VisualConsole(Element("div", class_name=SURFACE_CLASS), props, items)
            self.items = items
        elif props != self.console.props:
            self.console.set_props(props)
        return self.console


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Visual console terminal viewer")
    parser.add_argument("data", nargs="?", help="JSON descriptor file (default: $VCONSOLE_DATA)")
    parser.add_argument("-l", "--live", action="store_true", help="Reload the descriptor and redraw in a loop")
    parser.add_argument("--json", action="store_true", help="Emit JSON payload")
    parser.add_argument("--config", help="Optional JSON config file")
    parser.add_argument("--refresh", type=int, help="Refresh interval seconds override")
    parser.add_argument("--layout", choices=LAYOUT_MODES, help="Force a layout instead of using the terminal width")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Log level override")
    args = parser.parse_args(argv)

    console = Console()

    try:
        options = resolve_options(
            args.config,
            refresh_seconds=args.refresh,
            layout=args.layout,
            log_level=args.log_level,
        )
    except ValueError as exc:
        configure_logging()
        logger.error("%s", exc)
        return 2
    configure_logging(options["log_level"])

    data_path = Path(args.data) if args.data else env_data_path()
    if data_path is None:
        logger.error("no descriptor given (pass a path or set VCONSOLE_DATA)")
        return 2

    try:
        console_data, items = load_descriptor(data_path)
        session = LiveSession(data_path, console_data, items)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    if args.json:
        print(_json_output(session.console))
        session.console.dispose()
        return 0

    def build_renderable():
        return render_console(session.console, console.size.width, options["layout"])

    if args.live:
        with Live(build_renderable(), console=console, refresh_per_second=2, screen=True) as live:
            try:
                while True:
                    time.sleep(options["refresh_seconds"])
                    session.refresh()
                    live.update(build_renderable())
            except KeyboardInterrupt:
                return 0
            finally:
                session.console.dispose()

    console.print(build_renderable())
    session.console.dispose()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
