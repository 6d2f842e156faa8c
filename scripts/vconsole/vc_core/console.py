"""The visual console: an ordered stack of widgets painted onto one surface."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from functools import cmp_to_key
from typing import Any, Callable, Iterable

from vc_core.errors import InvalidWidgetPropsError, UnknownOrUnsupportedVariantError, VisualConsoleError
from vc_core.factory import widget_from
from vc_core.formatting import css_url, px
from vc_core.models import ConsoleProps, Size
from vc_core.surface import Element
from vc_core.widget import Widget, WidgetClickEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WidgetError:
    index: int
    error: VisualConsoleError
    descriptor: Any

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "error": type(self.error).__name__,
            "field": self.error.field,
            "message": str(self.error),
        }


ClickRelay = Callable[[WidgetClickEvent], None]
ErrorSink = Callable[[WidgetError], None]


def log_click(event: WidgetClickEvent) -> None:
    logger.debug("Clicked widget #%s (%s)", event.data.id, event.data.type.name)


def log_widget_error(failure: WidgetError) -> None:
    logger.warning("Error creating widget at index %d: %s", failure.index, failure.error)


def stacking_compare(a: Widget, b: Widget) -> int:
    """Base layer first, top layer last; higher ids first within a layer."""
    if a.props.is_on_top and not b.props.is_on_top:
        return 1
    if not a.props.is_on_top and b.props.is_on_top:
        return -1
    if a.props.id < b.props.id:
        return 1
    return -1


def size_changed(prev: Size, new: Size) -> bool:
    return prev.width != new.width or prev.height != new.height


class VisualConsole:
    def __init__(
        self,
        surface: Element,
        props: ConsoleProps,
        items: Iterable[Any],
        on_click: ClickRelay | None = None,
        on_error: ErrorSink | None = None,
    ) -> None:
        self.surface = surface
        self._props = props
        self._widgets: list[Widget] = []
        self._disposed = False
        self.errors: list[WidgetError] = []
        self._on_click = on_click or log_click
        self._on_error = on_error or log_widget_error

        self.render()

        for index, item in enumerate(items):
            try:
                widget = widget_from(item)
            except (InvalidWidgetPropsError, UnknownOrUnsupportedVariantError) as exc:
                failure = WidgetError(index=index, error=exc, descriptor=item)
                self.errors.append(failure)
                self._on_error(failure)
                continue
            self._widgets.append(widget)
            widget.subscribe_click(self._relay_click)
            self.surface.append(widget.element)

        self._widgets.sort(key=cmp_to_key(stacking_compare))
        for widget in self._widgets:
            self.surface.append(widget.element)

        logger.debug(
            "console #%s ready with %d widgets (%d rejected)",
            props.id,
            len(self._widgets),
            len(self.errors),
        )

    def __repr__(self) -> str:
        return f"<VisualConsole id={self._props.id} widgets={len(self._widgets)}>"

    @property
    def props(self) -> ConsoleProps:
        return self._props

    @property
    def widgets(self) -> tuple[Widget, ...]:
        return tuple(self._widgets)

    @property
    def disposed(self) -> bool:
        return self._disposed

    def widget(self, widget_id: int) -> Widget | None:
        for widget in self._widgets:
            if widget.props.id == widget_id:
                return widget
        return None

    def _relay_click(self, event: WidgetClickEvent) -> None:
        self._on_click(event)

    def set_props(self, new_props: ConsoleProps) -> ConsoleProps:
        """Replace the props and patch only the surface styles that changed.

        Returns the previous props.
        """
        if self._disposed:
            raise RuntimeError("visual console already disposed")
        prev_props = self._props
        self._props = new_props
        self.render(prev_props)
        return prev_props

    def render(self, prev_props: ConsoleProps | None = None) -> None:
        props = self._props
        if prev_props is None:
            self.surface.set_style("background-image", css_url(props.background_url))
            self.surface.set_style("background-color", props.background_color)
            self.resize_element(props.width, props.height)
            return

        if prev_props.background_url != props.background_url:
            logger.debug("console #%s background image -> %s", props.id, props.background_url)
            self.surface.set_style("background-image", css_url(props.background_url))
        if prev_props.background_color != props.background_color:
            logger.debug("console #%s background color -> %s", props.id, props.background_color)
            self.surface.set_style("background-color", props.background_color)
        if size_changed(prev_props.size, props.size):
            logger.debug("console #%s resized to %dx%d", props.id, props.width, props.height)
            self.resize_element(props.width, props.height)

    def resize_element(self, width: int, height: int) -> None:
        self.surface.set_style("width", px(width))
        self.surface.set_style("height", px(height))

    def resize(self, width: int, height: int) -> None:
        self.set_props(replace(self._props, width=width, height=height))

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        widgets, self._widgets = self._widgets, []
        for widget in widgets:
            widget.dispose()
        logger.debug("console #%s disposed", self._props.id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "console": self._props.to_dict(),
            "widgets": [widget.props.to_dict() for widget in self._widgets],
            "errors": [failure.to_dict() for failure in self.errors],
        }
