"""Base class shared by every visual console widget variant."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, TypeVar

from vc_core.events import Disposable, TypedEvent
from vc_core.formatting import px
from vc_core.models import WidgetProps
from vc_core.surface import Element

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=WidgetProps)


@dataclass(frozen=True)
class WidgetClickEvent:
    data: WidgetProps
    widget: "Widget"
    native_event: Any = None


ClickHandler = Callable[[WidgetClickEvent], None]


class Widget(ABC, Generic[P]):
    """A widget owns exactly one element and the click subscriptions made on it.

    The element is built on construction but never inserted anywhere;
    whoever creates the widget decides where it goes.
    """

    class_name = "visual-console-item"

    def __init__(self, props: P) -> None:
        self._props = props
        self._click = TypedEvent[WidgetClickEvent]()
        self._disposed = False

        self.element = Element("div", class_name=self.class_name)
        self.element.set_attribute("data-id", str(props.id))
        self.element.set_attribute("data-type", props.type.name)
        self.child_element = self.create_dom_element()
        self.element.append(self.child_element)
        self._element_click = self.element.add_listener("click", self._handle_click)

        self.render()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self._props.id} on_top={self._props.is_on_top}>"

    @property
    def props(self) -> P:
        return self._props

    @property
    def disposed(self) -> bool:
        return self._disposed

    @abstractmethod
    def create_dom_element(self) -> Element:
        """Build the variant's own content element."""

    @abstractmethod
    def describe(self) -> str:
        """One-line summary of what the widget paints."""

    def render(self, prev_props: P | None = None) -> None:
        props = self._props
        if prev_props is None:
            self.element.set_style("position", "absolute")
            self.move_element(props.x, props.y)
            self.resize_element(props.width, props.height)
            return

        if prev_props.position != props.position:
            self.move_element(props.x, props.y)
        if prev_props.size != props.size:
            self.resize_element(props.width, props.height)
        if self._content_changed(prev_props, props):
            self.child_element.remove()
            self.child_element = self.create_dom_element()
            self.element.append(self.child_element)

    @staticmethod
    def _content_changed(prev_props: P, props: P) -> bool:
        geometry = {"x": 0, "y": 0, "width": 0, "height": 0}
        return replace(prev_props, **geometry) != replace(props, **geometry)

    def set_props(self, new_props: P) -> P:
        """Swap in ``new_props`` and patch only what changed. Returns the previous props."""
        prev_props = self._props
        self._props = new_props
        self.render(prev_props)
        return prev_props

    def move_element(self, x: int, y: int) -> None:
        self.element.set_style("left", px(x))
        self.element.set_style("top", px(y))

    def resize_element(self, width: int, height: int) -> None:
        self.element.set_style("width", px(width))
        self.element.set_style("height", px(height))

    def move(self, x: int, y: int) -> None:
        self.set_props(replace(self._props, x=x, y=y))

    def resize(self, width: int, height: int) -> None:
        self.set_props(replace(self._props, width=width, height=height))

    def subscribe_click(self, handler: ClickHandler) -> Disposable:
        return self._click.on(handler)

    def click(self, native_event: Any = None) -> None:
        self.element.dispatch("click", native_event)

    def _handle_click(self, native_event: Any) -> None:
        self._click.emit(WidgetClickEvent(data=self._props, widget=self, native_event=native_event))

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self._element_click.dispose()
        self._click.clear()
        self.element.remove()
        logger.debug("disposed widget #%s", self._props.id)
