"""Static graph: an image that swaps to a status image when one is set."""

from __future__ import annotations

from vc_core.formatting import shorten
from vc_core.models import StaticGraphProps
from vc_core.surface import Element
from vc_core.widget import Widget


class StaticGraph(Widget[StaticGraphProps]):
    def image_src(self) -> str:
        return self.props.status_image_src or self.props.image_src

    def create_dom_element(self) -> Element:
        img = Element("img", class_name="static-graph")
        img.set_attribute("src", self.image_src())
        if self.props.show_last_value_tooltip == "enabled" and self.props.label:
            img.set_attribute("title", self.props.label)
        return img

    def describe(self) -> str:
        module = ""
        if self.props.module_id is not None:
            module = f" module={self.props.module_id}"
        return f"img {shorten(self.image_src())}{module}"
