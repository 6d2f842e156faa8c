"""Icon widget."""

from __future__ import annotations

from vc_core.formatting import shorten
from vc_core.models import IconProps
from vc_core.surface import Element
from vc_core.widget import Widget


class Icon(Widget[IconProps]):
    def create_dom_element(self) -> Element:
        img = Element("img", class_name="icon")
        img.set_attribute("src", self.props.image_src)
        return img

    def describe(self) -> str:
        return f"img {shorten(self.props.image_src)}"
