"""Group widget: the status image of a monitoring group."""

from __future__ import annotations

from vc_core.formatting import shorten
from vc_core.models import GroupProps
from vc_core.surface import Element
from vc_core.widget import Widget


class Group(Widget[GroupProps]):
    def create_dom_element(self) -> Element:
        img = Element("img", class_name="group")
        img.set_attribute("src", self.props.image_src)
        img.set_attribute("data-group-id", str(self.props.group_id))
        return img

    def describe(self) -> str:
        return f"group {self.props.group_id} img {shorten(self.props.image_src)}"
