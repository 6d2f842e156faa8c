"""Color cloud: a radial gradient filled with the module's status color."""

from __future__ import annotations

from vc_core.models import ColorCloudProps
from vc_core.surface import Element
from vc_core.widget import Widget


class ColorCloud(Widget[ColorCloudProps]):
    def gradient_id(self) -> str:
        return f"grad_{self.props.id}"

    def create_dom_element(self) -> Element:
        svg = Element("svg", class_name="color-cloud")
        svg.set_attribute("viewBox", "0 0 100 100")

        gradient = Element("radialGradient")
        gradient.set_attribute("id", self.gradient_id())
        for offset, opacity in (("0%", "0.9"), ("100%", "0")):
            stop = Element("stop")
            stop.set_attribute("offset", offset)
            stop.set_attribute("stop-color", self.props.color)
            stop.set_attribute("stop-opacity", opacity)
            gradient.append(stop)
        svg.append(gradient)

        circle = Element("circle")
        circle.set_attribute("cx", "50")
        circle.set_attribute("cy", "50")
        circle.set_attribute("r", "50")
        circle.set_attribute("fill", f"url(#{self.gradient_id()})")
        svg.append(circle)
        return svg

    def describe(self) -> str:
        return f"cloud {self.props.color}"
