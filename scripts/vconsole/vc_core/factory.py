"""Widget construction from raw descriptors."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from vc_core.decoders import (
    color_cloud_props_decoder,
    group_props_decoder,
    icon_props_decoder,
    parse_int_or,
    static_graph_props_decoder,
)
from vc_core.errors import UnknownOrUnsupportedVariantError
from vc_core.models import WidgetType
from vc_core.widget import Widget
from vc_core.widgets import ColorCloud, Group, Icon, StaticGraph

Constructor = Callable[[Any], Widget]


def _build(decoder: Callable[[Any], Any], widget_cls: type[Widget]) -> Constructor:
    def construct(data: Any) -> Widget:
        return widget_cls(decoder(data))

    construct.__name__ = f"construct_{widget_cls.__name__}"
    return construct


# None means "known type, not implemented": rejected like an unknown tag.
WIDGET_CONSTRUCTORS: dict[WidgetType, Constructor | None] = {
    WidgetType.STATIC_GRAPH: _build(static_graph_props_decoder, StaticGraph),
    WidgetType.MODULE_GRAPH: None,
    WidgetType.SIMPLE_VALUE: None,
    WidgetType.PERCENTILE_BAR: None,
    WidgetType.LABEL: None,
    WidgetType.ICON: _build(icon_props_decoder, Icon),
    WidgetType.SIMPLE_VALUE_MAX: None,
    WidgetType.SIMPLE_VALUE_MIN: None,
    WidgetType.SIMPLE_VALUE_AVG: None,
    WidgetType.PERCENTILE_BUBBLE: None,
    WidgetType.SERVICE: None,
    WidgetType.GROUP_ITEM: _build(group_props_decoder, Group),
    WidgetType.BOX_ITEM: None,
    WidgetType.LINE_ITEM: None,
    WidgetType.AUTO_SLA_GRAPH: None,
    WidgetType.CIRCULAR_PROGRESS_BAR: None,
    WidgetType.CIRCULAR_INTERIOR_PROGRESS_BAR: None,
    WidgetType.DONUT_GRAPH: None,
    WidgetType.BARS_GRAPH: None,
    WidgetType.CLOCK: None,
    WidgetType.COLOR_CLOUD: _build(color_cloud_props_decoder, ColorCloud),
}


def check_exhaustive(table: Mapping[WidgetType, Any]) -> None:
    missing = [member.name for member in WidgetType if member not in table]
    if missing:
        raise RuntimeError(f"widget types without a dispatch decision: {', '.join(missing)}")


check_exhaustive(WIDGET_CONSTRUCTORS)


def supported_types() -> list[WidgetType]:
    return [member for member, constructor in WIDGET_CONSTRUCTORS.items() if constructor is not None]


def resolve_type(data: Any) -> WidgetType:
    raw = data.get("type") if isinstance(data, Mapping) else None
    parsed = parse_int_or(raw, None)
    if parsed is None:
        raise UnknownOrUnsupportedVariantError("missing widget type.", field="type")
    try:
        return WidgetType(parsed)
    except ValueError:
        raise UnknownOrUnsupportedVariantError(f"unknown widget type: {parsed}.", field="type") from None


def widget_from(data: Any) -> Widget:
    """Build the widget a raw descriptor describes.

    Raises UnknownOrUnsupportedVariantError for a missing, unknown or
    unimplemented ``type``, and InvalidWidgetPropsError when the
    variant's own fields do not decode.
    """
    widget_type = resolve_type(data)
    constructor = WIDGET_CONSTRUCTORS[widget_type]
    if constructor is None:
        raise UnknownOrUnsupportedVariantError(
            f"widget type not supported: {widget_type.name}.", field="type"
        )
    return constructor(data)
