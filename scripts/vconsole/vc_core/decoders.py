"""Validating decoders from raw descriptor dicts to typed props records.

Every decoder either returns a fully populated, frozen props record or
raises a :class:`~vc_core.errors.VisualConsoleError` naming the field
that failed. Nothing partially valid ever leaves this module.
"""

from __future__ import annotations

import math
import re
from typing import Any, Mapping

from vc_core.errors import (
    InvalidConsolePropsError,
    InvalidWidgetPropsError,
    VisualConsoleError,
)
from vc_core.models import (
    LABEL_POSITIONS,
    TOOLTIP_MODES,
    ColorCloudProps,
    ConsoleProps,
    GroupProps,
    IconProps,
    StaticGraphProps,
    WidgetType,
)

LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
TRUTHY_STRINGS = {"1", "true"}


def parse_int_or(value: Any, default: Any = None) -> Any:
    """Return ``value`` as an int, or ``default`` when it does not parse.

    Strings parse by their leading integer, so ``"12px"`` gives ``12``.
    Floats are truncated. Booleans are not treated as integers.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return default
        return int(value)
    if isinstance(value, str):
        match = LEADING_INT_RE.match(value)
        if match:
            return int(match.group(1))
    return default


def parse_boolean(value: Any) -> bool:
    """Permissive truthiness coercion.

    ``True``, numbers greater than zero and the strings ``"1"`` or
    ``"true"`` (any case, surrounding whitespace ignored) are true.
    Anything else, including unexpected strings such as ``"yes"``, is
    false. This is not a strict type check: a malformed value silently
    decodes to ``False``.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value > 0
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_STRINGS
    return False


def not_empty_string_or(value: Any, default: Any = None) -> Any:
    if isinstance(value, str) and len(value) > 0:
        return value
    return default


def _required_int(data: Mapping[str, Any], key: str, error: type[VisualConsoleError], message: str) -> int:
    parsed = parse_int_or(data.get(key), None)
    if parsed is None:
        raise error(message, field=key)
    return parsed


def _required_string(data: Mapping[str, Any], key: str, error: type[VisualConsoleError], message: str) -> str:
    value = not_empty_string_or(data.get(key), None)
    if value is None:
        raise error(message, field=key)
    return value


def size_props_decoder(
    data: Mapping[str, Any],
    error: type[VisualConsoleError] = InvalidWidgetPropsError,
) -> dict[str, int]:
    """Decode the required, non-negative ``width`` and ``height`` pair."""
    size: dict[str, int] = {}
    for key in ("width", "height"):
        value = parse_int_or(data.get(key), None)
        if value is None or value < 0:
            raise error(f"invalid size: {key}.", field=key)
        size[key] = value
    return size


def position_props_decoder(data: Mapping[str, Any]) -> dict[str, int]:
    return {
        "x": parse_int_or(data.get("x"), 0),
        "y": parse_int_or(data.get("y"), 0),
    }


def _ensure_mapping(data: Any, error: type[VisualConsoleError]) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise error(f"expected an object, got {type(data).__name__}.")
    return data


def console_props_decoder(data: Any) -> ConsoleProps:
    data = _ensure_mapping(data, InvalidConsolePropsError)
    console_id = _required_int(data, "id", InvalidConsolePropsError, "invalid id.")
    name = _required_string(data, "name", InvalidConsolePropsError, "invalid name.")
    group_id = _required_int(data, "groupId", InvalidConsolePropsError, "invalid group id.")

    return ConsoleProps(
        id=console_id,
        name=name,
        group_id=group_id,
        background_url=not_empty_string_or(data.get("backgroundURL")),
        background_color=not_empty_string_or(data.get("backgroundColor")),
        is_favorite=parse_boolean(data.get("isFavorite")),
        **size_props_decoder(data, InvalidConsolePropsError),
    )


def widget_base_props_decoder(data: Any) -> dict[str, Any]:
    """Decode the fields shared by every widget variant into keyword arguments."""
    data = _ensure_mapping(data, InvalidWidgetPropsError)
    widget_id = _required_int(data, "id", InvalidWidgetPropsError, "invalid id.")
    raw_type = _required_int(data, "type", InvalidWidgetPropsError, "invalid type.")
    try:
        widget_type = WidgetType(raw_type)
    except ValueError as exc:
        raise InvalidWidgetPropsError("invalid type.", field="type") from exc

    label_position = data.get("labelPosition")
    if label_position not in LABEL_POSITIONS:
        label_position = "down"

    return {
        "id": widget_id,
        "type": widget_type,
        "label": not_empty_string_or(data.get("label")),
        "label_position": label_position,
        "is_link_enabled": parse_boolean(data.get("isLinkEnabled")),
        "link": not_empty_string_or(data.get("link")),
        "is_on_top": parse_boolean(data.get("isOnTop")),
        "parent_id": parse_int_or(data.get("parentId"), None),
        "acl_group_id": parse_int_or(data.get("aclGroupId"), None),
        **size_props_decoder(data, InvalidWidgetPropsError),
        **position_props_decoder(data),
    }


def linked_module_props_decoder(data: Mapping[str, Any]) -> dict[str, int | None]:
    return {
        "agent_id": parse_int_or(data.get("agentId"), None),
        "module_id": parse_int_or(data.get("moduleId"), None),
    }


def static_graph_props_decoder(data: Any) -> StaticGraphProps:
    base = widget_base_props_decoder(data)
    tooltip = data.get("showLastValueTooltip")
    if tooltip not in TOOLTIP_MODES:
        tooltip = "default"
    return StaticGraphProps(
        **base,
        image_src=_required_string(data, "imageSrc", InvalidWidgetPropsError, "invalid image src."),
        status_image_src=not_empty_string_or(data.get("statusImageSrc")),
        show_last_value_tooltip=tooltip,
        **linked_module_props_decoder(data),
    )


def icon_props_decoder(data: Any) -> IconProps:
    base = widget_base_props_decoder(data)
    return IconProps(
        **base,
        image_src=_required_string(data, "imageSrc", InvalidWidgetPropsError, "invalid image src."),
    )


def group_props_decoder(data: Any) -> GroupProps:
    base = widget_base_props_decoder(data)
    return GroupProps(
        **base,
        image_src=_required_string(data, "imageSrc", InvalidWidgetPropsError, "invalid image src."),
        group_id=_required_int(data, "groupId", InvalidWidgetPropsError, "invalid group id."),
    )


def color_cloud_props_decoder(data: Any) -> ColorCloudProps:
    base = widget_base_props_decoder(data)
    return ColorCloudProps(
        **base,
        color=_required_string(data, "color", InvalidWidgetPropsError, "invalid color."),
        **linked_module_props_decoder(data),
    )
