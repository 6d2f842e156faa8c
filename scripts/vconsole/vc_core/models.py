"""Typed props records for the visual console and its widgets."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import IntEnum
from typing import Any


class WidgetType(IntEnum):
    STATIC_GRAPH = 0
    MODULE_GRAPH = 1
    SIMPLE_VALUE = 2
    PERCENTILE_BAR = 3
    LABEL = 4
    ICON = 5
    SIMPLE_VALUE_MAX = 6
    SIMPLE_VALUE_MIN = 7
    SIMPLE_VALUE_AVG = 8
    PERCENTILE_BUBBLE = 9
    SERVICE = 10
    GROUP_ITEM = 11
    BOX_ITEM = 12
    LINE_ITEM = 13
    AUTO_SLA_GRAPH = 14
    CIRCULAR_PROGRESS_BAR = 15
    CIRCULAR_INTERIOR_PROGRESS_BAR = 16
    DONUT_GRAPH = 17
    BARS_GRAPH = 18
    CLOCK = 19
    COLOR_CLOUD = 20


LABEL_POSITIONS = ("up", "right", "down", "left")
TOOLTIP_MODES = ("default", "enabled", "disabled")


@dataclass(frozen=True)
class Size:
    width: int
    height: int


@dataclass(frozen=True)
class Position:
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class ConsoleProps:
    id: int
    name: str
    group_id: int
    width: int
    height: int
    background_url: str | None = None
    background_color: str | None = None
    is_favorite: bool = False

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class WidgetProps:
    id: int
    type: WidgetType
    width: int
    height: int
    x: int = 0
    y: int = 0
    label: str | None = None
    label_position: str = "down"
    is_link_enabled: bool = False
    link: str | None = None
    is_on_top: bool = False
    parent_id: int | None = None
    acl_group_id: int | None = None

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["type"] = self.type.name
        return data


@dataclass(frozen=True)
class StaticGraphProps(WidgetProps):
    image_src: str = ""
    status_image_src: str | None = None
    show_last_value_tooltip: str = "default"
    agent_id: int | None = None
    module_id: int | None = None


@dataclass(frozen=True)
class IconProps(WidgetProps):
    image_src: str = ""


@dataclass(frozen=True)
class GroupProps(WidgetProps):
    image_src: str = ""
    group_id: int = 0


@dataclass(frozen=True)
class ColorCloudProps(WidgetProps):
    color: str = ""
    agent_id: int | None = None
    module_id: int | None = None
