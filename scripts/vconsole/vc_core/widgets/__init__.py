"""Implemented widget variants."""

from __future__ import annotations

from vc_core.widgets.color_cloud import ColorCloud
from vc_core.widgets.group import Group
from vc_core.widgets.icon import Icon
from vc_core.widgets.static_graph import StaticGraph

__all__ = ["ColorCloud", "Group", "Icon", "StaticGraph"]
