"""Shared text and CSS formatting helpers."""

from __future__ import annotations

from vc_core.models import WidgetType

SPECIAL_TYPE_LABELS = {
    WidgetType.GROUP_ITEM: "Group",
    WidgetType.BOX_ITEM: "Box",
    WidgetType.LINE_ITEM: "Line",
}

TOKEN_LABELS = {
    "sla": "SLA",
}


def widget_type_label(widget_type: WidgetType | int | None) -> str:
    if widget_type is None:
        return "Unknown"
    try:
        member = WidgetType(widget_type)
    except ValueError:
        return f"Unknown ({widget_type})"

    mapped = SPECIAL_TYPE_LABELS.get(member)
    if mapped:
        return mapped

    parts: list[str] = []
    for token in member.name.split("_"):
        lower = token.lower()
        parts.append(TOKEN_LABELS.get(lower, lower.capitalize()))
    return " ".join(parts)


def px(value: int) -> str:
    return f"{int(value)}px"


def css_url(url: str | None) -> str | None:
    if url is None:
        return None
    return f'url("{url}")'


def shorten(text: str | None, limit: int = 40) -> str:
    if not text:
        return "-"
    if len(text) <= limit:
        return text
    keep = max(1, limit - 3)
    head = keep // 2
    tail = keep - head
    return f"{text[:head]}...{text[-tail:]}"
