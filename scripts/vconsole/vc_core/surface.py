"""In-memory element tree the console paints onto.

Elements behave like a tiny subset of the DOM: they carry style
properties, attributes and children, and accept event listeners. Every
write is recorded as a :class:`Mutation` on the element it touched, so
the cost of a re-render is observable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator

from vc_core.events import Disposable, TypedEvent

STYLE = "style"
ATTRIBUTE = "attr"
APPEND = "append"
REMOVE = "remove"


@dataclass(frozen=True)
class Mutation:
    kind: str
    name: str
    value: Any = None


class Element:
    def __init__(self, tag: str = "div", class_name: str = "") -> None:
        self.tag = tag
        self.class_name = class_name
        self.style: dict[str, str] = {}
        self.attributes: dict[str, str] = {}
        self.children: list[Element] = []
        self.parent: Element | None = None
        self.mutations: list[Mutation] = []
        self._events: dict[str, TypedEvent] = {}

    def __repr__(self) -> str:
        klass = f".{self.class_name}" if self.class_name else ""
        return f"<{self.tag}{klass} children={len(self.children)}>"

    # Style and attributes.

    def set_style(self, name: str, value: str | None) -> None:
        if value is None:
            self.style.pop(name, None)
        else:
            self.style[name] = value
        self.mutations.append(Mutation(STYLE, name, value))

    def set_attribute(self, name: str, value: str | None) -> None:
        if value is None:
            self.attributes.pop(name, None)
        else:
            self.attributes[name] = value
        self.mutations.append(Mutation(ATTRIBUTE, name, value))

    def style_mutations(self) -> list[Mutation]:
        return [m for m in self.mutations if m.kind == STYLE]

    def clear_mutations(self) -> None:
        self.mutations.clear()

    # Tree.

    def append(self, child: Element) -> Element:
        """Append ``child``, moving it when it already has a parent."""
        if child.parent is not None:
            child.parent._detach(child)
        child.parent = self
        self.children.append(child)
        self.mutations.append(Mutation(APPEND, child.class_name or child.tag, child))
        return child

    def remove(self) -> None:
        if self.parent is not None:
            self.parent._detach(self)

    def replace_children(self, *children: Element) -> None:
        for child in list(self.children):
            child.remove()
        for child in children:
            self.append(child)

    def _detach(self, child: Element) -> None:
        self.children.remove(child)
        child.parent = None
        self.mutations.append(Mutation(REMOVE, child.class_name or child.tag, child))

    def walk(self) -> Iterator[Element]:
        yield self
        for child in self.children:
            yield from child.walk()

    # Events.

    def add_listener(self, event: str, listener: Callable[[Any], None]) -> Disposable:
        return self._events.setdefault(event, TypedEvent()).on(listener)

    def listener_count(self, event: str) -> int:
        channel = self._events.get(event)
        return len(channel) if channel is not None else 0

    def dispatch(self, event: str, payload: Any = None) -> None:
        channel = self._events.get(event)
        if channel is not None:
            channel.emit(payload)

