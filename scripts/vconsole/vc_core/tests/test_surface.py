from __future__ import annotations

import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from vc_core.events import Disposable, TypedEvent  # noqa: E402
from vc_core.surface import APPEND, REMOVE, STYLE, Element, Mutation  # noqa: E402


class TypedEventTests(unittest.TestCase):
    def test_listeners_run_in_registration_order(self):
        event = TypedEvent()
        calls = []
        event.on(lambda value: calls.append(("a", value)))
        event.on(lambda value: calls.append(("b", value)))
        event.emit(1)
        self.assertEqual(calls, [("a", 1), ("b", 1)])

    def test_dispose_unsubscribes_once(self):
        event = TypedEvent()
        calls = []
        handle = event.on(calls.append)
        handle.dispose()
        handle.dispose()
        event.emit("x")
        self.assertEqual(calls, [])
        self.assertTrue(handle.disposed)
        self.assertEqual(len(event), 0)

    def test_listener_may_clear_channel_while_emitting(self):
        event = TypedEvent()
        calls = []
        event.on(lambda _: event.clear())
        event.on(calls.append)
        event.emit("x")
        self.assertEqual(calls, ["x"])
        self.assertEqual(len(event), 0)

    def test_disposable_wraps_callback(self):
        calls = []
        handle = Disposable(lambda: calls.append(1))
        handle.dispose()
        handle.dispose()
        self.assertEqual(calls, [1])


class ElementTests(unittest.TestCase):
    def test_style_writes_are_recorded(self):
        element = Element()
        element.set_style("width", "10px")
        element.set_style("width", None)
        self.assertEqual(element.style, {})
        self.assertEqual(
            element.style_mutations(),
            [Mutation(STYLE, "width", "10px"), Mutation(STYLE, "width", None)],
        )

    def test_append_moves_child_between_parents(self):
        first, second, child = Element(), Element(), Element("img", "icon")
        first.append(child)
        second.append(child)
        self.assertEqual(first.children, [])
        self.assertEqual(second.children, [child])
        self.assertIs(child.parent, second)
        self.assertEqual([m.kind for m in first.mutations], [APPEND, REMOVE])

    def test_append_existing_child_moves_it_last(self):
        parent = Element()
        a, b = Element(), Element()
        parent.append(a)
        parent.append(b)
        parent.append(a)
        self.assertEqual(parent.children, [b, a])

    def test_remove_without_parent_is_noop(self):
        element = Element()
        element.remove()
        self.assertIsNone(element.parent)

    def test_dispatch_reaches_listeners(self):
        element = Element()
        seen = []
        handle = element.add_listener("click", seen.append)
        element.dispatch("click", "evt")
        element.dispatch("hover", "ignored")
        handle.dispose()
        element.dispatch("click", "late")
        self.assertEqual(seen, ["evt"])
        self.assertEqual(element.listener_count("click"), 0)

    def test_walk_visits_descendants(self):
        root = Element("div")
        child = root.append(Element("svg"))
        child.append(Element("circle"))
        self.assertEqual([e.tag for e in root.walk()], ["div", "svg", "circle"])


if __name__ == "__main__":
    unittest.main()
