"""Minimal typed event channel with disposable subscriptions."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")
Listener = Callable[[T], None]


class Disposable:
    def __init__(self, dispose: Callable[[], None]) -> None:
        self._dispose = dispose
        self.disposed = False

    def dispose(self) -> None:
        if self.disposed:
            return
        self.disposed = True
        self._dispose()


class TypedEvent(Generic[T]):
    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def on(self, listener: Listener) -> Disposable:
        self._listeners.append(listener)
        return Disposable(lambda: self.off(listener))

    def off(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def clear(self) -> None:
        self._listeners.clear()

    def emit(self, event: T) -> None:
        # Listeners may unsubscribe (or dispose the owner) while we iterate.
        for listener in list(self._listeners):
            listener(event)
