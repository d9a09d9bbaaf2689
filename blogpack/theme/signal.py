"""System color-scheme signal sources."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

Callback = Callable[[bool], None]


class SystemSignal(Protocol):
    def is_dark_preferred(self) -> bool: ...

    def on_change(self, callback: Callback) -> Callable[[], None]: ...


class StaticSystemSignal:
    """System signal driven explicitly by the host.

    Build runs have no operating system to ask, so the host sets the value up
    front and calls ``update`` when it learns of a change (tests do the same).
    """

    def __init__(self, is_dark: bool = False):
        self._is_dark = bool(is_dark)
        self._callbacks: list[Callback] = []

    def is_dark_preferred(self) -> bool:
        return self._is_dark

    def on_change(self, callback: Callback) -> Callable[[], None]:
        self._callbacks.append(callback)

        def _unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return _unsubscribe

    def update(self, is_dark: bool) -> None:
        is_dark = bool(is_dark)
        if is_dark == self._is_dark:
            return
        self._is_dark = is_dark
        for callback in list(self._callbacks):
            callback(is_dark)


def signal_from_setting(value: str | None) -> StaticSystemSignal:
    """Build a signal from a "dark"/"light" setting (env var or CLI flag).

    Anything other than "dark" (case-insensitive) reads as not dark.
    """
    return StaticSystemSignal(is_dark=(value or "").strip().lower() == "dark")
