"""Observable holder for the resolved theme."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .models import Theme

logger = logging.getLogger(__name__)

Listener = Callable[[Theme], None]


class ThemeStore:
    """Single slot holding the theme in effect for the current render.

    The store starts unresolved (``value is None``). Listeners are notified in
    registration order, and only when the published value actually changes. A
    listener that raises is logged and skipped; publishing itself never fails.
    """

    def __init__(self) -> None:
        self._value: Theme | None = None
        self._listeners: list[Listener] = []

    @property
    def value(self) -> Theme | None:
        return self._value

    @property
    def resolved(self) -> bool:
        return self._value is not None

    def publish(self, theme: Theme) -> None:
        if theme == self._value:
            return
        self._value = theme
        for listener in list(self._listeners):
            try:
                listener(theme)
            except Exception:
                logger.exception("Theme listener %r failed for %s", listener, theme)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe
