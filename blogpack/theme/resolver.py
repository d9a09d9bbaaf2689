"""Initial theme selection and live theme policy."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..config import THEME_STORAGE_KEY
from .models import InvalidThemeError, Theme, parse_theme
from .signal import SystemSignal
from .storage import PreferenceStorage
from .store import ThemeStore

logger = logging.getLogger(__name__)


class ThemeResolver:
    """Decide between light and dark before a page renders, then keep it current.

    Priority, first match wins:
        1. explicit persisted preference
        2. system signal reports dark -> dark
        3. light

    Every method is synchronous. Storage failures never escape: a failed read
    counts as "no preference" and a failed write leaves the in-memory choice
    in effect for the rest of the session.
    """

    def __init__(
        self,
        storage: PreferenceStorage,
        signal: SystemSignal,
        store: ThemeStore | None = None,
        key: str = THEME_STORAGE_KEY,
    ):
        self.storage = storage
        self.signal = signal
        self.store = store if store is not None else ThemeStore()
        self.key = key
        # Choice made during this session; authoritative even if persisting it failed.
        self._session_choice: Theme | None = None
        self._unsubscribe: Callable[[], None] | None = None
        # Storage failure from the last set/clear, None when it was written.
        self.persist_error: Exception | None = None

    @property
    def theme(self) -> Theme | None:
        return self.store.value

    def resolve_initial_theme(self) -> Theme:
        """Resolve and publish the theme for this page load. Never raises."""
        theme = self._explicit_preference()
        if theme is None:
            theme = Theme.from_system(self._system_is_dark())
        self.store.publish(theme)
        return theme

    def set_preferred_theme(self, theme: Theme | str) -> Theme:
        """Make an explicit choice take effect now and persist it if possible.

        Raises:
            InvalidThemeError: If theme is not light or dark. Nothing is
                published or written in that case.
        """
        chosen = parse_theme(theme)
        self._session_choice = chosen
        self.store.publish(chosen)
        try:
            self.storage.set(self.key, chosen.value)
            self.persist_error = None
        except Exception as e:
            self.persist_error = e
            logger.debug("Theme preference not persisted (%s); keeping %s for this session", e, chosen)
        return chosen

    def clear_preferred_theme(self) -> Theme:
        """Drop the explicit choice and go back to following the system signal."""
        self._session_choice = None
        try:
            self.storage.delete(self.key)
            self.persist_error = None
        except Exception as e:
            self.persist_error = e
            logger.debug("Theme preference not cleared from storage (%s)", e)
        theme = Theme.from_system(self._system_is_dark())
        self.store.publish(theme)
        return theme

    def on_system_preference_change(self, is_dark: bool) -> Theme | None:
        """Follow a system color-scheme change unless an explicit choice exists."""
        if self._explicit_preference() is not None:
            logger.debug("Ignoring system theme change; explicit preference in effect")
            return self.store.value
        theme = Theme.from_system(bool(is_dark))
        self.store.publish(theme)
        return theme

    def has_explicit_preference(self) -> bool:
        return self._explicit_preference() is not None

    def attach(self) -> None:
        """Start following the system signal."""
        if self._unsubscribe is None:
            self._unsubscribe = self.signal.on_change(self.on_system_preference_change)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _explicit_preference(self) -> Theme | None:
        if self._session_choice is not None:
            return self._session_choice
        return self._read_persisted()

    def _read_persisted(self) -> Theme | None:
        try:
            raw = self.storage.get(self.key)
        except Exception as e:
            logger.debug("Theme preference unreadable (%s); treating as unset", e)
            return None
        if raw is None:
            return None
        try:
            return parse_theme(raw)
        except InvalidThemeError:
            logger.debug("Ignoring stored theme preference %r", raw)
            return None

    def _system_is_dark(self) -> bool:
        try:
            return bool(self.signal.is_dark_preferred())
        except Exception as e:
            logger.debug("System theme signal unavailable (%s); assuming light", e)
            return False
