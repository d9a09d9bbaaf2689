"""Theme values."""

from __future__ import annotations

from enum import StrEnum


class Theme(StrEnum):
    """Visual mode of a rendered page."""

    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_system(cls, is_dark: bool) -> Theme:
        return cls.DARK if is_dark else cls.LIGHT


class InvalidThemeError(ValueError):
    """Raised when a value outside {light, dark} is offered as a theme."""


def parse_theme(value: object) -> Theme:
    """Coerce a stored or user-supplied value into a Theme.

    Args:
        value: A Theme, or the exact string "light" or "dark"

    Returns:
        The matching Theme

    Raises:
        InvalidThemeError: If the value is not exactly "light" or "dark"
    """
    if isinstance(value, Theme):
        return value
    if isinstance(value, str):
        try:
            return Theme(value)
        except ValueError:
            pass
    raise InvalidThemeError(f"Unknown theme: {value!r} (expected 'light' or 'dark')")
