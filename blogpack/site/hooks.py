"""Hook point that runs before any page content is rendered."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from ..theme import ThemeResolver

RenderContext = dict[str, Any]
Hook = Callable[[RenderContext], None]


class PrerenderHooks:
    """Ordered hooks run against the render context ahead of the page body."""

    def __init__(self, hooks: Iterable[Hook] = ()):
        self._hooks: list[Hook] = list(hooks)

    def register(self, hook: Hook) -> Hook:
        self._hooks.append(hook)
        return hook

    def run(self, context: RenderContext) -> RenderContext:
        for hook in self._hooks:
            hook(context)
        return context

    def __len__(self) -> int:
        return len(self._hooks)


def theme_hook(resolver: ThemeResolver) -> Hook:
    """Resolve the initial theme and expose it as ``context["theme"]``."""

    def _resolve(context: RenderContext) -> None:
        context["theme"] = resolver.resolve_initial_theme()

    return _resolve
