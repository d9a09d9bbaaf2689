"""CLI entry point for blogpack.

This CLI intentionally avoids third-party CLI frameworks so the project remains
easy to run in constrained environments.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config import PREFS_PATH, SITE_SUBTITLE, SITE_TITLE, SYSTEM_THEME


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint (kept as `app` for packaging compatibility)."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="blogpack",
        description="Static blog pages with a flash-free light/dark theme.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"blogpack {__version__}",
    )
    parser.add_argument("--verbose", action="store_true", help="Log progress to stderr")

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_site = sub.add_parser("site", help="Generate the static site from markdown pages")
    p_site.add_argument("--content", type=Path, default=Path("./content"), help="Directory of markdown pages")
    p_site.add_argument("--out", "-o", type=Path, default=Path("./public"), help="Site output directory")
    p_site.add_argument("--title", default=SITE_TITLE, help="Site title")
    p_site.add_argument("--subtitle", default=SITE_SUBTITLE, help="Site subtitle (default meta description)")
    p_site.add_argument("--prefs", type=Path, default=None, help="Preferences file holding an explicit theme")
    _add_system_arg(p_site)

    p_theme = sub.add_parser("theme", help="Show, set or clear the preferred theme")
    p_theme.add_argument("action", choices=["show", "set", "clear"])
    p_theme.add_argument("value", nargs="?", help="light or dark (for 'set')")
    p_theme.add_argument("--prefs", type=Path, default=PREFS_PATH, help="Preferences file")
    _add_system_arg(p_theme)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "site":
        return _cmd_site(args)
    if args.cmd == "theme":
        return _cmd_theme(args)

    parser.print_help()
    return 2


def _add_system_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--system",
        choices=["light", "dark"],
        default=SYSTEM_THEME or None,
        help="System color scheme to assume (default: $BLOGPACK_SYSTEM_THEME, else light)",
    )


def _resolver(args: Any, prefs: Path | None) -> Any:
    from .theme import JsonFileStorage, MemoryStorage, ThemeResolver, signal_from_setting

    storage = JsonFileStorage(prefs) if prefs is not None else MemoryStorage()
    return ThemeResolver(storage, signal_from_setting(args.system))


def _cmd_site(args: Any) -> int:
    from .site.build import build_site
    from .site.content import ContentError
    from .site.page import SiteMetadata

    try:
        report = build_site(
            args.content,
            args.out,
            SiteMetadata(title=args.title, subtitle=args.subtitle),
            resolver=_resolver(args, args.prefs),
        )
    except ContentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("✓ Site generated")
    print(f"  Output: {report.get('out_dir')}")
    print(f"  Pages: {report.get('pages')}")
    print(f"  Theme: {report.get('theme')}")
    total_bytes = int(report.get("total_bytes") or 0)
    print(f"  Size: {total_bytes / 1024:.1f} KB")
    return 0


def _cmd_theme(args: Any) -> int:
    from .theme import InvalidThemeError

    resolver = _resolver(args, args.prefs)

    if args.action == "set":
        if not args.value:
            print("Error: 'theme set' needs a value (light or dark)", file=sys.stderr)
            return 2
        try:
            theme = resolver.set_preferred_theme(args.value)
        except InvalidThemeError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        if resolver.persist_error is not None:
            print(f"Error: preferred theme {theme} not saved: {resolver.persist_error}", file=sys.stderr)
            return 1
        print(f"Preferred theme: {theme}")
        return 0

    if args.action == "clear":
        theme = resolver.clear_preferred_theme()
        if resolver.persist_error is not None:
            print(f"Error: preferred theme not cleared: {resolver.persist_error}", file=sys.stderr)
            return 1
        print(f"Preferred theme cleared; following system ({theme})")
        return 0

    theme = resolver.resolve_initial_theme()
    source = "preference" if resolver.has_explicit_preference() else "system"
    print(f"{theme} ({source})")
    return 0


if __name__ == "__main__":
    app()
