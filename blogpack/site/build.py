"""Static site generator for markdown pages."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ..config import SYSTEM_THEME
from ..theme import MemoryStorage, ThemeResolver, signal_from_setting
from .content import load_records
from .hooks import PrerenderHooks
from .manifest import SiteManifest, page_info, write_manifest
from .page import PageData, SiteMetadata, render_page

logger = logging.getLogger(__name__)


def default_resolver() -> ThemeResolver:
    """Resolver for build runs: no stored choice, system signal from the environment."""
    return ThemeResolver(MemoryStorage(), signal_from_setting(SYSTEM_THEME))


def build_site(
    content_dir: Path,
    out_dir: Path,
    site: SiteMetadata,
    resolver: ThemeResolver | None = None,
    hooks: PrerenderHooks | None = None,
) -> dict[str, Any]:
    """Build a static HTML site from a directory of markdown pages.

    Each page lands at ``{out_dir}/{slug}/index.html``. The theme is resolved
    before each page renders and stamped on its <html> element; the inline
    bootstrap script re-checks it in the browser before first paint.
    """
    content_dir = content_dir.resolve()
    out_dir = out_dir.resolve()
    out_dir.mkdir(parents=True, exist_ok=True)
    resolver = resolver if resolver is not None else default_resolver()

    records = load_records(content_dir)
    pages = []
    for record in records:
        html = render_page(PageData(site=site, markdown_remark=record), resolver, hooks)
        rel = f"{record.slug}/index.html"
        target = out_dir / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html, encoding="utf-8")
        pages.append(page_info(record, rel, html))
        logger.info("Wrote %s", rel)

    # No pages means no render ran the resolver.
    theme = resolver.theme if resolver.theme is not None else resolver.resolve_initial_theme()
    write_manifest(SiteManifest(site_title=site.title, theme=theme, pages=pages), out_dir)

    return {
        "pages": len(pages),
        "theme": theme.value,
        "out_dir": str(out_dir),
        "total_bytes": _dir_size_bytes(out_dir),
    }


def _dir_size_bytes(path: Path) -> int:
    total = 0
    for p in path.rglob("*"):
        if p.is_file():
            total += p.stat().st_size
    return total
