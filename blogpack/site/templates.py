"""HTML building blocks for blog pages."""

from __future__ import annotations

from html import escape

from ..config import THEME_STORAGE_KEY
from ..theme import Theme, bootstrap_script
from .styles import CSS

_TOGGLE_JS = (
    "window.__setPreferredTheme("
    "document.documentElement.getAttribute('data-theme') === 'dark' ? 'light' : 'dark')"
)


def html_doc(
    title: str,
    description: str,
    theme: Theme,
    body: str,
    storage_key: str = THEME_STORAGE_KEY,
) -> str:
    """Full document. The theme bootstrap script is always the first child of <head>."""
    return (
        "<!doctype html>\n"
        f'<html lang="en" data-theme="{escape(Theme(theme).value, quote=True)}">\n'
        "<head>\n"
        f"{bootstrap_script(storage_key, fallback=Theme(theme))}\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"<title>{escape(title)}</title>\n"
        f'<meta name="description" content="{escape(description, quote=True)}">\n'
        f"<style>{CSS}</style>\n"
        "</head>\n"
        "<body>\n"
        f"{body}\n"
        "</body>\n"
        "</html>\n"
    )


def link(href: str, text: str) -> str:
    return f'<a href="{escape(href, quote=True)}">{escape(text)}</a>'


def theme_toggle() -> str:
    return (
        f'<button type="button" class="theme-toggle" onclick="{escape(_TOGGLE_JS, quote=True)}">'
        "Toggle theme</button>"
    )


def subscribe_form() -> str:
    return (
        '<form class="subscribe" method="post" action="/subscribe">'
        '<div class="muted">Get new posts by email.</div>'
        '<input type="email" name="email" placeholder="you@example.com" required>'
        '<button type="submit">Subscribe</button>'
        "</form>"
    )


def ad_slot() -> str:
    return '<div class="ad-slot" aria-label="Advertisement"></div>'


def movable_sidebar_content(mobile: bool = False) -> str:
    """Links that sit in the sidebar on desktop and below the page on mobile."""
    css_class = "mobile-only" if mobile else "movable"
    return (
        f'<div class="{css_class}">'
        f"{link('/', 'Home')} · {link('/rss.xml', 'RSS')}"
        f"<div>{theme_toggle()}</div>"
        "</div>"
    )


def sidebar(site_title: str, site_subtitle: str, hide_subscribe: bool, hide_ad: bool) -> str:
    lines = [
        '<aside class="sidebar">',
        f'<div class="site-title">{link("/", site_title)}</div>',
        f'<div class="muted">{escape(site_subtitle)}</div>',
        movable_sidebar_content(mobile=False),
    ]
    if not hide_subscribe:
        lines.append(subscribe_form())
    if not hide_ad:
        lines.append(ad_slot())
    lines.append("</aside>")
    return "\n".join(lines)


def page(title: str, body_html: str) -> str:
    """Page column. ``body_html`` is already-rendered HTML and is inserted as is."""
    return "\n".join(
        [
            '<main class="page">',
            f'<h1 class="page-title">{escape(title)}</h1>',
            f'<div class="page-body">{body_html}</div>',
            "</main>",
        ]
    )


def layout(sidebar_html: str, page_html: str) -> str:
    return f'<div class="layout">\n{sidebar_html}\n{page_html}\n</div>'
