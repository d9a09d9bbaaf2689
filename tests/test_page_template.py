"""Tests for the page template, pre-render hooks and the bootstrap script."""

from __future__ import annotations

import unittest
from unittest.mock import patch

from blogpack.site import page as page_module
from blogpack.site.hooks import PrerenderHooks
from blogpack.site.page import (
    Frontmatter,
    MarkdownRecord,
    PageData,
    SiteMetadata,
    meta_description,
    page_template,
    page_title,
    render_page,
)
from blogpack.theme import MemoryStorage, StaticSystemSignal, Theme, ThemeResolver
from blogpack.theme.bootstrap import bootstrap_js, bootstrap_script


def _data(**frontmatter) -> PageData:
    fm = {"title": "About"}
    fm.update(frontmatter)
    return PageData(
        site=SiteMetadata(title="Blog", subtitle="Notes on software"),
        markdown_remark=MarkdownRecord(
            id="about",
            slug="about",
            html="<p>Hello <em>world</em></p>",
            frontmatter=Frontmatter.model_validate(fm),
        ),
    )


class TestPageTemplate(unittest.TestCase):
    def test_title_combines_page_and_site(self) -> None:
        data = _data()
        self.assertEqual(page_title(data), "About - Blog")
        self.assertIn("<title>About - Blog</title>", page_template(data, Theme.LIGHT))

    def test_description_falls_back_to_subtitle(self) -> None:
        self.assertEqual(meta_description(_data()), "Notes on software")
        self.assertEqual(meta_description(_data(description=None)), "Notes on software")
        self.assertEqual(meta_description(_data(description="Mine")), "Mine")
        # An empty description is still the page's own.
        self.assertEqual(meta_description(_data(description="")), "")

    def test_body_html_inserted_verbatim(self) -> None:
        html = page_template(_data(), Theme.LIGHT)
        self.assertIn("<p>Hello <em>world</em></p>", html)

    def test_sidebar_flags(self) -> None:
        html = page_template(_data(), Theme.LIGHT)
        self.assertIn('class="subscribe"', html)
        self.assertIn('class="ad-slot"', html)

        html = page_template(_data(hideSubscribe=True, hideAd=True), Theme.LIGHT)
        self.assertNotIn('class="subscribe"', html)
        self.assertNotIn('class="ad-slot"', html)

    def test_mobile_sidebar_content_follows_layout(self) -> None:
        html = page_template(_data(), Theme.LIGHT)
        self.assertLess(html.index('class="layout"'), html.index('class="mobile-only"'))

    def test_theme_stamped_and_bootstrap_first_in_head(self) -> None:
        html = page_template(_data(), Theme.DARK)
        self.assertIn('<html lang="en" data-theme="dark">', html)
        head = html[html.index("<head>") + len("<head>") :].lstrip()
        self.assertTrue(head.startswith("<script>"))
        self.assertLess(html.index("<script>"), html.index("<style>"))
        self.assertLess(html.index("<script>"), html.index("<body>"))

    def test_frontmatter_accepts_snake_case(self) -> None:
        fm = Frontmatter(title="X", hide_subscribe=True)
        self.assertTrue(fm.hide_subscribe)
        self.assertFalse(fm.hide_ad)


class TestRenderPage(unittest.TestCase):
    def test_theme_resolved_before_body_renders(self) -> None:
        events: list[str] = []
        resolver = ThemeResolver(MemoryStorage(), StaticSystemSignal(is_dark=True))
        hooks = PrerenderHooks()
        hooks.register(lambda ctx: events.append(f"hook:{ctx['theme']}:{resolver.store.resolved}"))

        original_layout = page_module.layout

        def _layout(*args, **kwargs):
            events.append(f"layout:{resolver.store.resolved}")
            return original_layout(*args, **kwargs)

        with patch.object(page_module, "layout", side_effect=_layout):
            html = render_page(_data(), resolver, hooks)

        self.assertEqual(events, ["hook:dark:True", "layout:True"])
        self.assertIn('data-theme="dark"', html)

    def test_persisted_preference_wins(self) -> None:
        resolver = ThemeResolver(
            MemoryStorage({"preferred-theme": "light"}), StaticSystemSignal(is_dark=True)
        )
        html = render_page(_data(), resolver)
        self.assertIn('data-theme="light"', html)

    def test_hooks_run_in_registration_order(self) -> None:
        calls: list[int] = []
        hooks = PrerenderHooks([lambda ctx: calls.append(1)])
        hooks.register(lambda ctx: calls.append(2))
        context = hooks.run({})
        self.assertEqual(calls, [1, 2])
        self.assertEqual(context, {})
        self.assertEqual(len(hooks), 2)


class TestBootstrapScript(unittest.TestCase):
    def test_contains_priority_rule(self) -> None:
        js = bootstrap_js("preferred-theme")
        self.assertIn('var key = "preferred-theme";', js)
        self.assertIn("localStorage.getItem(key)", js)
        self.assertIn("(prefers-color-scheme: dark)", js)
        self.assertIn("apply(stored() || system());", js)
        self.assertIn("window.__setPreferredTheme", js)
        self.assertIn("window.__clearPreferredTheme", js)

    def test_system_change_ignored_while_preference_stored(self) -> None:
        js = bootstrap_js()
        follow = js[js.index("var follow = function (e) {") :]
        follow = follow[: follow.index("};")]
        guard = follow.index("if (chosen || stored()) return;")
        self.assertLess(guard, follow.index("apply("))
        self.assertIn('media.addEventListener("change", follow)', js)

    def test_set_records_session_choice_before_storing(self) -> None:
        js = bootstrap_js()
        setter = js[js.index("window.__setPreferredTheme") : js.index("window.__clearPreferredTheme")]
        self.assertLess(setter.index("if (!valid(theme)) return;"), setter.index("chosen = theme;"))
        self.assertLess(setter.index("chosen = theme;"), setter.index("localStorage.setItem"))

    def test_is_blocking_inline_script(self) -> None:
        html = bootstrap_script()
        self.assertTrue(html.startswith("<script>"))
        self.assertNotIn("async", html.split(">", 1)[0])
        self.assertNotIn("defer", html.split(">", 1)[0])

    def test_key_cannot_break_out_of_script(self) -> None:
        js = bootstrap_js('</script><script>alert(1)//')
        self.assertNotIn("</script>", js)

    def test_fallback_theme(self) -> None:
        self.assertIn('if (!media) return "dark";', bootstrap_js(fallback=Theme.DARK))


if __name__ == "__main__":
    unittest.main()
