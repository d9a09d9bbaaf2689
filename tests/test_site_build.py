"""Tests for content loading and the static site build."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from blogpack.site.build import build_site
from blogpack.site.content import (
    ContentError,
    find_record,
    load_record,
    load_records,
    split_front_matter,
)
from blogpack.site.page import SiteMetadata
from blogpack.site.tokenize import count_tokens, count_words
from blogpack.theme import MemoryStorage, StaticSystemSignal, ThemeResolver

ABOUT = """---
title: About
description: Who writes this.
hideAd: true
date: 2019-03-06
---

Hello **there**.

## Contact
"""


class TestFrontMatter(unittest.TestCase):
    def test_split(self) -> None:
        meta, body = split_front_matter(ABOUT)
        self.assertEqual(meta["title"], "About")
        self.assertTrue(meta["hideAd"])
        self.assertTrue(body.lstrip().startswith("Hello"))

    def test_no_front_matter(self) -> None:
        meta, body = split_front_matter("Just text\n")
        self.assertEqual(meta, {})
        self.assertEqual(body, "Just text\n")

    def test_non_mapping_front_matter(self) -> None:
        with self.assertRaises(ContentError):
            split_front_matter("---\n- a\n- b\n---\nBody\n")


class TestLoadRecords(unittest.TestCase):
    def test_load_record_renders_markdown(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "about.md"
            path.write_text(ABOUT, encoding="utf-8")
            record = load_record(path)
            self.assertEqual(record.slug, "about")
            self.assertEqual(record.frontmatter.description, "Who writes this.")
            self.assertTrue(record.frontmatter.hide_ad)
            self.assertFalse(record.frontmatter.hide_subscribe)
            self.assertIn("<strong>there</strong>", record.html)
            self.assertIn("<h2", record.html)

    def test_missing_title_raises(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "bad.md"
            path.write_text("---\ndescription: x\n---\nBody\n", encoding="utf-8")
            with self.assertRaises(ContentError):
                load_record(path)

    def test_duplicate_slugs_raise(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            (root / "a.md").write_text("---\ntitle: A\nslug: same\n---\n", encoding="utf-8")
            (root / "b.md").write_text("---\ntitle: B\nslug: same\n---\n", encoding="utf-8")
            with self.assertRaises(ContentError):
                load_records(root)

    def test_find_record(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            (root / "b.md").write_text("---\ntitle: B\n---\n", encoding="utf-8")
            (root / "a.md").write_text("---\ntitle: A\nslug: first\n---\n", encoding="utf-8")
            records = load_records(root)
            self.assertEqual([r.slug for r in records], ["b", "first"])
            self.assertEqual(find_record(records, "/first/").frontmatter.title, "A")
            self.assertIsNone(find_record(records, "missing"))

    def test_missing_dir_is_empty(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            self.assertEqual(load_records(Path(td) / "nope"), [])


class TestSiteBuild(unittest.TestCase):
    def test_build_site_writes_pages_and_manifest(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            content = Path(td) / "content"
            out = Path(td) / "public"
            content.mkdir()
            (content / "about.md").write_text(ABOUT, encoding="utf-8")

            resolver = ThemeResolver(MemoryStorage(), StaticSystemSignal(is_dark=True))
            with patch("blogpack.site.manifest.count_tokens", return_value=7):
                report = build_site(content, out, SiteMetadata(title="Blog", subtitle="Sub"), resolver)

            self.assertEqual(report["pages"], 1)
            self.assertEqual(report["theme"], "dark")

            html = (out / "about" / "index.html").read_text(encoding="utf-8")
            self.assertIn("<title>About - Blog</title>", html)
            self.assertIn('data-theme="dark"', html)
            self.assertNotIn('class="ad-slot"', html)

            manifest = json.loads((out / "manifest.json").read_text(encoding="utf-8"))
            self.assertEqual(manifest["theme"], "dark")
            self.assertEqual(manifest["site_title"], "Blog")
            self.assertEqual(manifest["pages"][0]["path"], "about/index.html")
            self.assertEqual(manifest["pages"][0]["tokens_approx"], 7)
            self.assertEqual(len(manifest["pages"][0]["sha256"]), 64)

    def test_empty_site_still_resolves_theme(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            content = Path(td) / "content"
            out = Path(td) / "public"
            content.mkdir()
            resolver = ThemeResolver(
                MemoryStorage({"preferred-theme": "dark"}), StaticSystemSignal(is_dark=False)
            )
            report = build_site(content, out, SiteMetadata(title="Blog"), resolver)

            self.assertEqual(report["pages"], 0)
            self.assertEqual(report["theme"], "dark")
            manifest = json.loads((out / "manifest.json").read_text(encoding="utf-8"))
            self.assertEqual(manifest["theme"], "dark")
            self.assertEqual(manifest["pages"], [])

    def test_bad_content_raises(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            content = Path(td) / "content"
            content.mkdir()
            (content / "bad.md").write_text("---\n: [\n---\n", encoding="utf-8")
            with self.assertRaises(ContentError):
                build_site(content, Path(td) / "out", SiteMetadata(title="Blog"))


class TestTokenize(unittest.TestCase):
    def test_empty_text_needs_no_encoder(self) -> None:
        with patch("blogpack.site.tokenize.get_encoder") as get_encoder:
            self.assertEqual(count_tokens(""), 0)
        get_encoder.assert_not_called()

    def test_count_words(self) -> None:
        self.assertEqual(count_words("one two\nthree  "), 3)


if __name__ == "__main__":
    unittest.main()
