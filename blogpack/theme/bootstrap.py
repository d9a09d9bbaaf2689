"""Inline script that applies the theme before the browser paints the page.

The script mirrors ThemeResolver in the browser: explicit choice from
localStorage, then ``prefers-color-scheme``, then the fallback. It has to be
the first thing in <head> and must stay synchronous (no ``async``/``defer``).
"""

from __future__ import annotations

import json

from ..config import THEME_STORAGE_KEY
from .models import Theme

_SCRIPT = """(function () {
  var key = %(key)s;
  var root = document.documentElement;
  var media = window.matchMedia ? window.matchMedia("(prefers-color-scheme: dark)") : null;
  var chosen = null;
  function valid(v) { return v === "light" || v === "dark"; }
  function stored() {
    try {
      var v = window.localStorage.getItem(key);
      return valid(v) ? v : null;
    } catch (e) {
      return null;
    }
  }
  function system() {
    if (!media) return %(fallback)s;
    return media.matches ? "dark" : "light";
  }
  function apply(theme) {
    root.setAttribute("data-theme", theme);
    window.__theme = theme;
    if (typeof window.__onThemeChange === "function") window.__onThemeChange(theme);
  }
  apply(stored() || system());
  window.__setPreferredTheme = function (theme) {
    if (!valid(theme)) return;
    chosen = theme;
    apply(theme);
    try { window.localStorage.setItem(key, theme); } catch (e) {}
  };
  window.__clearPreferredTheme = function () {
    chosen = null;
    try { window.localStorage.removeItem(key); } catch (e) {}
    apply(system());
  };
  if (media) {
    var follow = function (e) {
      if (chosen || stored()) return;
      apply(e.matches ? "dark" : "light");
    };
    if (media.addEventListener) media.addEventListener("change", follow);
    else if (media.addListener) media.addListener(follow);
  }
})();"""


def _js_string(value: str) -> str:
    # JSON string literal, safe inside an inline <script> element.
    return json.dumps(value).replace("</", "<\\/")


def bootstrap_js(storage_key: str = THEME_STORAGE_KEY, fallback: Theme = Theme.LIGHT) -> str:
    return _SCRIPT % {"key": _js_string(storage_key), "fallback": _js_string(Theme(fallback).value)}


def bootstrap_script(storage_key: str = THEME_STORAGE_KEY, fallback: Theme = Theme.LIGHT) -> str:
    """Return the blocking <script> element for the top of <head>."""
    return f"<script>{bootstrap_js(storage_key, fallback)}</script>"
