"""Inline CSS used by the page template."""

CSS = r"""
:root, html[data-theme="light"] {
  --bg: #fdfdfd;
  --fg: #1f1f1f;
  --muted: #6a6a6a;
  --border: #e3e3e3;
  --link: #0b5ed7;
  --code-bg: #f1f1f1;
  --serif: "Iowan Old Style", "Charter", Georgia, serif;
  --mono: ui-monospace, "SF Mono", "Consolas", "Liberation Mono", monospace;
  --page-max: 1080px;
  color-scheme: light;
}

html[data-theme="dark"] {
  --bg: #16181b;
  --fg: #e6e6e6;
  --muted: #9a9a9a;
  --border: #2e3136;
  --link: #7ab7ff;
  --code-bg: #23262b;
  color-scheme: dark;
}

html, body { height: 100%; }

body {
  font-family: var(--serif);
  font-size: 17px;
  line-height: 1.65;
  max-width: var(--page-max);
  margin: 0 auto;
  padding: 2.25rem 1.5rem 3rem;
  background: var(--bg);
  color: var(--fg);
  text-rendering: optimizeLegibility;
  -webkit-font-smoothing: antialiased;
}

a { color: var(--link); text-decoration: none; }
a:hover { text-decoration: underline; text-underline-offset: 0.15em; }

.layout { display: flex; gap: 2.5rem; align-items: flex-start; }

.sidebar {
  flex: 0 0 220px;
  border-right: 1px solid var(--border);
  padding-right: 1.5rem;
  font-size: 14px;
}
.sidebar .site-title { font-size: 20px; font-weight: 700; margin: 0 0 0.25rem 0; }
.sidebar .muted { color: var(--muted); }

.subscribe input { width: 100%; margin: 0.35rem 0; padding: 0.3rem; background: var(--bg); color: var(--fg); border: 1px solid var(--border); }
.ad-slot { margin-top: 1.5rem; min-height: 120px; border: 1px dashed var(--border); }

.page { flex: 1 1 auto; min-width: 0; }
.page h1.page-title { font-size: 32px; margin: 0 0 1.25rem 0; }

.theme-toggle {
  margin-top: 1rem;
  font: inherit;
  font-size: 13px;
  color: var(--muted);
  background: none;
  border: 1px solid var(--border);
  padding: 0.2rem 0.5rem;
  cursor: pointer;
}

.mobile-only { display: none; }

pre {
  white-space: pre-wrap;
  word-break: break-word;
  padding: 0.5rem 0.75rem;
  border: 1px solid var(--border);
  background: var(--code-bg);
}

code { font-family: var(--mono); font-size: 0.9em; }
p code, li code { background: var(--code-bg); padding: 0.1rem 0.25rem; }

blockquote {
  margin: 0.75rem 0;
  padding: 0 0.75rem;
  border-left: 2px solid var(--border);
  color: var(--muted);
}

table { border-collapse: collapse; width: 100%; margin: 0.75rem 0; }
th, td { border: 1px solid var(--border); padding: 0.35rem 0.5rem; vertical-align: top; }

@media print {
  body { background: #fff; color: #000; max-width: none; padding: 1rem; }
  .sidebar, .mobile-only, .theme-toggle { display: none; }
}

@media (max-width: 700px) {
  body { padding: 1.5rem 1rem 2rem; }
  .layout { display: block; }
  .sidebar { border-right: none; padding-right: 0; margin-bottom: 1.5rem; }
  .sidebar .movable { display: none; }
  .mobile-only { display: block; border-top: 1px solid var(--border); margin-top: 2rem; padding-top: 1rem; }
}
"""
