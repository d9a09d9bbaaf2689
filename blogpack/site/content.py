"""Load markdown pages with YAML front matter into content records."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

import markdown
import yaml
from pydantic import ValidationError

from ..config import MARKDOWN_EXTENSIONS
from .page import Frontmatter, MarkdownRecord

logger = logging.getLogger(__name__)

_FRONT_MATTER = re.compile(r"\A---[ \t]*\n(.*?)\n---[ \t]*(?:\n|\Z)", re.DOTALL)


class ContentError(Exception):
    """Raised when a content file cannot be turned into a page."""


def split_front_matter(text: str) -> tuple[dict, str]:
    """Split a document into (front matter mapping, markdown body).

    Documents without a leading ``---`` block have empty front matter.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    match = _FRONT_MATTER.match(text)
    if not match:
        return {}, text
    try:
        meta = yaml.safe_load(match.group(1)) or {}
    except yaml.YAMLError as e:
        raise ContentError(f"Invalid front matter: {e}") from e
    if not isinstance(meta, dict):
        raise ContentError("Front matter must be a mapping")
    return meta, text[match.end() :]


def render_markdown(body: str) -> str:
    return markdown.markdown(body, extensions=MARKDOWN_EXTENSIONS)


def load_record(path: Path) -> MarkdownRecord:
    """Read one markdown file into a MarkdownRecord.

    The slug comes from the ``slug`` front-matter key, else the file stem.

    Raises:
        ContentError: If the file is unreadable or its front matter is invalid
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ContentError(f"Cannot read {path}: {e}") from e

    try:
        meta, body = split_front_matter(text)
        frontmatter = Frontmatter.model_validate(meta)
    except ContentError as e:
        raise ContentError(f"{path}: {e}") from e
    except ValidationError as e:
        raise ContentError(f"{path}: invalid front matter ({e.error_count()} errors)") from e

    slug = (frontmatter.slug or path.stem).strip("/")
    if not slug:
        raise ContentError(f"{path}: empty slug")

    return MarkdownRecord(
        id=path.stem,
        slug=slug,
        html=render_markdown(body),
        frontmatter=frontmatter,
        source=body,
    )


def load_records(content_dir: Path) -> list[MarkdownRecord]:
    """Load every ``*.md`` file under content_dir, sorted by slug."""
    records: dict[str, MarkdownRecord] = {}
    if not content_dir.exists():
        logger.warning("Content directory %s does not exist", content_dir)
        return []

    for path in sorted(content_dir.rglob("*.md")):
        record = load_record(path)
        if record.slug in records:
            raise ContentError(f"Duplicate slug {record.slug!r} ({path})")
        records[record.slug] = record
        logger.debug("Loaded %s as /%s/", path, record.slug)

    return [records[slug] for slug in sorted(records)]


def find_record(records: Iterable[MarkdownRecord], slug: str) -> MarkdownRecord | None:
    """Page-by-slug lookup."""
    wanted = slug.strip("/")
    for record in records:
        if record.slug == wanted:
            return record
    return None
