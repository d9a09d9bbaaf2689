"""Site manifest model and generation."""

import hashlib
import json
from pathlib import Path

from pydantic import BaseModel

from ..config import GENERATOR_VERSION, SCHEMA_VERSION
from ..theme import Theme
from .page import MarkdownRecord
from .tokenize import count_tokens, count_words


class PageInfo(BaseModel):
    """One rendered page."""

    slug: str
    title: str
    path: str
    words: int
    tokens_approx: int
    sha256: str


class SiteManifest(BaseModel):
    """Build manifest for a generated site."""

    schema_version: int = SCHEMA_VERSION
    generator_version: str = GENERATOR_VERSION
    site_title: str
    theme: Theme
    pages: list[PageInfo]


def compute_sha256(content: bytes | str) -> str:
    """Compute SHA256 hash of content.

    Args:
        content: Bytes or string to hash

    Returns:
        Hex-encoded SHA256 hash
    """
    if isinstance(content, str):
        content = content.encode("utf-8")
    return hashlib.sha256(content).hexdigest()


def page_info(record: MarkdownRecord, path: str, html: str) -> PageInfo:
    return PageInfo(
        slug=record.slug,
        title=record.frontmatter.title,
        path=path,
        words=count_words(record.source),
        tokens_approx=count_tokens(record.source),
        sha256=compute_sha256(html),
    )


def write_manifest(manifest: SiteManifest, output_dir: Path) -> Path:
    """Write manifest to JSON file.

    Args:
        manifest: Manifest object
        output_dir: Directory to write to

    Returns:
        Path to written manifest file
    """
    manifest_path = output_dir / "manifest.json"
    payload = manifest.model_dump(mode="json")
    manifest_path.write_text(
        json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    return manifest_path
