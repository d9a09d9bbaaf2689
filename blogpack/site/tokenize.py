"""Token counting using tiktoken."""

from __future__ import annotations

from typing import Any

import tiktoken

from ..config import TIKTOKEN_ENCODING

# Lazy-loaded encoder
_encoder: Any | None = None


def get_encoder() -> Any:
    """Get or create the tiktoken encoder."""
    global _encoder
    if _encoder is None:
        _encoder = tiktoken.get_encoding(TIKTOKEN_ENCODING)
    return _encoder


def count_tokens(text: str) -> int:
    """Count cl100k_base tokens in text."""
    if not text:
        return 0
    return len(get_encoder().encode(text))


def count_words(text: str) -> int:
    return len(text.split())
