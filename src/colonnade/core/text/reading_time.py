"""Reading-time estimate for an article.

Markup characters are blanked out before counting so that ``**bold**`` or a
list marker does not inflate or merge word counts.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from colonnade.core.contracts.block import Block, iter_text_fields

_MARKUP_CHARS = re.compile(r"[`*_#>!\[\]()~\-]")
_WHITESPACE = re.compile(r"\s+")

DEFAULT_WPM = 200


def count_words(text: str) -> int:
    """Count whitespace-separated words once markup characters are removed."""
    cleaned = _WHITESPACE.sub(" ", _MARKUP_CHARS.sub(" ", text)).strip()
    return len(cleaned.split(" ")) if cleaned else 0


def estimate_minutes(text: str, wpm: int = DEFAULT_WPM) -> int:
    """Return whole minutes to read ``text`` at ``wpm``, never less than 1.

    Halves round up (2.5 minutes reads as 3).
    """
    return max(1, int(count_words(text) / max(1, wpm) + 0.5))


def article_text(blocks: Iterable[Block]) -> str:
    """Join every text-bearing field of ``blocks`` into one string."""
    return "\n".join(text for block in blocks for _, text in iter_text_fields(block))


__all__ = ["DEFAULT_WPM", "article_text", "count_words", "estimate_minutes"]
