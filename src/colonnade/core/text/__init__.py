"""Text-level helpers: inline tokenizer, paragraph/list splitter, reading time."""

from __future__ import annotations

from .splitter import ListRun, ParagraphRun, split_paragraphs_and_lists
from .tokenizer import CITATION_PATTERN, Span, citation_ids, tokenize

__all__ = [
    "CITATION_PATTERN",
    "ListRun",
    "ParagraphRun",
    "Span",
    "citation_ids",
    "split_paragraphs_and_lists",
    "tokenize",
]
