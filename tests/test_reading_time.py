"""Tests for the reading-time estimate."""

from __future__ import annotations

from colonnade.core.contracts.block import DividerBlock, QuoteBlock, TextBlock, TitleBlock
from colonnade.core.text.reading_time import article_text, count_words, estimate_minutes


def test_count_words_ignores_markup() -> None:
    assert count_words("**bold** and *italic*") == 3
    assert count_words("- item one\n- item two") == 4
    assert count_words("") == 0
    assert count_words("   \n\t ") == 0


def test_minimum_is_one_minute() -> None:
    assert estimate_minutes("") == 1
    assert estimate_minutes("just a few words") == 1


def test_halves_round_up() -> None:
    assert estimate_minutes(" ".join(["word"] * 500)) == 3
    assert estimate_minutes(" ".join(["word"] * 499)) == 2


def test_custom_words_per_minute() -> None:
    assert estimate_minutes(" ".join(["word"] * 300), wpm=100) == 3


def test_article_text_collects_all_fields() -> None:
    blocks = [
        TitleBlock(id="t", title="Headline", subtitle="Sub"),
        TextBlock(id="x", heading="Head", text="Body text"),
        DividerBlock(id="d"),
        QuoteBlock(id="q", quote="Quoted", author="Ann"),
    ]
    assert article_text(blocks) == "Headline\nSub\nHead\nBody text\nQuoted\nAnn"
