"""Tests for the paragraph/list splitter."""

from __future__ import annotations

from colonnade.core.text.splitter import (
    ListRun,
    ParagraphRun,
    is_list_line,
    split_paragraphs_and_lists,
)


def test_alternating_runs_keep_line_order() -> None:
    runs = split_paragraphs_and_lists("Intro\n- one\n- two\nOutro")
    assert runs == [
        ParagraphRun(lines=["Intro"]),
        ListRun(items=["one", "two"]),
        ParagraphRun(lines=["Outro"]),
    ]


def test_all_markers_are_recognized_and_stripped() -> None:
    runs = split_paragraphs_and_lists("- dash\n* star\n• bullet\n   - indented")
    assert runs == [ListRun(items=["dash", "star", "bullet", "indented"])]


def test_marker_needs_following_whitespace() -> None:
    assert not is_list_line("-nospace")
    assert not is_list_line("**bold** start")
    assert is_list_line("- yes")
    assert split_paragraphs_and_lists("-nospace") == [ParagraphRun(lines=["-nospace"])]


def test_blank_line_stays_in_open_list() -> None:
    """A blank line does not end a list; it rides along as an empty item."""
    runs = split_paragraphs_and_lists("- a\n\n- b")
    assert runs == [ListRun(items=["a", "", "b"])]


def test_blank_line_stays_in_open_paragraph() -> None:
    runs = split_paragraphs_and_lists("first\n\nsecond")
    assert runs == [ParagraphRun(lines=["first", "", "second"])]


def test_leading_blank_line_opens_a_paragraph() -> None:
    runs = split_paragraphs_and_lists("\n- a")
    assert runs == [ParagraphRun(lines=[""]), ListRun(items=["a"])]


def test_windows_line_endings() -> None:
    runs = split_paragraphs_and_lists("p\r\n- i\r\n")
    assert runs == [ParagraphRun(lines=["p"]), ListRun(items=["i", ""])]


def test_empty_text() -> None:
    assert split_paragraphs_and_lists("") == []


def test_run_kinds() -> None:
    runs = split_paragraphs_and_lists("p\n- i")
    assert [r.kind for r in runs] == ["paragraph", "list"]
