"""End-to-end tests for a single layout pass over an article document."""

from __future__ import annotations

from typing import Any

import pytest

from colonnade.core.contracts.document import ArticleDocument
from colonnade.core.contracts.layout import (
    ColumnsSection,
    FullRow,
    LayoutRecord,
    LayoutStrategy,
    SplitRow,
)
from colonnade.pipelines.article_layout import run_layout_pass


def _document(**settings: Any) -> ArticleDocument:
    return ArticleDocument.model_validate(
        {
            "blocks": [
                {"id": "title", "type": "title", "content": {"title": "Harbour [^port]"}},
                {
                    "id": "text1",
                    "type": "text",
                    "content": {
                        "text": "Intro with **bold** [^port].\n- first [^ghost]\n- second",
                        "layout": "left_third",
                    },
                },
                {"id": "image", "type": "image", "content": {"position": "right"}},
                {"id": "quote", "type": "quote", "content": {"quote": "Tide [^tide]"}},
            ],
            "references": [
                {"id": "port", "title": "Port Records"},
                {"id": "tide", "title": "Tide Tables"},
                {"id": "unused", "title": "Never Cited"},
            ],
            "settings": settings,
        }
    )


def test_strict_grid_pass() -> None:
    result = run_layout_pass(_document(), strategy=LayoutStrategy.STRICT_GRID)

    assert result.strategy is LayoutStrategy.STRICT_GRID
    assert result.rows == [
        FullRow(block_id="title"),
        SplitRow(left_id="text1", right_id="image"),
        FullRow(block_id="quote"),
    ]
    assert result.sections is None and result.flow is None

    assert result.cited_ids == ["port", "tide"]
    assert result.reference_numbers == {"port": 1, "tide": 2}
    assert [(e.number, e.reference.id) for e in result.footer] == [(1, "port"), (2, "tide")]
    assert result.unresolved == ["ghost"]
    assert result.record == LayoutRecord(order=["title", "text1", "image", "quote"])
    assert result.reading_minutes == 1


def test_text_body_is_split_and_annotated() -> None:
    result = run_layout_pass(_document(), strategy="strict-grid")
    annotations = result.annotations["text1"]

    assert "text" not in annotations.fields
    assert [run.kind for run in annotations.body] == ["paragraph", "list"]
    first_item = annotations.body[1].entries[0]
    ghost = [a for a in first_item if a.span.kind == "citation"]
    assert ghost[0].unresolved is True and ghost[0].number is None

    title = result.annotations["title"].fields["title"]
    assert [a.number for a in title if a.span.kind == "citation"] == [1]


def test_stored_order_and_legacy_overrides_are_applied() -> None:
    record = {"order": ["quote", "image", "gone"], "placementById": {"quote": "left"}}
    result = run_layout_pass(_document(), strategy=LayoutStrategy.INDEPENDENT_STACK, record=record)

    assert [b.id for b in result.blocks] == ["quote", "image", "title", "text1"]
    # Quotes are always full width; the override cannot move them.
    assert result.sections is not None
    assert [s.kind for s in result.sections] == ["full", "columns", "full", "columns"]
    second = result.sections[1]
    assert isinstance(second, ColumnsSection) and [b.id for b in second.right] == ["image"]
    # Citation numbers follow the new visual order.
    assert result.cited_ids == ["tide", "port"]
    assert result.record.placement_by_id == {}


def test_record_model_is_accepted() -> None:
    record = LayoutRecord(order=["image", "text1"])
    result = run_layout_pass(_document(), strategy="flow", record=record)
    assert result.record.order == ["image", "text1", "title", "quote"]
    assert result.flow is not None


def test_corrupt_record_falls_back_to_natural_order() -> None:
    result = run_layout_pass(_document(), strategy="strict-grid", record="{oops")
    assert result.record.order == ["title", "text1", "image", "quote"]


def test_manual_reading_time_wins() -> None:
    result = run_layout_pass(
        _document(readingTimeMode="manual", readingTimeMinutes=12), strategy="strict-grid"
    )
    assert result.reading_minutes == 12


def test_default_strategy_comes_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    from colonnade.core.settings import load_settings

    monkeypatch.setenv("COLONNADE_STRATEGY", "independent-stack")
    load_settings.cache_clear()
    try:
        result = run_layout_pass(_document())
    finally:
        monkeypatch.delenv("COLONNADE_STRATEGY")
        load_settings.cache_clear()
    assert result.strategy is LayoutStrategy.INDEPENDENT_STACK


def test_unknown_strategy_raises() -> None:
    with pytest.raises(ValueError):
        run_layout_pass(_document(), strategy="masonry")


def test_result_serializes_to_json() -> None:
    payload = run_layout_pass(_document(), strategy="strict-grid").model_dump(mode="json")
    assert payload["rows"][1] == {"kind": "split", "left_id": "text1", "right_id": "image"}
