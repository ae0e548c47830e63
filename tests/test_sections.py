"""Tests for the independent-stack section builder, flow runs and strategy dispatch."""

from __future__ import annotations

import pytest

from colonnade.core.contracts.block import Block, ImageBlock, QuoteBlock, TextBlock
from colonnade.core.contracts.layout import (
    ColumnsSection,
    FlowRun,
    FullRow,
    FullSection,
    LayoutStrategy,
    SplitRow,
    StandaloneBlock,
)
from colonnade.core.layout.flow import build_flow_runs
from colonnade.core.layout.sections import build_sections
from colonnade.core.layout.strategy import build_layout


def _text(block_id: str, hint: str | None = None) -> TextBlock:
    return TextBlock(id=block_id, text=block_id, layout_hint=hint)


def _image(block_id: str, position: str = "center") -> ImageBlock:
    return ImageBlock(id=block_id, url=f"https://img.test/{block_id}.jpg", position=position)


def _ids(blocks: list[Block]) -> list[str]:
    return [b.id for b in blocks]


# ---- Independent stack -------------------------------------------------------


def test_columns_stack_independently_until_full_block() -> None:
    blocks: list[Block] = [
        _text("a", "left_third"),
        _image("b", "right"),
        _text("c", "left_third"),
        QuoteBlock(id="d", quote="q"),
        _text("e", "right_third"),
    ]
    sections = build_sections(blocks)

    assert len(sections) == 3
    first, middle, last = sections
    assert isinstance(first, ColumnsSection)
    assert _ids(first.left) == ["a", "c"]
    assert _ids(first.right) == ["b"]
    assert isinstance(middle, FullSection) and middle.block.id == "d"
    assert isinstance(last, ColumnsSection)
    assert last.left == [] and _ids(last.right) == ["e"]


def test_no_slot_flush_in_stack_mode() -> None:
    """Two same-side blocks share one section, unlike the strict grid."""
    sections = build_sections([_text("a", "left"), _text("b", "left")])
    assert len(sections) == 1
    only = sections[0]
    assert isinstance(only, ColumnsSection) and _ids(only.left) == ["a", "b"]


def test_only_full_blocks() -> None:
    sections = build_sections([_text("a"), _image("b")])
    assert [s.kind for s in sections] == ["full", "full"]


def test_sections_empty_input() -> None:
    assert build_sections([]) == []


# ---- Flow runs ---------------------------------------------------------------


def test_flow_runs_group_text_around_side_images() -> None:
    blocks: list[Block] = [
        _text("t1"),
        _image("i1", "left"),
        _text("t2"),
        _image("i2", "right"),
        QuoteBlock(id="q", quote="q"),
        _text("t3"),
    ]
    items = build_flow_runs(blocks)

    assert [i.kind for i in items] == ["flow", "flow", "block", "block"]
    first, second, quote, tail = items
    assert isinstance(first, FlowRun) and first.direction == "left"
    assert _ids(first.blocks) == ["t1", "i1", "t2"]
    assert isinstance(second, FlowRun) and second.direction == "right"
    assert _ids(second.blocks) == ["i2"]
    assert isinstance(quote, StandaloneBlock) and quote.block.id == "q"
    assert isinstance(tail, StandaloneBlock) and tail.block.id == "t3"


def test_centered_image_breaks_the_run() -> None:
    items = build_flow_runs([_text("t1"), _image("c"), _text("t2")])
    assert all(isinstance(i, StandaloneBlock) for i in items)
    assert [i.block.id for i in items if isinstance(i, StandaloneBlock)] == ["t1", "c", "t2"]


# ---- Strategy dispatch -------------------------------------------------------


def test_build_layout_dispatches_by_strategy() -> None:
    blocks: list[Block] = [_text("a", "left_third"), _image("b", "right"), _text("c")]

    rows = build_layout(blocks, LayoutStrategy.STRICT_GRID)
    assert rows == [SplitRow(left_id="a", right_id="b"), FullRow(block_id="c")]

    sections = build_layout(blocks, "independent-stack")
    assert [s.kind for s in sections] == ["columns", "full"]

    flow = build_layout(blocks, LayoutStrategy.FLOW)
    assert [i.kind for i in flow] == ["flow"]


def test_build_layout_rejects_unknown_strategy() -> None:
    with pytest.raises(ValueError):
        build_layout([], "masonry")
