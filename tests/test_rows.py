"""Tests for the strict-grid row builder.

Besides the worked scenario, two properties are checked over every placement
assignment of a short id list: coverage (flattening the rows gives back the
input) and reading order (a left cell never holds a later block than its
right neighbour).
"""

from __future__ import annotations

import itertools

from colonnade.core.contracts.layout import FullRow, Placement, SplitRow
from colonnade.core.layout.rows import build_rows, flatten_rows

L, R, F = Placement.LEFT, Placement.RIGHT, Placement.FULL


def test_left_image_right_text_scenario() -> None:
    """A second right-side block opens a new row because the right slot is taken."""
    sides = {"text1": L, "image": R, "text2": R}
    rows = build_rows(["text1", "image", "text2"], sides.__getitem__)
    assert rows == [
        SplitRow(left_id="text1", right_id="image"),
        SplitRow(right_id="text2"),
    ]


def test_full_block_flushes_pending_split() -> None:
    sides = {"a": L, "b": F, "c": R}
    rows = build_rows(["a", "b", "c"], sides.__getitem__)
    assert rows == [SplitRow(left_id="a"), FullRow(block_id="b"), SplitRow(right_id="c")]


def test_consecutive_full_blocks_emit_no_empty_splits() -> None:
    rows = build_rows(["a", "b"], lambda _: F)
    assert rows == [FullRow(block_id="a"), FullRow(block_id="b")]


def test_same_side_blocks_stack_in_separate_rows() -> None:
    rows = build_rows(["a", "b", "c"], lambda _: L)
    assert rows == [SplitRow(left_id="a"), SplitRow(left_id="b"), SplitRow(left_id="c")]


def test_left_after_right_does_not_share_the_row() -> None:
    """A left cell renders first, so it cannot sit beside an earlier right block."""
    sides = {"a": R, "b": L}
    rows = build_rows(["a", "b"], sides.__getitem__)
    assert rows == [SplitRow(right_id="a"), SplitRow(left_id="b")]


def test_empty_input() -> None:
    assert build_rows([], lambda _: F) == []


def test_coverage_and_reading_order_over_all_assignments() -> None:
    ids = ["a", "b", "c", "d", "e"]
    for combo in itertools.product([L, R, F], repeat=len(ids)):
        sides = dict(zip(ids, combo, strict=True))
        rows = build_rows(ids, sides.__getitem__)

        assert flatten_rows(rows) == ids
        for row in rows:
            if isinstance(row, SplitRow):
                assert row.left_id is not None or row.right_id is not None
                if row.left_id is not None and row.right_id is not None:
                    assert ids.index(row.left_id) < ids.index(row.right_id)
                if row.left_id is not None:
                    assert sides[row.left_id] is L
                if row.right_id is not None:
                    assert sides[row.right_id] is R


def test_resolver_is_called_once_per_id() -> None:
    calls: list[str] = []

    def resolve(block_id: str) -> Placement:
        calls.append(block_id)
        return L

    build_rows(["x", "y"], resolve)
    assert calls == ["x", "y"]
