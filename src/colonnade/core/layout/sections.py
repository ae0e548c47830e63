"""
Section Builder: independent column stacking.

Unlike the strict grid in :mod:`.rows`, side blocks here do not pair up row
by row. Each column accumulates its own run until a full-width block (or the
end of input) flushes both columns as one :class:`ColumnsSection`. A tall
left item and a short right item can therefore sit side by side without
padding.

Document order is preserved within each column, not across columns.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from colonnade.core.contracts.block import Block
from colonnade.core.contracts.layout import ColumnsSection, FullSection, Placement, Section

from .placement import resolve_placement


def build_sections(
    ordered_blocks: Iterable[Block],
    resolve: Callable[[Block], Placement] = resolve_placement,
) -> list[Section]:
    """Fold ``ordered_blocks`` into full-width and two-column sections."""
    sections: list[Section] = []
    left: list[Block] = []
    right: list[Block] = []

    def flush() -> None:
        nonlocal left, right
        if left or right:
            sections.append(ColumnsSection(left=left, right=right))
        left, right = [], []

    for block in ordered_blocks:
        placement = resolve(block)
        if placement is Placement.FULL:
            flush()
            sections.append(FullSection(block=block))
        elif placement is Placement.LEFT:
            left.append(block)
        else:
            right.append(block)

    flush()
    return sections


__all__ = ["build_sections"]
