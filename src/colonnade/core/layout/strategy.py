"""
Layout strategy dispatch.

The strict grid, the independent stack and the flow grouping are three named
strategies behind one entry point, sharing the same placement resolver, so
their rules cannot drift apart across call sites.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from colonnade.core.contracts.block import Block
from colonnade.core.contracts.layout import FlowItem, LayoutStrategy, Placement, Row, Section

from .flow import build_flow_runs
from .placement import resolve_placement
from .rows import build_rows
from .sections import build_sections

LayoutItems = list[Row] | list[Section] | list[FlowItem]


def build_layout(
    blocks: Sequence[Block],
    strategy: LayoutStrategy | str = LayoutStrategy.STRICT_GRID,
    resolve: Callable[[Block], Placement] = resolve_placement,
) -> LayoutItems:
    """Run ``strategy`` over ``blocks`` (already in visual order).

    Raises
    ------
    ValueError
        If ``strategy`` is not a known :class:`LayoutStrategy` value.
    """
    strategy = LayoutStrategy(strategy)
    if strategy is LayoutStrategy.STRICT_GRID:
        by_id = {block.id: block for block in blocks}
        return build_rows([b.id for b in blocks], lambda block_id: resolve(by_id[block_id]))
    if strategy is LayoutStrategy.INDEPENDENT_STACK:
        return build_sections(blocks, resolve)
    return build_flow_runs(blocks)


__all__ = ["LayoutItems", "build_layout"]
