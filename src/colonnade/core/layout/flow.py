"""
Flow runs: text wrapped around side images, as the published article shows it.

Text blocks and side images (``position`` ``left`` / ``right``) accumulate
into a run. The first side image fixes the run's direction; a side image
facing the other way closes the run and opens a new one. Any other block
closes the run and stands alone.

A closed run with at least one image becomes a :class:`FlowRun`. A run of
text only has nothing to wrap around, so its blocks stand alone.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Literal

from colonnade.core.contracts.block import Block, ImageBlock, TextBlock
from colonnade.core.contracts.layout import FlowItem, FlowRun, StandaloneBlock

Direction = Literal["left", "right"]


def _side_of(block: Block) -> Direction | None:
    if isinstance(block, ImageBlock) and block.position in ("left", "right"):
        return "left" if block.position == "left" else "right"
    return None


def build_flow_runs(ordered_blocks: Iterable[Block]) -> list[FlowItem]:
    """Group ``ordered_blocks`` into flow runs and standalone blocks."""
    items: list[FlowItem] = []
    run: list[Block] = []
    direction: Direction | None = None

    def flush() -> None:
        nonlocal run, direction
        if direction is not None and any(isinstance(b, ImageBlock) for b in run):
            items.append(FlowRun(direction=direction, blocks=run))
        else:
            items.extend(StandaloneBlock(block=b) for b in run)
        run, direction = [], None

    for block in ordered_blocks:
        side = _side_of(block)
        if isinstance(block, TextBlock):
            run.append(block)
        elif side is not None:
            if direction is not None and direction != side:
                flush()
            direction = side
            run.append(block)
        else:
            flush()
            items.append(StandaloneBlock(block=block))

    flush()
    return items


__all__ = ["build_flow_runs"]
