"""
Placement Resolver: derive a block's grid placement from its content.

Rules
-----
- Image blocks: ``position`` ``left`` / ``right`` give that side; anything
  else (``center``, unknown values) is full width.
- Text blocks: ``layout_hint`` ``left_third`` / ``left`` give the left side,
  ``right_third`` / ``right`` the right side; everything else
  (``two_thirds``, ``middle_third``, ``full``, missing) is full width.
- Every other block type is always full width.

Content is the only source of truth. :func:`resolve_placement` keeps no
memory, so calling it twice on the same block gives the same answer, and
changing a placement means writing content back through
:func:`placement_update` / :func:`apply_placement`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from colonnade.core.contracts.block import Block, ImageBlock, TextBlock
from colonnade.core.contracts.layout import Placement

LEFT_HINTS: frozenset[str] = frozenset({"left_third", "left"})
RIGHT_HINTS: frozenset[str] = frozenset({"right_third", "right"})

#: Content values written back for each placement.
IMAGE_POSITIONS: dict[Placement, str] = {
    Placement.LEFT: "left",
    Placement.RIGHT: "right",
    Placement.FULL: "center",
}
TEXT_LAYOUT_HINTS: dict[Placement, str] = {
    Placement.LEFT: "left_third",
    Placement.RIGHT: "right_third",
    Placement.FULL: "two_thirds",
}


def resolve_placement(block: Block) -> Placement:
    """Return the placement implied by ``block``'s content fields."""
    if isinstance(block, ImageBlock):
        if block.position == "left":
            return Placement.LEFT
        if block.position == "right":
            return Placement.RIGHT
        return Placement.FULL
    if isinstance(block, TextBlock):
        hint = block.layout_hint or ""
        if hint in LEFT_HINTS:
            return Placement.LEFT
        if hint in RIGHT_HINTS:
            return Placement.RIGHT
    return Placement.FULL


def placement_update(block: Block, placement: Placement) -> dict[str, Any]:
    """Return the content fields that make ``block`` resolve to ``placement``.

    Block types that are always full width get an empty update.
    """
    if isinstance(block, ImageBlock):
        return {"position": IMAGE_POSITIONS[placement]}
    if isinstance(block, TextBlock):
        return {"layout_hint": TEXT_LAYOUT_HINTS[placement]}
    return {}


def apply_placement(block: Block, placement: Placement) -> Block:
    """Return a copy of ``block`` whose content resolves to ``placement``."""
    update = placement_update(block, placement)
    if not update:
        return block
    return block.model_copy(update=update)


def resolver_for(blocks: Iterable[Block]) -> Callable[[str], Placement]:
    """Build an id-based resolver over ``blocks``; unknown ids resolve to FULL."""
    by_id = {block.id: block for block in blocks}

    def resolve(block_id: str) -> Placement:
        block = by_id.get(block_id)
        return resolve_placement(block) if block is not None else Placement.FULL

    return resolve


__all__ = [
    "apply_placement",
    "placement_update",
    "resolve_placement",
    "resolver_for",
]
