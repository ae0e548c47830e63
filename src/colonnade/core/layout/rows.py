"""
Row Builder: strict two-column grid.

Folds an ordered list of block ids into rows. A full-width block gets a row
of its own; side blocks pair up into split rows.

Algorithm
---------
A pending split ``{left_id, right_id}`` accumulates side blocks:

- ``FULL``  : flush the pending split, then emit ``FullRow(id)``.
- ``LEFT``  : if either slot is taken, flush and start a new split with
  this id on the left; otherwise fill the left slot. A left cell renders
  first, so it may not join a right block that came before it.
- ``RIGHT`` : if the right slot is taken, flush and start a new split with
  this id on the right; otherwise fill the right slot.

The pending split is flushed at the end. A flush emits a ``SplitRow`` only
if at least one slot is filled.

A filled slot always triggers a flush instead of an overwrite, so a block
never lands in a row next to a later block on the opposite side that would
render ahead of it. Every id appears exactly once, in input order.

Example
-------
>>> from colonnade.core.contracts.layout import Placement
>>> sides = {"t1": Placement.LEFT, "img": Placement.RIGHT, "t2": Placement.RIGHT}
>>> [r.model_dump(exclude_none=True) for r in build_rows(["t1", "img", "t2"], sides.__getitem__)]
[{'kind': 'split', 'left_id': 't1', 'right_id': 'img'}, {'kind': 'split', 'right_id': 't2'}]
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from colonnade.core.contracts.layout import FullRow, Placement, Row, SplitRow


class _PendingSplit:
    """Mutable accumulator for the split row being filled."""

    __slots__ = ("left_id", "right_id")

    def __init__(self) -> None:
        self.left_id: str | None = None
        self.right_id: str | None = None

    def is_empty(self) -> bool:
        return self.left_id is None and self.right_id is None


def build_rows(ordered_ids: Iterable[str], resolve: Callable[[str], Placement]) -> list[Row]:
    """Fold ``ordered_ids`` into strict-grid rows.

    Parameters
    ----------
    ordered_ids : Iterable[str]
        Block ids in document order.
    resolve : Callable[[str], Placement]
        Placement lookup by id (see :func:`~colonnade.core.layout.placement.resolver_for`).

    Returns
    -------
    list[Row]
        ``FullRow`` / ``SplitRow`` items covering every id once.
    """
    rows: list[Row] = []
    pending = _PendingSplit()

    def flush() -> None:
        nonlocal pending
        if not pending.is_empty():
            rows.append(SplitRow(left_id=pending.left_id, right_id=pending.right_id))
        pending = _PendingSplit()

    for block_id in ordered_ids:
        placement = resolve(block_id)
        if placement is Placement.FULL:
            flush()
            rows.append(FullRow(block_id=block_id))
        elif placement is Placement.LEFT:
            # A left cell renders first, so it cannot join an earlier right cell.
            if not pending.is_empty():
                flush()
            pending.left_id = block_id
        else:
            if pending.right_id is not None:
                flush()
            pending.right_id = block_id

    flush()
    return rows


def flatten_rows(rows: Iterable[Row]) -> list[str]:
    """Return block ids in row-then-slot (left, right) reading order."""
    ids: list[str] = []
    for row in rows:
        if isinstance(row, FullRow):
            ids.append(row.block_id)
        else:
            ids.extend(row.ids())
    return ids


__all__ = ["build_rows", "flatten_rows"]
