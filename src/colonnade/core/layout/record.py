"""
Persisted layout record: reconciliation, migration and reordering.

The external layout store keeps one record per article::

    {"order": ["b3", "b1", "b2"], "placementById": {"b1": "left"}}

This module never reads or writes the store itself. It turns whatever the
store returned into a record that matches the live block set, and produces
the record to write back.

Rules
-----
- A missing, corrupt or wrongly-shaped record is replaced by the default
  (natural block order, no overrides). The failure is logged, never raised.
- Ids in ``order`` that are no longer live are dropped; live ids missing
  from ``order`` are appended in block-sequence order.
- ``placementById`` is a legacy read path. It is migrated one way into block
  content by :func:`migrate_overrides`, and records written back by
  :func:`persistable` always carry an empty map.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from colonnade.core.contracts.block import Block, ImageBlock, TextBlock
from colonnade.core.contracts.layout import LayoutRecord
from colonnade.core.result import Result, err, ok
from colonnade.core.settings import get_logger

from .placement import apply_placement, resolve_placement

logger = get_logger(__name__)


def default_record(blocks: Sequence[Block]) -> LayoutRecord:
    """Return the natural-order record with no overrides."""
    return LayoutRecord(order=[b.id for b in blocks])


def parse_layout_record(raw: str | bytes | Mapping[str, Any] | None) -> Result[LayoutRecord, str]:
    """Validate a stored record given as JSON text or an already-decoded mapping."""
    if raw is None:
        return err("no stored layout record")
    if isinstance(raw, str | bytes):
        try:
            raw = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            return err(f"layout record is not valid JSON: {exc}")
    if not isinstance(raw, Mapping):
        return err(f"layout record must be an object, got {type(raw).__name__}")
    try:
        return ok(LayoutRecord.model_validate(raw))
    except ValidationError as exc:
        return err(f"layout record has the wrong shape: {exc.error_count()} error(s)")


def reconcile_order(record: LayoutRecord, blocks: Sequence[Block]) -> LayoutRecord:
    """Align ``record`` with the live ``blocks``."""
    live = [b.id for b in blocks]
    live_set = set(live)
    order: list[str] = []
    seen: set[str] = set()
    for block_id in record.order:
        if block_id in live_set and block_id not in seen:
            order.append(block_id)
            seen.add(block_id)
    order.extend(block_id for block_id in live if block_id not in seen)

    overrides = {k: v for k, v in record.placement_by_id.items() if k in live_set}
    return LayoutRecord(order=order, placement_by_id=overrides)


def load_layout(
    raw: str | bytes | Mapping[str, Any] | None, blocks: Sequence[Block]
) -> LayoutRecord:
    """Parse and reconcile a stored record, falling back to the default."""
    reconciled = parse_layout_record(raw).map(lambda record: reconcile_order(record, blocks))
    if reconciled.is_err():
        if raw is not None:
            logger.warning("Discarding stored layout record: %s", reconciled.unwrap_err())
        return default_record(blocks)
    return reconciled.unwrap()


def _has_explicit_placement(block: Block) -> bool:
    if isinstance(block, TextBlock):
        return block.layout_hint is not None
    if isinstance(block, ImageBlock):
        return "position" in block.model_fields_set
    return True


def migrate_overrides(record: LayoutRecord, blocks: Sequence[Block]) -> list[Block]:
    """Fold legacy ``placementById`` overrides into block content.

    An override only fills a gap: blocks whose content already states a
    placement keep it, so content stays the single source of truth.
    """
    migrated: list[Block] = []
    for block in blocks:
        override = record.placement_by_id.get(block.id)
        if (
            override is not None
            and not _has_explicit_placement(block)
            and resolve_placement(block) is not override
        ):
            logger.debug("Migrating legacy placement %s for block %s", override.value, block.id)
            block = apply_placement(block, override)
        migrated.append(block)
    return migrated


def order_blocks(blocks: Sequence[Block], record: LayoutRecord) -> list[Block]:
    """Return ``blocks`` in the record's visual order.

    ``record`` should already be reconciled; unknown ids are skipped and
    blocks missing from the record keep their relative order at the end.
    """
    by_id = {b.id: b for b in blocks}
    ordered = [by_id[i] for i in record.order if i in by_id]
    placed = {b.id for b in ordered}
    ordered.extend(b for b in blocks if b.id not in placed)
    return ordered


def move_block(record: LayoutRecord, dragged_id: str, target_id: str) -> LayoutRecord:
    """Move ``dragged_id`` to ``target_id``'s position (drag-and-drop drop).

    No-op when the ids are equal or either is not in ``record.order``.
    """
    order = list(record.order)
    if dragged_id == target_id or dragged_id not in order or target_id not in order:
        return record
    old_index = order.index(dragged_id)
    new_index = order.index(target_id)
    order.pop(old_index)
    order.insert(new_index, dragged_id)
    return record.model_copy(update={"order": order})


def persistable(record: LayoutRecord) -> LayoutRecord:
    """Return the record to write back: order only, overrides never written."""
    return LayoutRecord(order=list(record.order))


__all__ = [
    "default_record",
    "load_layout",
    "migrate_overrides",
    "move_block",
    "order_blocks",
    "parse_layout_record",
    "persistable",
    "reconcile_order",
]
