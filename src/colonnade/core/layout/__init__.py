"""Block layout: placement resolution, grid/stack/flow builders, persisted record."""

from __future__ import annotations

from .flow import build_flow_runs
from .placement import apply_placement, placement_update, resolve_placement, resolver_for
from .record import load_layout, move_block, order_blocks, persistable
from .rows import build_rows, flatten_rows
from .sections import build_sections
from .strategy import build_layout

__all__ = [
    "apply_placement",
    "build_flow_runs",
    "build_layout",
    "build_rows",
    "build_sections",
    "flatten_rows",
    "load_layout",
    "move_block",
    "order_blocks",
    "persistable",
    "placement_update",
    "resolve_placement",
    "resolver_for",
]
