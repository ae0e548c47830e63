"""
Layout contracts: placements, strict-grid rows, independent-stack sections.

Placement
---------
:class:`Placement` is *derived* from block content on every pass (see
:mod:`colonnade.core.layout.placement`). It is never authoritative state.

Rows (strict grid)
------------------
- :class:`FullRow`  : one full-width block.
- :class:`SplitRow` : a left/right pair. When both slots are filled, the left
  block never comes later in document order than the right one.

Sections (independent stack)
----------------------------
- :class:`FullSection`    : one full-width block.
- :class:`ColumnsSection` : two independently-lengthed column runs. Order is
  preserved within a column, not across columns.

Flow (published renderer)
-------------------------
- :class:`FlowRun`         : text wrapped around side images in one direction.
- :class:`StandaloneBlock` : a block rendered on its own.

Persisted record
----------------
:class:`LayoutRecord` is the shape kept by the external layout store:
``{"order": [...], "placementById": {...}}``. The override map is a legacy
read path only; new code writes it empty.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from .block import Block


class Placement(str, Enum):
    """Where a block sits in the two-column grid."""

    LEFT = "left"
    RIGHT = "right"
    FULL = "full"


class LayoutStrategy(str, Enum):
    """Named layout builders sharing one placement resolver."""

    STRICT_GRID = "strict-grid"
    INDEPENDENT_STACK = "independent-stack"
    FLOW = "flow"


# ---- Strict grid -------------------------------------------------------------


class FullRow(BaseModel):
    """A row holding a single full-width block."""

    kind: Literal["full"] = "full"
    block_id: str


class SplitRow(BaseModel):
    """A two-cell row; either slot may be empty but not both."""

    kind: Literal["split"] = "split"
    left_id: str | None = None
    right_id: str | None = None

    def ids(self) -> list[str]:
        """Return the filled slot ids in reading order (left, then right)."""
        return [i for i in (self.left_id, self.right_id) if i is not None]


Row = Annotated[FullRow | SplitRow, Field(discriminator="kind")]


# ---- Independent stack -------------------------------------------------------


class FullSection(BaseModel):
    """A section holding a single full-width block."""

    kind: Literal["full"] = "full"
    block: Block


class ColumnsSection(BaseModel):
    """Two independent column runs flushed by the next full-width block."""

    kind: Literal["columns"] = "columns"
    left: list[Block] = Field(default_factory=list)
    right: list[Block] = Field(default_factory=list)


Section = Annotated[FullSection | ColumnsSection, Field(discriminator="kind")]


# ---- Flow --------------------------------------------------------------------


class FlowRun(BaseModel):
    """Text blocks flowing around side images that share one direction."""

    kind: Literal["flow"] = "flow"
    direction: Literal["left", "right"]
    blocks: list[Block] = Field(default_factory=list)


class StandaloneBlock(BaseModel):
    """A block rendered on its own, outside any flow run."""

    kind: Literal["block"] = "block"
    block: Block


FlowItem = Annotated[FlowRun | StandaloneBlock, Field(discriminator="kind")]


# ---- Persisted record --------------------------------------------------------


class LayoutRecord(BaseModel):
    """Persisted visual order plus the legacy placement override map."""

    model_config = ConfigDict(populate_by_name=True)

    order: list[str] = Field(default_factory=list, description="Block ids in visual order.")
    placement_by_id: dict[str, Placement] = Field(
        default_factory=dict,
        alias="placementById",
        description="Legacy per-block overrides (read-only migration input).",
    )


__all__ = [
    "ColumnsSection",
    "FlowItem",
    "FlowRun",
    "FullRow",
    "FullSection",
    "LayoutRecord",
    "LayoutStrategy",
    "Placement",
    "Row",
    "Section",
    "SplitRow",
    "StandaloneBlock",
]
