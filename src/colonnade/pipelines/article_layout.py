"""
Article layout pipeline: one full, synchronous layout pass.

Flow Overview
-------------
1. **Record**   : reconcile the stored layout record with the live blocks
   (dead ids dropped, new ids appended, corrupt records replaced).
2. **Migrate**  : fold legacy ``placementById`` overrides into block content.
3. **Order**    : put blocks in the record's visual order.
4. **Layout**   : run the chosen strategy (strict grid, independent stack or
   flow) over the ordered blocks.
5. **Cite**     : number citations by first occurrence, build the footer and
   list unresolved ids.
6. **Annotate** : tokenize every text-bearing field; text bodies are split
   into paragraph and list runs first.
7. **Read time**: estimate minutes unless the article sets them manually.

Design Principles
-----------------
- **Recompute everything**: every call starts from the block sequence. There
  is no incremental update and nothing survives between calls.
- **Content is the source of truth**: placement is derived from block
  content; the record written back carries order only.
- **No failures on content**: malformed markup degrades to plain text and a
  bad record falls back to the natural order.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, Field

from colonnade.core.citations import (
    AnnotatedSpan,
    annotate,
    index_citations,
    ordered_references,
    reference_numbers,
    unresolved_ids,
)
from colonnade.core.contracts.block import Block, TextBlock, iter_text_fields
from colonnade.core.contracts.document import ArticleDocument
from colonnade.core.contracts.layout import FlowItem, LayoutRecord, LayoutStrategy, Row, Section
from colonnade.core.contracts.reference import NumberedReference
from colonnade.core.layout.record import load_layout, migrate_overrides, order_blocks, persistable
from colonnade.core.layout.strategy import build_layout
from colonnade.core.settings import get_logger, load_settings
from colonnade.core.text.reading_time import article_text, estimate_minutes
from colonnade.core.text.splitter import ListRun, split_paragraphs_and_lists

logger = get_logger(__name__)


# --------------------------------------------------------------------------- #
# Result types
# --------------------------------------------------------------------------- #


class AnnotatedRun(BaseModel):
    """A paragraph or list run of a text body, one span list per line/item."""

    kind: Literal["paragraph", "list"]
    entries: list[list[AnnotatedSpan]] = Field(default_factory=list)


class BlockAnnotations(BaseModel):
    """Annotated spans for one block.

    ``fields`` is keyed by the dotted field path from
    :func:`~colonnade.core.contracts.block.iter_text_fields`. For text blocks
    the body is also given as ``body`` runs, and ``fields`` omits ``"text"``.
    """

    fields: dict[str, list[AnnotatedSpan]] = Field(default_factory=dict)
    body: list[AnnotatedRun] = Field(default_factory=list)


class LayoutPassResult(BaseModel):
    """Everything the rendering layer needs for one article."""

    strategy: LayoutStrategy
    blocks: list[Block] = Field(description="Blocks in visual order, overrides migrated.")
    rows: list[Row] | None = None
    sections: list[Section] | None = None
    flow: list[FlowItem] | None = None
    cited_ids: list[str] = Field(default_factory=list)
    reference_numbers: dict[str, int] = Field(default_factory=dict)
    footer: list[NumberedReference] = Field(default_factory=list)
    unresolved: list[str] = Field(default_factory=list)
    annotations: dict[str, BlockAnnotations] = Field(default_factory=dict)
    reading_minutes: int | None = None
    record: LayoutRecord = Field(description="Record to persist (order only).")


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _annotate_block(
    block: Block, numbers: Mapping[str, int], known_ids: set[str]
) -> BlockAnnotations:
    out = BlockAnnotations()
    for path, text in iter_text_fields(block):
        if isinstance(block, TextBlock) and path == "text":
            continue
        out.fields[path] = annotate(text, numbers, known_ids)

    if isinstance(block, TextBlock) and block.text:
        for run in split_paragraphs_and_lists(block.text):
            if isinstance(run, ListRun):
                entries = [annotate(item, numbers, known_ids) for item in run.items]
                out.body.append(AnnotatedRun(kind="list", entries=entries))
            else:
                entries = [annotate(line, numbers, known_ids) for line in run.lines]
                out.body.append(AnnotatedRun(kind="paragraph", entries=entries))
    return out


def _reading_minutes(document: ArticleDocument, blocks: list[Block], wpm: int) -> int | None:
    if document.settings.reading_time_mode == "manual":
        return document.settings.reading_time_minutes
    return estimate_minutes(article_text(blocks), wpm=wpm)


# --------------------------------------------------------------------------- #
# Entry point
# --------------------------------------------------------------------------- #


def run_layout_pass(
    document: ArticleDocument,
    strategy: LayoutStrategy | str | None = None,
    record: LayoutRecord | str | bytes | Mapping[str, Any] | None = None,
) -> LayoutPassResult:
    """Run a complete layout pass over ``document``.

    Parameters
    ----------
    document:
        The article as edited in the builder.
    strategy:
        Layout strategy; defaults to ``COLONNADE_STRATEGY``.
    record:
        Stored layout record (model, JSON text or mapping), or ``None``.

    Returns
    -------
    LayoutPassResult
        Layout items for the chosen strategy, citation numbering, footer,
        annotated text, reading time and the record to persist.

    Raises
    ------
    ValueError
        If ``strategy`` names no known strategy.
    """
    cfg = load_settings()
    chosen = LayoutStrategy(strategy or cfg.default_strategy)

    raw_record = record.model_dump(by_alias=True) if isinstance(record, LayoutRecord) else record
    reconciled = load_layout(raw_record, document.blocks)
    blocks = order_blocks(migrate_overrides(reconciled, document.blocks), reconciled)

    items = build_layout(blocks, chosen)

    known_ids = {ref.id for ref in document.references}
    cited = index_citations(blocks, known_ids)
    numbers = reference_numbers(cited)
    missing = unresolved_ids(blocks, known_ids)

    layout_field = {
        LayoutStrategy.STRICT_GRID: "rows",
        LayoutStrategy.INDEPENDENT_STACK: "sections",
        LayoutStrategy.FLOW: "flow",
    }[chosen]
    result = LayoutPassResult(
        strategy=chosen,
        blocks=blocks,
        cited_ids=cited,
        reference_numbers=numbers,
        footer=ordered_references(cited, document.references),
        unresolved=missing,
        annotations={b.id: _annotate_block(b, numbers, known_ids) for b in blocks},
        reading_minutes=_reading_minutes(document, blocks, cfg.reading_wpm),
        record=persistable(reconciled),
        **{layout_field: items},
    )

    logger.debug(
        "Layout pass (%s): %d blocks, %d layout items, %d cited, %d unresolved",
        chosen.value,
        len(blocks),
        len(items),
        len(cited),
        len(missing),
    )
    return result


__all__ = [
    "AnnotatedRun",
    "BlockAnnotations",
    "LayoutPassResult",
    "run_layout_pass",
]
