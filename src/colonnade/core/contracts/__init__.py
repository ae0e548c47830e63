"""Pydantic contracts shared by the layout engine, pipeline, CLI and API."""

from __future__ import annotations

from .block import (
    Block,
    DividerBlock,
    ImageBlock,
    QuoteBlock,
    SidebarBlock,
    SidebarGroup,
    TextBlock,
    TitleBlock,
    parse_block,
    parse_blocks,
)
from .document import ArticleDocument, ArticleSettings, parse_document
from .layout import (
    ColumnsSection,
    FlowRun,
    FullRow,
    FullSection,
    LayoutRecord,
    LayoutStrategy,
    Placement,
    SplitRow,
    StandaloneBlock,
)
from .reference import NumberedReference, Reference

__all__ = [
    "ArticleDocument",
    "ArticleSettings",
    "Block",
    "ColumnsSection",
    "DividerBlock",
    "FlowRun",
    "FullRow",
    "FullSection",
    "ImageBlock",
    "LayoutRecord",
    "LayoutStrategy",
    "NumberedReference",
    "Placement",
    "QuoteBlock",
    "Reference",
    "SidebarBlock",
    "SidebarGroup",
    "SplitRow",
    "StandaloneBlock",
    "TextBlock",
    "TitleBlock",
    "parse_block",
    "parse_blocks",
    "parse_document",
]
