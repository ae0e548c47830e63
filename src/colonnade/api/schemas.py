"""
Request and response models for the HTTP API.

The engine's own contracts (:mod:`colonnade.core.contracts`) are reused as
response bodies wherever possible; this module only adds the request
envelopes.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from colonnade.core.contracts.document import ArticleDocument
from colonnade.core.contracts.layout import LayoutRecord, LayoutStrategy
from colonnade.core.text.tokenizer import Span


class LayoutRequest(BaseModel):
    """Body of ``POST /layout``."""

    document: ArticleDocument
    strategy: LayoutStrategy | None = Field(
        default=None, description="Layout strategy; server default when omitted."
    )
    record: LayoutRecord | None = Field(
        default=None, description="Stored layout record, if the caller has one."
    )


class TokenizeRequest(BaseModel):
    """Body of ``POST /tokenize``."""

    text: str = Field(..., description="Inline text to tokenize.")


class TokenizeResponse(BaseModel):
    """Spans for one string."""

    spans: list[Span]


class MoveRequest(BaseModel):
    """Body of ``PUT /articles/{article_id}/layout/move`` (a drag-and-drop drop)."""

    dragged_id: str = Field(..., min_length=1)
    target_id: str = Field(..., min_length=1)


__all__ = ["LayoutRequest", "MoveRequest", "TokenizeRequest", "TokenizeResponse"]
