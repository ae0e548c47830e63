"""
API routes for stateless layout work.

Endpoints
---------
- ``POST /layout``   : run a full layout pass on a posted article document.
- ``POST /tokenize`` : return the inline spans of a posted string.

Both endpoints are pure: nothing is stored.
"""

from __future__ import annotations

from fastapi import APIRouter

from colonnade.api.schemas import LayoutRequest, TokenizeRequest, TokenizeResponse
from colonnade.core.text.tokenizer import tokenize
from colonnade.pipelines.article_layout import LayoutPassResult, run_layout_pass

router = APIRouter(tags=["Layout"])


@router.post(
    "/layout",
    response_model=LayoutPassResult,
    summary="Lay out an article document",
)
async def layout_document(request: LayoutRequest) -> LayoutPassResult:
    """
    Run one layout pass and return rows/sections, footer and annotated text.

    The returned ``record`` is what the caller should persist.
    """
    return run_layout_pass(request.document, strategy=request.strategy, record=request.record)


@router.post(
    "/tokenize",
    response_model=TokenizeResponse,
    summary="Tokenize inline markup",
)
async def tokenize_text(request: TokenizeRequest) -> TokenizeResponse:
    """Split ``text`` into link, citation, bold, italic, strike and plain spans."""
    return TokenizeResponse(spans=tokenize(request.text))


__all__ = ["router"]
