"""
API routes for per-article layout records.

Endpoints
---------
- ``GET /articles/{article_id}/layout``      : stored record (empty if none).
- ``PUT /articles/{article_id}/layout``      : replace the stored order.
- ``PUT /articles/{article_id}/layout/move`` : drag ``dragged_id`` onto
  ``target_id``'s position.

Placement is never stored here: it lives in block content. Any
``placementById`` sent by a legacy client is dropped on write.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from colonnade.api.layout_store import get_layout_store
from colonnade.api.schemas import MoveRequest
from colonnade.core.contracts.layout import LayoutRecord
from colonnade.core.layout.record import move_block

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.get(
    "/{article_id}/layout",
    response_model=LayoutRecord,
    response_model_by_alias=True,
    summary="Get the stored layout record",
)
async def get_layout(article_id: str) -> LayoutRecord:
    """Return the stored record, or an empty one for an unknown article."""
    return get_layout_store().get(article_id) or LayoutRecord()


@router.put(
    "/{article_id}/layout",
    response_model=LayoutRecord,
    response_model_by_alias=True,
    summary="Replace the stored layout order",
)
async def put_layout(article_id: str, record: LayoutRecord) -> LayoutRecord:
    """Store ``record``'s order and return the stored record."""
    return get_layout_store().put(article_id, record)


@router.put(
    "/{article_id}/layout/move",
    response_model=LayoutRecord,
    response_model_by_alias=True,
    summary="Move one block onto another's position",
)
async def move_layout_block(article_id: str, request: MoveRequest) -> LayoutRecord:
    """
    Apply a drag-and-drop move to the stored order.

    Unknown ids leave the order unchanged, matching the builder's drop handler.
    """
    store = get_layout_store()
    current = store.get(article_id)
    if current is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No layout stored for article {article_id}",
        )
    return store.put(article_id, move_block(current, request.dragged_id, request.target_id))


__all__ = ["router"]
