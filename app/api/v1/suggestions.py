"""
Suggestion endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db, require_roles
from app.models.base.enums import TicketStatus, UserRole
from app.schemas.common import CountResponse, MessageResponse
from app.schemas.suggestion import (
    CommentCreate,
    SuggestionCreate,
    SuggestionRespond,
    SuggestionResponse,
    SuggestionStatusUpdate,
)
from app.services.common.permissions import Principal
from app.services.suggestion import SuggestionService

router = APIRouter(prefix="/suggestions", tags=["Suggestions"])

handlers = require_roles(UserRole.WARDEN, UserRole.ADMIN)


def _many(suggestions) -> List[SuggestionResponse]:
    return [SuggestionResponse.model_validate(s) for s in suggestions]


@router.get("", response_model=List[SuggestionResponse])
async def list_suggestions(
    status_filter: Optional[TicketStatus] = Query(default=None, alias="status"),
    principal: Principal = Depends(require_roles()),
    db: AsyncSession = Depends(get_db),
) -> List[SuggestionResponse]:
    return _many(await SuggestionService(db).list_suggestions(principal, status_filter))


@router.get("/my-suggestions", response_model=List[SuggestionResponse])
async def list_my_suggestions(
    principal: Principal = Depends(require_roles(UserRole.STUDENT)),
    db: AsyncSession = Depends(get_db),
) -> List[SuggestionResponse]:
    return _many(await SuggestionService(db).list_suggestions(principal))


@router.get("/warden", response_model=List[SuggestionResponse])
async def list_open_block_suggestions(
    principal: Principal = Depends(require_roles(UserRole.WARDEN)),
    db: AsyncSession = Depends(get_db),
) -> List[SuggestionResponse]:
    """Pending and In Progress suggestions from the warden's block."""
    return _many(await SuggestionService(db).list_suggestions(principal, open_only=True))


@router.get("/count", response_model=CountResponse)
async def count_open_suggestions(
    principal: Principal = Depends(handlers),
    db: AsyncSession = Depends(get_db),
) -> CountResponse:
    return CountResponse(count=await SuggestionService(db).count_open(principal))


@router.get("/{suggestion_id}", response_model=SuggestionResponse)
async def read_suggestion(
    suggestion_id: str,
    principal: Principal = Depends(require_roles()),
    db: AsyncSession = Depends(get_db),
) -> SuggestionResponse:
    return SuggestionResponse.model_validate(await SuggestionService(db).get_suggestion(principal, suggestion_id))


@router.post("", response_model=SuggestionResponse, status_code=status.HTTP_201_CREATED)
async def create_suggestion(
    payload: SuggestionCreate,
    principal: Principal = Depends(require_roles(UserRole.STUDENT)),
    db: AsyncSession = Depends(get_db),
) -> SuggestionResponse:
    return SuggestionResponse.model_validate(await SuggestionService(db).create_suggestion(principal, payload))


@router.put("/{suggestion_id}/status", response_model=SuggestionResponse)
async def update_suggestion_status(
    suggestion_id: str,
    payload: SuggestionStatusUpdate,
    principal: Principal = Depends(handlers),
    db: AsyncSession = Depends(get_db),
) -> SuggestionResponse:
    suggestion = await SuggestionService(db).update_status(
        principal, suggestion_id, payload.status, payload.response
    )
    return SuggestionResponse.model_validate(suggestion)


@router.post("/{suggestion_id}/respond", response_model=SuggestionResponse)
async def respond_to_suggestion(
    suggestion_id: str,
    payload: SuggestionRespond,
    principal: Principal = Depends(handlers),
    db: AsyncSession = Depends(get_db),
) -> SuggestionResponse:
    suggestion = await SuggestionService(db).respond(principal, suggestion_id, payload.response)
    return SuggestionResponse.model_validate(suggestion)


@router.post("/{suggestion_id}/comments", response_model=SuggestionResponse, status_code=status.HTTP_201_CREATED)
async def comment_on_suggestion(
    suggestion_id: str,
    payload: CommentCreate,
    principal: Principal = Depends(require_roles()),
    db: AsyncSession = Depends(get_db),
) -> SuggestionResponse:
    suggestion = await SuggestionService(db).add_comment(principal, suggestion_id, payload.text)
    return SuggestionResponse.model_validate(suggestion)


@router.delete("/{suggestion_id}", response_model=MessageResponse)
async def delete_suggestion(
    suggestion_id: str,
    principal: Principal = Depends(require_roles()),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    await SuggestionService(db).delete_suggestion(principal, suggestion_id)
    return MessageResponse(message="Suggestion deleted successfully")
