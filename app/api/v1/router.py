"""
API router - main entry point.
Aggregates every endpoint module of the hostel desk API.
"""
from fastapi import APIRouter

from app.api.v1 import (
    attendance,
    auth,
    complaints,
    dashboard,
    invoices,
    mess,
    students,
    suggestions,
    wardens,
)

router = APIRouter(
    responses={
        400: {"description": "Bad Request"},
        401: {"description": "Unauthorized"},
        403: {"description": "Forbidden"},
        404: {"description": "Not Found"},
        409: {"description": "Conflict"},
        500: {"description": "Internal Server Error"},
    }
)

for module in (
    auth,
    students,
    wardens,
    complaints,
    suggestions,
    attendance,
    invoices,
    mess,
    dashboard,
):
    router.include_router(module.router)


@router.get("/health", tags=["Health"])
async def health_check() -> dict:
    return {"status": "ok"}


__all__ = ["router"]
