"""
API v1 package.

The router composition lives in `app.api.v1.router`; include it into the
FastAPI app under the API prefix:

    from app.api.v1 import api_router
    app.include_router(api_router, prefix="/api")
"""

from .router import router as api_router

__all__ = ["api_router"]
