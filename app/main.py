from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.router import router as api_router
from app.config.settings import settings
from app.core.exceptions import register_exception_handlers
from app.core.logging import get_logger, setup_logging
from app.core.middleware import register_middlewares
from app.db.init_db import init_db

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """
    Application factory for the FastAPI app.

    - Configures logging, title, version and debug mode from Settings.
    - Registers CORS, core middleware and exception handlers.
    - Includes the API router under the API prefix.
    """
    setup_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version=settings.API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
    )

    origins = settings.cors_origins_list
    if origins and origins != ["*"]:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        # Permissive for development; tighten in production
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=False,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Request ID and timing
    register_middlewares(app)
    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    # Tables are created outside production only; production schemas are managed separately.
    # The bootstrap admin is ensured in every environment.
    @app.on_event("startup")
    async def on_startup() -> None:
        await init_db(create_schema=not settings.is_production())
        logger.info(
            "Application started",
            extra={"environment": settings.ENVIRONMENT, "api_prefix": settings.API_PREFIX},
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
