import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.status import router as status_router
from .core.config import Config
from .core.middleware import log_requests, register_exception_handlers


logger = logging.getLogger(__name__)


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Build the FastAPI application with CORS, request logging, error handlers and status routes."""
    config = config or Config.from_env()

    app = FastAPI(title="Medical Records Commons")
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def _log_requests(request, call_next):
        return await log_requests(request, call_next)

    register_exception_handlers(app)
    app.include_router(status_router)

    logger.info(f"Application created for environment '{config.ENVIRONMENT}'")
    return app
