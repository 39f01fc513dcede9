"""Liveness and database status endpoints."""
import logging
from typing import Callable

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..core.config import Config
from .deps import get_config, get_database_check


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/status", tags=["status"])


@router.get("/app")
async def get_app_status():
    return {"message": "I am up, for sure"}


@router.get("/db")
def get_db_status(
    config: Config = Depends(get_config),
    check_database: Callable[[Config], None] = Depends(get_database_check),
):
    try:
        check_database(config)
    except Exception as e:
        logger.warning(f"Database status check failed: {e}")
        return JSONResponse(status_code=503, content={"message": "DB is down"})

    return {"message": "DB is up"}
