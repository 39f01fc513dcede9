"""
API dependencies shared by the routers of services mounting this package.
"""

import logging
from typing import Callable, Iterable

from fastapi import Depends, Request

from ..core.config import Config
from ..core.exceptions import InsufficientRoleException
from ..services.supabase_service import check_database


logger = logging.getLogger(__name__)


def get_config(request: Request) -> Config:
    return request.app.state.config


def get_database_check() -> Callable[[Config], None]:
    return check_database


def _request_roles(request: Request) -> set[str]:
    roles = getattr(request.state, "roles", None)
    if roles is None:
        return set()
    if isinstance(roles, str):
        return {roles}
    return set(roles)


def require_roles(*allowed: str) -> Callable:
    """
    Return a FastAPI dependency that enforces the caller's roles.

    Roles are read from ``request.state.roles``, which the authentication
    layer in front of this package is expected to populate. When
    ``AUTH_FEATURES_ENABLED`` is off the check is skipped.
    """
    allowed_roles: Iterable[str] = frozenset(allowed)

    def _checker(request: Request, config: Config = Depends(get_config)) -> None:
        if not config.AUTH_FEATURES_ENABLED:
            logger.debug("Bypassed roles check")
            return

        if _request_roles(request).isdisjoint(allowed_roles):
            raise InsufficientRoleException("Insufficient roles to access this resource")

    return _checker
