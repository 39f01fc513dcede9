from .deps import get_config, require_roles
from .status import router as status_router

__all__ = ["get_config", "require_roles", "status_router"]
