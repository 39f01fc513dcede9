from http import HTTPStatus
from typing import Any, Dict, Union


def generate_success_response(status: Union[HTTPStatus, int], message: str) -> Dict[str, Dict[str, Any]]:
    return {"success": {"code": int(status), "message": message}}
