"""One-shot messages carried across a redirect in the session cookie."""
from typing import Optional, Tuple

from fastapi import Request

FLASH_KEY = "_flash"

SUCCESS = "success"
ERROR = "error"


def flash(request: Request, kind: str, message: str) -> None:
    request.session[FLASH_KEY] = [kind, message]


def flash_success(request: Request, message: str) -> None:
    flash(request, SUCCESS, message)


def flash_error(request: Request, message: str) -> None:
    flash(request, ERROR, message)


def pop_flash(request: Request) -> Optional[Tuple[str, str]]:
    """Return the pending flash and clear it, or None."""
    data = request.session.pop(FLASH_KEY, None)
    if not data or len(data) != 2:
        return None
    kind, message = data
    return str(kind), str(message)
