from pathlib import Path
from typing import Optional, Tuple

from fastapi import Request
from fastapi.templating import Jinja2Templates
from sqlmodel import Session

from todo.services.tasks import all_tasks

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_index(
    request: Request,
    db: Session,
    msg: Optional[Tuple[str, str]] = None,
    status_code: int = 200,
):
    """Render the task list page, optionally with a (kind, text) message."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {"msg": msg, "tasks": all_tasks(db)},
        status_code=status_code,
    )


def render_error(request: Request, db: Session, message: str, status_code: int):
    return render_index(request, db, ("error", message), status_code=status_code)
