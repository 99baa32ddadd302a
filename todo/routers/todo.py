# todo/routers/todo.py
import logging

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import RedirectResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from todo.core.flash import flash_error, flash_success
from todo.core.templates import render_error
from todo.db.session import get_session
from todo.schemas.task import TodoForm
from todo.services.tasks import delete_task, insert_task, toggle_task

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/todo", tags=["Todo"])


async def todo_form(request: Request) -> TodoForm:
    """Parse the urlencoded create form; an empty description is still a valid form."""
    form = await request.form()
    try:
        return TodoForm.model_validate(dict(form))
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False, include_context=False))


def _home() -> RedirectResponse:
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)


@router.post("")
def new(
    request: Request,
    form: TodoForm = Depends(todo_form),
    db: Session = Depends(get_session),
):
    if not form.description:
        flash_error(request, "Description cannot be empty.")
        return _home()

    try:
        insert_task(db, form)
    except SQLAlchemyError:
        logger.exception("insert failed")
        flash_error(request, "Whoops! The server failed.")
        return _home()

    flash_success(request, "Todo successfully added.")
    return _home()


@router.put("/{task_id}")
def toggle(task_id: int, request: Request, db: Session = Depends(get_session)):
    try:
        task = toggle_task(db, task_id)
    except SQLAlchemyError:
        logger.exception("toggle failed for task %s", task_id)
        return render_error(request, db, "Couldn't toggle task.", status.HTTP_500_INTERNAL_SERVER_ERROR)

    if task is None:
        return render_error(request, db, "Couldn't toggle task.", status.HTTP_404_NOT_FOUND)
    return _home()


@router.delete("/{task_id}")
def delete(task_id: int, request: Request, db: Session = Depends(get_session)):
    try:
        deleted = delete_task(db, task_id)
    except SQLAlchemyError:
        logger.exception("delete failed for task %s", task_id)
        return render_error(request, db, "Couldn't delete task.", status.HTTP_500_INTERNAL_SERVER_ERROR)

    if not deleted:
        return render_error(request, db, "Couldn't delete task.", status.HTTP_404_NOT_FOUND)

    flash_success(request, "Todo was deleted.")
    return _home()


@router.post("/{task_id}")
def method_override(
    task_id: int,
    request: Request,
    method: str = Form(..., alias="_method"),
    db: Session = Depends(get_session),
):
    """HTML forms can only POST; the hidden `_method` field picks PUT or DELETE."""
    verb = method.strip().lower()
    if verb == "put":
        return toggle(task_id, request, db)
    if verb == "delete":
        return delete(task_id, request, db)
    raise HTTPException(status_code=status.HTTP_405_METHOD_NOT_ALLOWED, detail=f"Unsupported method: {method}")
