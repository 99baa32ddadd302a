from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from todo.models.task import Task
from todo.schemas.task import TodoForm

logger = logging.getLogger(__name__)


def all_tasks(db: Session) -> list[Task]:
    """Every task, newest first."""
    stmt = select(Task).order_by(Task.id.desc())
    return list(db.exec(stmt).all())


def insert_task(db: Session, form: TodoForm) -> Task:
    task = Task(description=form.description, completed=False)
    try:
        db.add(task)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(task)
    logger.info("task %s created", task.id)
    return task


def toggle_task(db: Session, task_id: int) -> Task | None:
    """Flip the completion flag. Returns None when the task does not exist."""
    try:
        task = db.get(Task, task_id)
        if task is None:
            return None
        task.completed = not task.completed
        db.add(task)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(task)
    return task


def delete_task(db: Session, task_id: int) -> bool:
    try:
        task = db.get(Task, task_id)
        if task is None:
            return False
        db.delete(task)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    logger.info("task %s deleted", task_id)
    return True
