from fastapi import APIRouter, Depends, Request
from sqlmodel import Session

from todo.core.flash import pop_flash
from todo.core.templates import render_index
from todo.db.session import get_session

router = APIRouter(tags=["Index"])


@router.get("/")
def index(request: Request, db: Session = Depends(get_session)):
    return render_index(request, db, pop_flash(request))
