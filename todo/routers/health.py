from fastapi import APIRouter, HTTPException
from sqlmodel import text

from todo.db.session import engine

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health_app():
    return {"ok": True}


@router.get("/db")
def health_db():
    # Runtime only verifies DB connectivity; schema is the migrations' job.
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"ok": True}
    except Exception:
        raise HTTPException(status_code=500, detail="Database connection failed")
