# todo/main.py
from dotenv import load_dotenv

# .env must be loaded before todo.db.session reads DATABASE_URL at import
load_dotenv()

import logging  # noqa: E402
from contextlib import asynccontextmanager  # noqa: E402
from pathlib import Path  # noqa: E402
from typing import Optional  # noqa: E402

from fastapi import FastAPI  # noqa: E402
from fastapi.staticfiles import StaticFiles  # noqa: E402
from starlette.middleware.sessions import SessionMiddleware  # noqa: E402

from todo.core.config import DEFAULT_SECRET_KEY, Settings, get_settings  # noqa: E402
from todo.core.logging_config import setup_logging  # noqa: E402
from todo.db import migrations  # noqa: E402
from todo.db.session import engine  # noqa: E402

from todo.routers import health, index  # noqa: E402
from todo.routers import todo as todo_router  # noqa: E402

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


def _lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.run_migrations:
            try:
                migrations.run_migrations(engine=engine)
            except Exception:
                logger.error("Failed to run database migrations", exc_info=True)
                raise
        logger.info("%s ready (env=%s)", settings.app_name, settings.app_env)
        yield
        logger.info("%s shutting down", settings.app_name)

    return lifespan


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    if settings.secret_key == DEFAULT_SECRET_KEY:
        if settings.app_env == "prod":
            raise RuntimeError("SECRET_KEY must be set in prod")
        logger.warning("SECRET_KEY not set; flash cookies use the development key")

    app = FastAPI(title=settings.app_name, lifespan=_lifespan(settings))
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.secret_key,
        session_cookie=settings.session_cookie,
        https_only=settings.app_env == "prod",
    )

    app.include_router(index.router)
    app.include_router(todo_router.router)
    app.include_router(health.router)
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    return app


app = create_app()
