import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# todo.db.session builds its engine at import time
os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RUN_MIGRATIONS"] = "false"
os.environ["SECRET_KEY"] = "test-secret"

from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, create_engine  # noqa: E402

from todo.core.config import Settings  # noqa: E402
from todo.db.migrations import run_migrations  # noqa: E402
from todo.db.session import get_session  # noqa: E402
from todo.main import create_app  # noqa: E402


@pytest.fixture
def database_url(tmp_path):
    url = f"sqlite:///{tmp_path / 'todo.sqlite'}"
    run_migrations(url)
    return url


@pytest.fixture
def engine(database_url):
    engine = create_engine(database_url, connect_args={"check_same_thread": False})
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    with Session(engine) as s:
        yield s


@pytest.fixture
def app(engine):
    settings = Settings(ENV="test", SECRET_KEY="test-secret", RUN_MIGRATIONS=False)
    app = create_app(settings)

    def _get_session():
        with Session(engine) as s:
            yield s

    app.dependency_overrides[get_session] = _get_session
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
