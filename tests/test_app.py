import logging

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError
from sqlalchemy import create_engine, inspect

from todo import main
from todo.core.config import DEFAULT_SECRET_KEY, Settings
from todo.core.logging_config import NOISY_LOGGERS, resolve_level, setup_logging
from todo.db import session as session_module
from todo.routers import health


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("RUN_MIGRATIONS", "false")
    monkeypatch.setenv("PORT", "9000")

    settings = Settings()

    assert settings.run_migrations is False
    assert settings.port == 9000


def test_prod_refuses_default_secret_key():
    settings = Settings(ENV="prod", SECRET_KEY=DEFAULT_SECRET_KEY)

    with pytest.raises(RuntimeError, match="SECRET_KEY"):
        main.create_app(settings)


def test_env_is_case_insensitive():
    assert Settings(ENV=" PROD ").app_env == "prod"


def test_prod_in_upper_case_still_refuses_default_secret_key(monkeypatch):
    monkeypatch.setenv("ENV", "PROD")
    settings = Settings(SECRET_KEY=DEFAULT_SECRET_KEY)

    with pytest.raises(RuntimeError, match="SECRET_KEY"):
        main.create_app(settings)


def test_unknown_env_is_rejected():
    with pytest.raises(ValidationError):
        Settings(ENV="staging")


def test_in_memory_database_is_migrated_on_startup(monkeypatch):
    memory = create_engine("sqlite://", **session_module._engine_kwargs("sqlite://"))
    monkeypatch.setattr(main, "engine", memory)
    monkeypatch.setattr(session_module, "engine", memory)
    settings = Settings(ENV="test", SECRET_KEY="test-secret", RUN_MIGRATIONS=True)

    with TestClient(main.create_app(settings)) as client:
        assert client.get("/").status_code == 200

        res = client.post("/todo", data={"description": "kept in memory"})

        assert "Todo successfully added." in res.text
        assert "kept in memory" in res.text

    memory.dispose()


def test_startup_runs_migrations(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'startup.sqlite'}"
    monkeypatch.setattr(main, "engine", create_engine(url))
    settings = Settings(ENV="test", SECRET_KEY="test-secret", RUN_MIGRATIONS=True)

    with TestClient(main.create_app(settings)):
        pass

    engine = create_engine(url)
    try:
        assert "tasks" in inspect(engine).get_table_names()
    finally:
        engine.dispose()


def test_startup_aborts_when_migrations_fail(monkeypatch):
    def broken(database_url=None, engine=None):
        raise RuntimeError("migration exploded")

    monkeypatch.setattr(main.migrations, "run_migrations", broken)
    settings = Settings(ENV="test", SECRET_KEY="test-secret", RUN_MIGRATIONS=True)

    with pytest.raises(RuntimeError, match="migration exploded"):
        with TestClient(main.create_app(settings)):
            pass


def test_health_app(client):
    res = client.get("/health")

    assert res.status_code == 200
    assert res.json() == {"ok": True}


def test_health_db_ok(client, engine, monkeypatch):
    monkeypatch.setattr(health, "engine", engine)

    res = client.get("/health/db")

    assert res.json() == {"ok": True}


def test_health_db_failure(client, tmp_path, monkeypatch):
    unreachable = create_engine(f"sqlite:///{tmp_path / 'missing' / 'nope.sqlite'}")
    monkeypatch.setattr(health, "engine", unreachable)

    res = client.get("/health/db")

    assert res.status_code == 500
    assert res.json()["detail"] == "Database connection failed"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("info", logging.INFO), ("DEBUG", logging.DEBUG), (" warning ", logging.WARNING), ("loud", logging.INFO), (10, 10)],
)
def test_resolve_level(raw, expected):
    assert resolve_level(raw) == expected


def test_setup_logging_quiets_library_loggers():
    setup_logging("INFO")

    assert all(logging.getLogger(name).level == logging.WARNING for name in NOISY_LOGGERS)

    setup_logging("debug")

    assert all(logging.getLogger(name).level == logging.DEBUG for name in NOISY_LOGGERS)
