# todo/db/migrations.py
import logging
from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config
from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parents[1]
MIGRATIONS_DIR = PACKAGE_DIR / "migrations"


def alembic_config(database_url: Optional[str] = None) -> Config:
    """Alembic config pointing at the packaged scripts; no ini file needed."""
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    if database_url:
        # configparser interpolation
        cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return cfg


def run_migrations(database_url: Optional[str] = None, engine: Optional[Engine] = None) -> None:
    """Upgrade to head. With `engine`, migrate over one of its connections so
    in-memory SQLite (StaticPool) sees the tables it created."""
    log.info("running database migrations")
    cfg = alembic_config(database_url)
    if engine is None:
        command.upgrade(cfg, "head")
    else:
        with engine.begin() as connection:
            cfg.attributes["connection"] = connection
            command.upgrade(cfg, "head")
    log.info("database migrations done")
