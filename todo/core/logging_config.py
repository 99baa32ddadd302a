import logging
import sys

# per-request / per-statement chatter; raised back to DEBUG with LOG_LEVEL=DEBUG
NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine")


def resolve_level(level: int | str) -> int:
    """LOG_LEVEL may be a name ("info") or a number; unknown names fall back to INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: int | str = logging.INFO) -> None:
    lvl = resolve_level(level)
    quiet = logging.DEBUG if lvl <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(quiet)

    logger = logging.getLogger()
    if logger.handlers:
        return  # uvicorn/pytest already installed handlers
    logger.setLevel(lvl)
    h = logging.StreamHandler(sys.stdout)
    h.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s - %(message)s"
    ))
    logger.addHandler(h)
