import uvicorn

from todo.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("todo.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
