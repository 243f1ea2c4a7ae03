import uvicorn

from registro.core.config import settings
from registro.main import create_app


def main() -> None:
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
