"""Run the API with uvicorn: ``python -m hourcast``."""
import uvicorn

from hourcast.config import settings


def main() -> None:
    uvicorn.run("hourcast.main:app", host=settings.API_HOST, port=settings.API_PORT)


if __name__ == "__main__":
    main()
