"""Run the Exercise API with uvicorn.

Usage:
    python -m exercise_api

HOST and PORT are read from the environment (default 0.0.0.0:8080).
"""
import uvicorn

from .config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "exercise_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
