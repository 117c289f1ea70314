"""Run the mock server: ``python -m src.image_mock``."""

import uvicorn

from src.image_mock.config import settings


def main() -> None:
    uvicorn.run(
        "src.image_mock.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
