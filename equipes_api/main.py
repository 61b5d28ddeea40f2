"""Console entry point: ``equipes-api`` / ``python -m equipes_api.main``."""
from __future__ import annotations

import uvicorn

from equipes_api.app import create_app
from equipes_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
