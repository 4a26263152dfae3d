from __future__ import annotations

import logging

import uvicorn

from .config import get_settings
from .main import create_app


def main() -> None:
    app_settings = get_settings()
    logging.basicConfig(level=app_settings.log_level.upper())
    app = create_app(app_settings)
    try:
        uvicorn.run(app, host=app_settings.host, port=app_settings.port)
    finally:
        app.state.db.dispose()


if __name__ == "__main__":
    main()
