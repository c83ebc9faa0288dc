from __future__ import annotations

import logging

import uvicorn

from .app.config import load_settings
from .app.logging_config import configure_logging
from .app.main import create_app
from .core.errors import ConfigurationError

logger = logging.getLogger(__name__)


def main() -> None:
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        configure_logging()
        logger.error("Refusing to start: %s", exc.message)
        raise SystemExit(1) from exc

    configure_logging(settings.log_level)
    app = create_app(settings)
    logger.info("Climate proxy listening on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
