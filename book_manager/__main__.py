"""Process entry point: ``python -m book_manager`` or the ``book-manager`` script.

Exit code 78 is used for configuration errors.  A database that cannot be
reached fails the application lifespan, which uvicorn runs before binding the
listening socket, so no partial listener is left behind.
"""

from __future__ import annotations

import logging
import sys

import uvicorn
from pydantic import ValidationError

from book_manager.deps import get_settings
from book_manager.main import app

CONFIG_ERROR_RC = 78

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    try:
        settings = get_settings()
    except ValidationError as exc:
        logger.error("Invalid configuration (check DATABASE_URL and LOG_LEVEL): %s", exc)
        sys.exit(CONFIG_ERROR_RC)

    logging.getLogger().setLevel(settings.log_level)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        lifespan="on",
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
