"""Process-wide logging setup.

Modules log through ``logging.getLogger(__name__)``; this only wires the
root handler once at startup.
"""

import logging

from brandhub.core import config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False


def configure_logging(level: str | None = None) -> None:
    global _configured

    if _configured:
        return

    logging.basicConfig(level=level or config.LOG_LEVEL, format=LOG_FORMAT)
    # SQLAlchemy echo goes through its own logger; keep it quiet unless asked.
    if not config.DATABASE_ECHO:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    _configured = True
