"""Brandhub entrypoint.

Run with:
  python -m brandhub
"""

import logging

import uvicorn

from brandhub.core import config
from brandhub.core.logging_config import configure_logging


def main() -> None:
    configure_logging()
    logging.getLogger(__name__).info('Server running on port %s', config.PORT)
    uvicorn.run('brandhub.main:app', host=config.HOST, port=config.PORT)


if __name__ == '__main__':
    main()
