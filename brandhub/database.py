import logging
from collections.abc import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from brandhub.core import config

logger = logging.getLogger(__name__)


def _build_engine(url: str) -> Engine:
    connect_args = {}
    if url.startswith('sqlite'):
        # Route functions run in the threadpool, so one connection may cross threads.
        connect_args['check_same_thread'] = False
    return create_engine(url, echo=config.DATABASE_ECHO, connect_args=connect_args)


engine = _build_engine(config.DATABASE_URL)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

Base = declarative_base()


def init_database() -> None:
    # Models register themselves on Base when imported.
    from brandhub.models import branding, user  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info('Database tables ready (%s)', engine.url.render_as_string(hide_password=True))


def close_database() -> None:
    engine.dispose()
    logger.info('Database connections closed')


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
