import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from brandhub.core import config
from brandhub.core.errors import setup_exception_handlers
from brandhub.core.logging_config import configure_logging
from brandhub.database import close_database, init_database
from brandhub.routes import auth_routes, branding_routes, user_routes

configure_logging()

app = FastAPI(title='Brandhub API')

if config.CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

setup_exception_handlers(app)

logger = logging.getLogger(__name__)


@app.on_event('startup')
def initialize_database() -> None:
    config.validate_runtime_config()
    try:
        init_database()
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DATABASE_URL.')


@app.on_event('shutdown')
def shutdown_database() -> None:
    close_database()


@app.get('/')
def root():
    return {'status': 'Brandhub API Running'}


app.include_router(auth_routes.router)
app.include_router(user_routes.router, prefix='/users')
app.include_router(branding_routes.router, prefix='/branding')
