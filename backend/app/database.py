import logging

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from app.config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def create_db_engine(settings: Settings) -> Engine:
    database_url = settings.get_database_url
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}

    return create_engine(
        database_url,
        pool_pre_ping=True,
        echo=settings.DEBUG,
        connect_args=connect_args,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Session:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def init_db(engine: Engine, session_factory: sessionmaker, seed: bool = True) -> None:
    """Create tables and, optionally, the default users and sample films"""
    # Register models on Base.metadata before create_all
    import app.models  # noqa: F401
    from app.services.film_service import seed_films
    from app.services.user_service import seed_users

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")

    if not seed:
        return

    db = session_factory()
    try:
        seed_users(db)
        seed_films(db)
    finally:
        db.close()
