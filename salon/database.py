# salon/database.py

import logging

from fastapi import Request
from sqlalchemy import create_engine, event, func
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .config import Settings
from .models.tables import Base, Products, Services

logger = logging.getLogger(__name__)


def create_db_engine(settings: Settings) -> Engine:
    url = settings.resolved_database_url
    connect_args = {}

    if url.startswith("sqlite"):
        # check_same_thread=False: FastAPI runs sync handlers in a threadpool
        connect_args["check_same_thread"] = False
    elif settings.database_ssl:
        connect_args["sslmode"] = "require"

    engine = create_engine(url, connect_args=connect_args, pool_pre_ping=True)

    if url.startswith("sqlite"):
        enable_sqlite_fk(engine)

    return engine


def enable_sqlite_fk(engine: Engine) -> None:
    @event.listens_for(engine, "connect")
    def _enable_sqlite_fk(dbapi_connection, _):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )


def init_db(engine: Engine, seed: bool = True) -> None:
    """Create missing tables and insert the default catalogue on an empty store."""
    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info("Database tables ready")

    if not seed:
        return

    SessionLocal = make_session_factory(engine)
    db = SessionLocal()
    try:
        if not db.query(func.count(Services.id)).scalar():
            db.add(Services(
                name="Extensão Efeito Fox",
                description="Extensão fio a fio com efeito fox eye, alongado nos cantos.",
                price=180.0,
                duration=120,
            ))
            logger.info("Seeded default service")

        if not db.query(func.count(Products.id)).scalar():
            db.add(Products(
                name="Fios de Seda 0.15 C",
                category="fios",
                quantity=10,
                min_stock=3,
            ))
            logger.info("Seeded default product")

        db.commit()
    finally:
        db.close()


# FastAPI dependency
def get_db(request: Request):
    db: Session = request.app.state.SessionLocal()
    try:
        yield db
    finally:
        db.close()
