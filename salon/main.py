# salon/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from redis import Redis
from sqlalchemy import text

from . import __version__
from .config import Settings, get_settings
from .database import create_db_engine, init_db, make_session_factory
from .errors import register_exception_handlers
from .routers import (
    appointments,
    auth,
    clients,
    online_appointments,
    products,
    reveal,
    reviews,
    sales,
    services,
    slots,
    stats,
)
from .services.clock import BusinessClock
from .services.sessions import (
    MemorySessionStore,
    RedisSessionStore,
    RevealGate,
    SessionStore,
)

logger = logging.getLogger(__name__)


def build_gate(
    settings: Settings,
    clock: BusinessClock,
    sessions: SessionStore | None = None,
    grants: SessionStore | None = None,
) -> RevealGate:
    """Session and reveal stores live in Redis when REDIS_URL is set, in memory otherwise."""
    if sessions is None or grants is None:
        if settings.redis_url:
            redis = Redis.from_url(settings.redis_url, decode_responses=True)
            sessions = sessions or RedisSessionStore(
                redis, "salon:session", settings.session_ttl_seconds, clock.timestamp
            )
            grants = grants or RedisSessionStore(
                redis, "salon:reveal", settings.reveal_ttl_seconds, clock.timestamp
            )
            logger.info("Session store: redis")
        else:
            sessions = sessions or MemorySessionStore(settings.session_ttl_seconds, clock.timestamp)
            grants = grants or MemorySessionStore(settings.reveal_ttl_seconds, clock.timestamp)
            logger.info("Session store: memory")

    return RevealGate(
        admin_password=settings.admin_password,
        reveal_password=settings.reveal_password,
        sessions=sessions,
        grants=grants,
    )


def create_app(
    settings: Settings | None = None,
    engine=None,
    clock: BusinessClock | None = None,
    gate: RevealGate | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    owns_engine = engine is None
    engine = engine or create_db_engine(settings)
    clock = clock or BusinessClock(settings.business_utc_offset_hours)
    gate = gate or build_gate(settings, clock)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application starting up...")
        init_db(engine, seed=settings.seed_defaults)
        yield
        logger.info("Application shutting down...")
        if owns_engine:
            engine.dispose()

    app = FastAPI(title="Salon Booking API", version=__version__, lifespan=lifespan)

    app.state.settings = settings
    app.state.engine = engine
    app.state.SessionLocal = make_session_factory(engine)
    app.state.clock = clock
    app.state.gate = gate

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    for module in (
        auth,
        reveal,
        services,
        slots,
        online_appointments,
        clients,
        appointments,
        sales,
        products,
        stats,
        reviews,
    ):
        app.include_router(module.router)
        admin_router = getattr(module, "admin_router", None)
        if admin_router is not None:
            app.include_router(admin_router)

    @app.get("/health")
    def health(request: Request):
        with request.app.state.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"database": True}

    return app
