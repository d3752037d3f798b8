# app/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .config import Settings, load_settings
from .db import create_db_engine, init_db, seed_catalog
from .payments import GatewayError, GatewayTimeout, GatewayUnavailable, StripeGateway
from .routers.auth_routes import router as auth_router
from .routers.bookings_routes import router as bookings_router
from .routers.doctors_routes import router as doctors_router
from .routers.options_routes import router as options_router
from .routers.payments_routes import router as payments_router
from .routers.users_routes import router as users_router

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Reduce verbosity of third-party libraries
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"{request.method} {request.url.path} - storage error: {exc}")
    return JSONResponse(status_code=503, content={"detail": "Storage unavailable"})


async def gateway_error_handler(request: Request, exc: GatewayError):
    if isinstance(exc, GatewayTimeout):
        status_code = 504
    elif isinstance(exc, GatewayUnavailable):
        status_code = 503
    else:
        status_code = 502
    logger.error(f"{request.method} {request.url.path} - payment gateway error: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def create_app(
    settings: Optional[Settings] = None,
    engine: Optional[Engine] = None,
    gateway: Optional[StripeGateway] = None,
) -> FastAPI:
    settings = settings or load_settings()
    logging.getLogger().setLevel(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application starting up...")
        init_db(app.state.engine)
        if settings.seed_catalog:
            seed_catalog(app.state.engine)
        yield
        logger.info("Application shutting down...")
        app.state.gateway.close()
        app.state.engine.dispose()

    app = FastAPI(title="Dental Booking API", version="1.0.0", lifespan=lifespan)

    # application context shared by every request
    app.state.settings = settings
    app.state.engine = engine if engine is not None else create_db_engine(settings)
    app.state.gateway = gateway if gateway is not None else StripeGateway(
        settings.stripe_secret_key,
        api_base=settings.stripe_api_base,
        timeout=settings.payment_timeout_seconds,
    )

    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
    app.add_exception_handler(GatewayError, gateway_error_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def root():
        return {"message": "Dental clinic server running"}

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(options_router)
    app.include_router(bookings_router)
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(doctors_router)
    app.include_router(payments_router)

    return app

