# app/db.py

import logging
from typing import Iterable, Optional

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine, select

from .config import Settings
from .data import TREATMENTS
from .models import Treatment, TreatmentSlot

logger = logging.getLogger(__name__)


def create_db_engine(settings: Settings) -> Engine:
    url = settings.database_url
    if url.startswith("sqlite"):
        connect_args = {
            "check_same_thread": False,  # required for SQLite + FastAPI
            "timeout": settings.db_timeout_seconds,
        }
        if url in ("sqlite://", "sqlite:///:memory:"):
            # one shared in-memory database for every session
            return create_engine(url, echo=False, connect_args=connect_args, poolclass=StaticPool)
        return create_engine(url, echo=False, connect_args=connect_args)

    return create_engine(
        url,
        echo=False,
        pool_pre_ping=True,
        pool_timeout=settings.db_timeout_seconds,
        connect_args={"connect_timeout": int(settings.db_timeout_seconds)},
    )


def init_db(engine: Engine) -> None:
    SQLModel.metadata.create_all(engine)
    logger.info("Database tables created")


def seed_catalog(engine: Engine, catalog: Optional[Iterable[dict]] = None) -> int:
    """Insert the treatment catalog if the store holds no treatments yet.

    Returns the number of treatments inserted (0 when the catalog already exists).
    """
    catalog = TREATMENTS if catalog is None else list(catalog)
    with Session(engine) as session:
        if session.exec(select(Treatment)).first() is not None:
            return 0

        for entry in catalog:
            session.add(Treatment(name=entry["name"], price=entry["price"]))
        session.flush()

        for entry in catalog:
            for position, label in enumerate(entry["slots"]):
                session.add(
                    TreatmentSlot(treatment_name=entry["name"], position=position, label=label)
                )
        session.commit()

    logger.info(f"Seeded {len(catalog)} treatments into the catalog")
    return len(catalog)


# Dependency: one session per request, from the app's engine
def get_session(request: Request):
    with Session(request.app.state.engine) as session:
        yield session
