# ecommerce/infrastructure/database/session.py

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ecommerce.config.settings import settings
from ecommerce.infrastructure.database.base_model import BaseModel

logger = logging.getLogger(__name__)


def _build_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        # one shared connection so an in-memory database survives across sessions
        return create_engine(
            url,
            echo=settings.debug,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url, echo=settings.debug, pool_pre_ping=True)


engine = _build_engine(settings.database_url)

_SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    expire_on_commit=False,
)


def init_db() -> None:
    import ecommerce.infrastructure.database.models  # noqa: F401

    BaseModel.metadata.create_all(engine)
    logger.info("database schema ensured on %s", engine.url.render_as_string(hide_password=True))


@contextmanager
def db_session() -> Iterator[Session]:
    session: Session = _SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
