# File location: src/labportal/db/session.py
import logging
from typing import Iterator

from sqlmodel import Session, SQLModel, create_engine

from ..config.settings import DATABASE_URL

logger = logging.getLogger(__name__)

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, connect_args=connect_args)


def create_db_and_tables(bind=None):
    # Importing the package registers every table on SQLModel.metadata
    from .. import models  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)
    logger.info("Database tables ready")


def get_db() -> Iterator[Session]:
    with Session(engine) as session:
        yield session
