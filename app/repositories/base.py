import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.errors import StoreFailureError

logger = logging.getLogger(__name__)

LIKE_ESCAPE = "\\"


@contextmanager
def store_operation(db: Session, action: str):
    """
    Runs a block of database work.
    Any SQLAlchemy error rolls the session back and surfaces as StoreFailureError.
    """
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Store error while trying to {action}: {e}")
        raise StoreFailureError(f"Failed to {action}", cause=e) from e


def contains_pattern(text: str) -> str:
    """LIKE pattern matching ``text`` literally anywhere; use with escape=LIKE_ESCAPE"""
    escaped = text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2).replace("%", LIKE_ESCAPE + "%").replace("_", LIKE_ESCAPE + "_")
    return f"%{escaped}%"


class BaseRepository:
    def __init__(self, db: Session):
        self.db = db
