"""
Transaction helpers for the verification store (SQLAlchemy)
Commit on success, rollback and re-raise on failure
"""
from sqlalchemy.orm import Session
from typing import Callable
from functools import wraps
import logging

logger = logging.getLogger(__name__)


def atomic_transaction(func: Callable) -> Callable:
    """
    Decorator that commits the session once the wrapped function returns
    and rolls it back if it raises

    Usage:
        @atomic_transaction
        def generate_code(db: Session, rut: str):
            db.add(VerificationCode(...))

    The decorated function must accept 'db: Session' as first parameter
    """
    @wraps(func)
    def wrapper(db: Session, *args, **kwargs):
        try:
            result = func(db, *args, **kwargs)
            db.commit()
            logger.debug(f"✅ Transaction committed: {func.__name__}")
            return result
        except Exception as e:
            db.rollback()
            logger.error(f"❌ Transaction rolled back: {func.__name__} - Error: {e}")
            raise

    return wrapper


class TransactionContext:
    """Commits the session when the block exits cleanly, rolls back otherwise."""

    def __init__(self, session: Session):
        self.session = session

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            self.session.rollback()
            logger.error(f"❌ Transaction rolled back due to: {exc_val}")
            return False
        self.session.commit()
        logger.info("✅ Transaction committed successfully")
        return False
