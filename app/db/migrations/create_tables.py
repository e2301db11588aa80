import logging
from app.models.base import Base
from app.models.customer_model import Customer  # noqa: F401
from app.models.email_model import Email  # noqa: F401
from app.models.verification_code import VerificationCode  # noqa: F401

logger = logging.getLogger(__name__)


def create_tables(bind):
    Base.metadata.create_all(bind=bind)
    logger.info("Tablas creadas correctamente.")


if __name__ == "__main__":
    from app.db.session import engine

    logging.basicConfig(level=logging.INFO)
    create_tables(engine)
