"""
Carga el cliente de demostración 12345678-9 con dos correos y un código vigente.
"""
import logging
from datetime import datetime, timezone
from sqlalchemy.orm import Session
from app.db.transactions import TransactionContext
from app.models.customer_model import Customer
from app.models.email_model import Email
from app.models.verification_code import VerificationCode
from app.services.validation_service import CODE_TTL

logger = logging.getLogger(__name__)

SEED_RUT = "12345678-9"
SEED_EMAILS = ["francisco.pinto@parquedelrecuerdo.cl", "fpintov1@gmail.com"]
SEED_CODE = "123456"


def seed(db: Session, now: datetime | None = None) -> Customer:
    customer = db.query(Customer).filter_by(rut=SEED_RUT).first()
    if customer:
        logger.info(f"Cliente {SEED_RUT} ya existe, no se modifica.")
        return customer

    now = now or datetime.now(timezone.utc)
    with TransactionContext(db) as tx:
        customer = Customer(
            rut=SEED_RUT,
            emails=[Email(address=address) for address in SEED_EMAILS],
            codes=[VerificationCode(code=SEED_CODE, expires_at=now + CODE_TTL)],
        )
        tx.session.add(customer)
    db.refresh(customer)
    logger.info(f"Cliente creado: {customer.rut} (id={customer.id})")
    return customer


if __name__ == "__main__":
    from app.db.migrations.create_tables import create_tables
    from app.db.session import SessionLocal, engine

    logging.basicConfig(level=logging.INFO)
    create_tables(engine)
    db = SessionLocal()
    try:
        seed(db)
    finally:
        db.close()
        engine.dispose()
