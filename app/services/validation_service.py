"""
Verification engine: issues 6-digit codes to known customers and checks
submitted codes for correctness and expiry
"""
import secrets
import logging
from datetime import datetime, timedelta, timezone
from sqlalchemy.orm import Session, joinedload
from app.models.customer_model import Customer
from app.models.email_model import Email  # noqa: F401  (registra el mapeo de Customer.emails)
from app.models.verification_code import VerificationCode
from app.schemas.validation_scheme import (
    CodeValidation,
    CustomerNotFound,
    GeneratedCode,
    ValidationStatus,
)
from app.db.transactions import atomic_transaction

logger = logging.getLogger(__name__)

CODE_MIN = 100000
CODE_MAX = 999999
CODE_TTL = timedelta(minutes=5)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # SQLite devuelve fechas sin zona horaria; se guardan siempre en UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _customer_not_found(rut: str) -> CustomerNotFound:
    logger.warning(f"⚠️  Cliente no encontrado: {rut}")
    return CustomerNotFound(rut=rut, message=f"Cliente con Rut: {rut} no encontrado.")


def new_code() -> str:
    """Uniform sample from [CODE_MIN, CODE_MAX]; never has a leading zero."""
    return str(CODE_MIN + secrets.randbelow(CODE_MAX - CODE_MIN + 1))


@atomic_transaction
def generate_code(db: Session, rut: str, now: datetime | None = None) -> GeneratedCode | CustomerNotFound:
    """
    Issue a new verification code for the customer identified by rut

    Previous codes of the customer are kept and stay valid until their own
    expiry.

    Args:
        db: Database session
        rut: Customer national ID
        now: Generation time, defaults to the current UTC time

    Returns:
        GeneratedCode with the code and its expiry, or CustomerNotFound
    """
    customer = db.query(Customer).filter_by(rut=rut).first()
    if not customer:
        return _customer_not_found(rut)

    issued_at = _as_utc(now) if now else _utcnow()
    code = new_code()
    expires_at = issued_at + CODE_TTL

    db.add(VerificationCode(customer_id=customer.id, code=code, expires_at=expires_at))
    # Commit handled by decorator

    logger.info(f"✅ Código generado para {rut}, expira {expires_at.isoformat()}")
    return GeneratedCode(code=code, expires_at=expires_at)


def validate_code(db: Session, rut: str, code: str, now: datetime | None = None) -> CodeValidation | CustomerNotFound:
    """
    Check a submitted code against every code stored for the customer

    Read-only: a valid code is not consumed. The first stored code equal to
    the submitted one decides the outcome.

    Args:
        db: Database session
        rut: Customer national ID
        code: Submitted code
        now: Validation time, defaults to the current UTC time

    Returns:
        CodeValidation (valid, incorrect or expired), or CustomerNotFound
    """
    customer = (
        db.query(Customer)
        .options(joinedload(Customer.codes))
        .filter_by(rut=rut)
        .first()
    )
    if not customer:
        return _customer_not_found(rut)

    match = next((stored for stored in customer.codes if stored.code == code), None)

    if match is None:
        logger.warning(f"⚠️  Código incorrecto para {rut}")
        return CodeValidation(
            status=ValidationStatus.INCORRECT,
            valid=False,
            message=f"Código: {code} es incorrecto.",
        )

    checked_at = _as_utc(now) if now else _utcnow()
    if _as_utc(match.expires_at) < checked_at:
        logger.warning(f"⚠️  Código expirado para {rut}")
        return CodeValidation(
            status=ValidationStatus.EXPIRED,
            valid=False,
            message=f"Código: {code} ya expiró.",
        )

    logger.info(f"✅ Código válido para {rut}")
    return CodeValidation(
        status=ValidationStatus.VALID,
        valid=True,
        message=f"Código: {code} es válido y aun no ha expirado.",
    )
