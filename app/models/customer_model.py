from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from .base import Base

class Customer(Base):
    __tablename__ = "clientes"

    id = Column(Integer, primary_key=True, index=True)
    rut = Column(String, unique=True, index=True, nullable=False)

    emails = relationship("Email", back_populates="customer", cascade="all, delete-orphan")
    # Orden de inserción: la validación toma la primera coincidencia
    codes = relationship(
        "VerificationCode",
        back_populates="customer",
        order_by="VerificationCode.id",
        cascade="all, delete-orphan",
    )
