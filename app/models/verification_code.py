from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base

class VerificationCode(Base):
    __tablename__ = "codigos_validacion"

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("clientes.id"), index=True, nullable=False)
    code = Column(String(6), nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)

    customer = relationship("Customer", back_populates="codes")

    def __repr__(self):
        return f"<VerificationCode(customer_id={self.customer_id}, code={self.code}, expires_at={self.expires_at})>"
