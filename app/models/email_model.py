from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base

class Email(Base):
    __tablename__ = "correos"

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("clientes.id"), index=True, nullable=False)
    address = Column(String, nullable=False)

    customer = relationship("Customer", back_populates="emails")
