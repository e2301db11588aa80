import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.migrations.create_tables import create_tables
from app.models.customer_model import Customer


@pytest.fixture
def engine():
    # Base en memoria compartida por todas las sesiones del test
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def customer(db):
    customer = Customer(rut="12345678-9")
    db.add(customer)
    db.commit()
    db.refresh(customer)
    return customer
