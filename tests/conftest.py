"""Shared fixtures: an in-memory SQLite store and per-service test clients."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_customer_db, get_product_db
from models import Product


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


def _override(session_factory):
    def get_test_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()
    return get_test_db


@pytest.fixture
def customer_client(session_factory):
    from customer_app import app

    app.dependency_overrides[get_customer_db] = _override(session_factory)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def product_client(session_factory):
    from product_app import app

    app.dependency_overrides[get_product_db] = _override(session_factory)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def add_products(db):
    """Insert products with fixed ids: ``add_products({1: 5, 2: 0})``."""

    def _add(quantities):
        for product_id, quantity in quantities.items():
            db.add(Product(
                id=product_id,
                name=f"Product {product_id}",
                description=f"Description {product_id}",
                available_quantity=quantity,
                price=10.0 * product_id,
            ))
        db.commit()

    return _add


@pytest.fixture
def read_stock(session_factory):
    """Read a product's current quantity through a fresh session."""

    def _read(product_id):
        session = session_factory()
        try:
            return session.get(Product, product_id).available_quantity
        finally:
            session.close()

    return _read
