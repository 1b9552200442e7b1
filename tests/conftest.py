"""
Shared fixtures: an in-memory SQLite database (StaticPool, so every session
sees the same connection) swapped in for the configured one through
``app.dependency_overrides``.
"""
import os

# before shop_api is imported, so the module-level engine never targets Postgres
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import shop_api.data.models  # noqa: F401
from shop_api.data.database import Base, get_db
from shop_api.main import create_app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def test_client(session_factory) -> TestClient:
    app = create_app()

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # no context manager: the lifespan (create_all on the real engine) is not run
    return TestClient(app)


@pytest.fixture
def category(test_client: TestClient) -> dict:
    response = test_client.post("/categories", json={"name": "Mobiles"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def product_payload(category) -> dict:
    return {
        "title": "iPhone 15",
        "description": "Apple smartphone",
        "price": 999.0,
        "imageUrl": "https://img.example.com/iphone.png",
        "categoryName": "mobiles",
    }


@pytest.fixture
def product(test_client: TestClient, product_payload) -> dict:
    response = test_client.post("/products", json=product_payload)
    assert response.status_code == 201
    return response.json()
