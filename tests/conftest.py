import pytest
from fastapi.testclient import TestClient
from app.core.db import Database
from main import create_app


@pytest.fixture
def database():
    # Отдельная in-memory база на каждый тест
    database = Database("sqlite://")
    yield database
    database.dispose()


@pytest.fixture
def client(database):
    with TestClient(create_app(database)) as test_client:
        yield test_client


@pytest.fixture
def db_session(database):
    database.create_tables()
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def no_storage(monkeypatch):
    """Любое обращение к шлюзу валит тест"""
    from app.services import gateway

    def fail(*args, **kwargs):
        pytest.fail("запрос не должен доходить до базы данных")

    for name in ("create_user", "create_group", "update_user_marks", "delete_user"):
        monkeypatch.setattr(gateway, name, fail)


@pytest.fixture
def lenient_client(database):
    """Клиент, который отдаёт ответы 500 вместо проброса исключения в тест"""
    with TestClient(create_app(database), raise_server_exceptions=False) as test_client:
        yield test_client
