import os

# must be set before anything under ecommerce is imported: settings and the engine load at import time
os.environ["DATABASE_URI"] = "sqlite+pysqlite:///:memory:"
os.environ["PASSWORD_ITERATIONS"] = "1000"
os.environ["JWT_SECRET"] = "tests-secret-key"
os.environ["APP_PREFIX"] = "/ecommerce"
os.environ["DB_AUTO_CREATE"] = "false"
os.environ["DEBUG"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from sqlalchemy.orm import Session

from ecommerce.api.dependencies import build_user_service
from ecommerce.entities.role import Role
from ecommerce.infrastructure.database.base_model import BaseModel
from ecommerce.infrastructure.database.models.user_model import UserModel
from ecommerce.infrastructure.database.session import db_session, engine, init_db
from ecommerce.infrastructure.security.password_hasher import PasswordHasher
from ecommerce.main import create_app

API = "/ecommerce/api"
PASSWORD = "super-secret-password"


@pytest.fixture(autouse=True)
def _schema():
    init_db()
    yield
    BaseModel.metadata.drop_all(engine)


@pytest.fixture
def session():
    session = Session(bind=engine, autoflush=False, expire_on_commit=False)
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def hasher():
    return PasswordHasher(iterations=1000)


@pytest.fixture
def user_service(session):
    return build_user_service(session)


@pytest.fixture
def make_user(session, hasher):
    counter = {"n": 0}

    def _make(email: str, *, password: str = PASSWORD, role: Role = Role.USER, name: str | None = None) -> UserModel:
        counter["n"] += 1
        user = UserModel(email=email, name=name or f"user_seed{counter['n']:04d}", role=role)
        hasher.apply_to(user, password)
        session.add(user)
        session.flush()
        return user

    return _make


@pytest.fixture
def app():
    app = create_app()
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seed_user(hasher):
    """Commit a user outside any request so the app's own sessions can see it."""

    def _seed(email: str, *, password: str = PASSWORD, role: Role = Role.USER, name: str | None = None) -> str:
        with db_session() as s:
            user = UserModel(email=email, name=name or f"seed_{email.split('@')[0]}", role=role)
            hasher.apply_to(user, password)
            s.add(user)
            s.flush()
            return str(user.id)

    return _seed


@pytest.fixture
def login(client):
    def _login(email: str, password: str = PASSWORD) -> dict:
        response = client.post(f"{API}/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.get_json()
        token = response.get_json()["result"]["accessToken"]
        return {"Authorization": f"Bearer {token}"}

    return _login
