import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from werkzeug.security import generate_password_hash
from artline.database import Base, get_db
from artline.main import app
from artline.models.user import User
from artline.services import translation_service

TEST_DB_URL = "sqlite:///./test_artline.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

PASSWORDS = {
    "admin": "admin-pass",
    "editor": "editor-pass",
}


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


def uppercase_translator(text: str, source_lang: str, target_lang: str) -> str:
    return text.upper()


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def fake_translator():
    # the real translator calls the LLM provider; tests swap in a deterministic one
    app.dependency_overrides[translation_service.get_translator] = lambda: uppercase_translator
    yield
    app.dependency_overrides.pop(translation_service.get_translator, None)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seed_users(db):
    users = {
        "admin": User(
            username="admin",
            password_hash=generate_password_hash(PASSWORDS["admin"]),
            name="Administrator",
            is_admin=True,
        ),
        "editor": User(
            username="editor",
            password_hash=generate_password_hash(PASSWORDS["editor"]),
            name="Editor",
            is_admin=False,
        ),
    }
    for u in users.values():
        db.add(u)
    db.commit()
    for u in users.values():
        db.refresh(u)
    return users


def use_translator(translator):
    app.dependency_overrides[translation_service.get_translator] = lambda: translator


def get_token(client, username: str) -> str:
    resp = client.post("/api/auth/login", json={"username": username, "password": PASSWORDS[username]})
    assert resp.status_code == 200, resp.text
    return resp.json()["accessToken"]


def auth_headers(client, username: str = "admin") -> dict:
    return {"Authorization": f"Bearer {get_token(client, username)}"}
