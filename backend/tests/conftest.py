import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from app.database import Base, get_db
from app.main import app
from app.models.user import User
from app.models.category import Category

TEST_DB_URL = "sqlite:///./test_newsroom.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


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
        "admin": User(email="admin@newsroom.local", display_name="Admin", role="admin"),
        "moderator": User(email="mod@newsroom.local", display_name="Moderator", role="moderator"),
        "moderator2": User(email="mod2@newsroom.local", display_name="Moderator2", role="moderator"),
        "writer": User(email="writer@newsroom.local", display_name="Writer", role="content"),
        "writer2": User(email="writer2@newsroom.local", display_name="Writer2", role="content"),
        "reader": User(email="reader@newsroom.local", display_name="Reader", role="user"),
        "blocked": User(email="blocked@newsroom.local", display_name="Blocked", role="content", is_blocked=True),
    }
    for u in users.values():
        db.add(u)
    db.commit()
    for u in users.values():
        db.refresh(u)
    return users


@pytest.fixture
def seed_category(db, seed_users):
    category = Category(name="정치", description="정치 뉴스", status="approved", created_by=seed_users["admin"].user_id)
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


def get_token(client, email: str) -> str:
    resp = client.post("/api/auth/login", json={"email": email})
    assert resp.status_code == 200, resp.text
    return resp.json()["access_token"]


def auth_headers(client, email: str) -> dict:
    return {"Authorization": f"Bearer {get_token(client, email)}"}
