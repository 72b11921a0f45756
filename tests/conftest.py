import os
import sys
import uuid
from pathlib import Path

# Ajoute la racine du projet au PYTHONPATH EN PREMIER
sys.path.insert(0, str(Path(__file__).parent.parent))

# SQLite pour les tests, AVANT d'importer nav (l'engine est créé à l'import)
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

import pytest
from fastapi.testclient import TestClient

from nav.core.database import Base, SessionLocal, engine, get_db
from nav.core.security import create_access_token
from nav.main import app
from nav.models.user import User, UserStatus

TestingSessionLocal = SessionLocal

def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

# Override la dépendance
app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_teardown():
    """Crée et nettoie la DB avant/après chaque test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """Client de test FastAPI (sans lifespan: pas d'admin créé automatiquement)"""
    return TestClient(app)


@pytest.fixture
def db():
    """Session DB pour les tests"""
    db = TestingSessionLocal()
    yield db
    db.close()


@pytest.fixture
def make_user():
    """
    Fabrique d'users créés DIRECTEMENT en BD.

    ATTENTION: les tables sont recréées à chaque test, le 1er user créé
    a donc l'id 1 = super admin.
    """
    def _make_user(username=None, password="password123", status=UserStatus.ACTIVE):
        db = TestingSessionLocal()
        user = User(username=username or f"user{uuid.uuid4().hex[:8]}", status=status)
        user.set_password(password)
        db.add(user)
        db.commit()
        db.refresh(user)
        db.close()
        return user
    return _make_user


@pytest.fixture
def headers_for():
    """Header Authorization pour un user donné"""
    def _headers_for(user):
        token = create_access_token(user.id, user.username)
        return {"Authorization": f"Bearer {token}"}
    return _headers_for


@pytest.fixture
def admin(make_user):
    return make_user("admin", "admin123")


@pytest.fixture
def user(admin, make_user):
    """User standard (pas super admin)"""
    return make_user("alice", "alicepass")


@pytest.fixture
def auth_headers(user, headers_for):
    return headers_for(user)
