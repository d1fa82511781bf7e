# tests/conftest.py - Shared test fixtures
import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlmodel import Session, SQLModel

# Use SQLite for tests; each test gets its own file under tmp_path
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-for-unit-tests-only-min-32-chars"
os.environ["OPENAI_API_KEY"] = "sk-test-key"

from tasklist.core.limiter import limiter, user_limiter
from tasklist.main import app
from tasklist.models.user import User
from tasklist.services.assistant import AssistantConfig, build_task_assistant
from tasklist.services.database_service import build_engine, get_session
from tasklist.utils.auth import create_access_token


@pytest.fixture
def db_engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    with Session(db_engine) as session:
        yield session


@pytest.fixture(autouse=True)
def reset_rate_limits():
    limiter.reset()
    user_limiter.reset()
    yield


@pytest.fixture
def assistant():
    return build_task_assistant(AssistantConfig(provider="openai", model="gpt-4o-mini", api_key="sk-test-key"))


@pytest_asyncio.fixture
async def client(db_engine, assistant):
    """HTTP test client with overridden DB dependency"""

    def override_get_session():
        with Session(db_engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    app.state.assistant = assistant
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def _make_user(session: Session, email: str, name: str) -> User:
    user = User(email=email, name=name, hashed_password=User.hash_password("TestPassword123!"))
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def test_user(db_session):
    return _make_user(db_session, "alice@example.com", "Alice")


@pytest.fixture
def other_user(db_session):
    return _make_user(db_session, "bob@example.com", "Bob")


def get_auth_headers(user: User) -> dict:
    """Generate auth headers for a user"""
    token = create_access_token(str(user.id))
    return {"Authorization": f"Bearer {token.access_token}"}
