"""
Pytest configuration shared by all tests.

The environment is set up before any ``cinelog`` import so the application
binds to an in-memory SQLite database with a fixed session secret.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SESSION_SECRET"] = "test-session-secret"

import pytest
from fastapi.testclient import TestClient

from cinelog.database import crud
from cinelog.web.dependencies import get_database_manager
from cinelog.web.main import app


@pytest.fixture(autouse=True)
def db_manager():
    """Give every test an empty schema on the shared in-memory database."""
    manager = get_database_manager()
    manager.reset_database()
    yield manager


@pytest.fixture
def client():
    """Anonymous client with its own cookie jar."""
    return TestClient(app)


def register(client: TestClient, username: str = "alice", password: str = "s3cret-pass"):
    """Sign up and sign in through the HTML forms."""
    client.post("/auth/sign-up", data={"username": username, "password": password})
    response = client.post(
        "/auth/sign-in",
        data={"username": username, "password": password},
        follow_redirects=False,
    )
    assert response.status_code == 303
    return response


@pytest.fixture
def signed_in_client(client):
    """Client whose session holds the user ``alice``."""
    register(client)
    return client


@pytest.fixture
def alice_id(signed_in_client, db_manager):
    with db_manager.session_scope() as session:
        return crud.get_user_by_username(session, "alice").user_id


@pytest.fixture
def movie_id(db_manager, alice_id):
    """ID of a stored movie owned by alice."""
    with db_manager.session_scope() as session:
        movie = crud.create_movie(session, name="Heat", year=1995, rating=8.3, created_by=alice_id)
        return movie.movie_id
