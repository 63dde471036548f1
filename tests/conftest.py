"""Shared fixtures: in-memory store, service and an ASGI client over the app."""

from typing import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from jobspark.core.security import create_access_token
from jobspark.main import create_app
from jobspark.repositories.memory import InMemoryUserRepository
from jobspark.services.user_service import UserService


@pytest.fixture
def repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def service(repository: InMemoryUserRepository) -> UserService:
    return UserService(repository)


@pytest.fixture
def app(repository: InMemoryUserRepository):
    return create_app(user_repository=repository)


@pytest_asyncio.fixture
async def client(app) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers() -> dict:
    token = create_access_token({"email": "ada@x.com"})
    return {"Cookie": f"token={token}"}


@pytest.fixture
def full_profile() -> dict:
    return {
        "headline": "Engineer",
        "bio": "Builds things",
        "location": "London",
        "skills": ["Go", "Python"],
        "experience": [{"company": "Acme", "title": "Developer"}],
        "education": [{"school": "UCL", "degree": "BSc"}],
        "jobPreferences": {
            "jobTypes": ["Full-Time"],
            "locations": ["Remote"],
            "salary": {"min": 50000, "max": 90000},
            "remote": True,
        },
        "careerInfo": {"goal": "Staff engineer"},
        "projects": [{"title": "Analytical Engine"}],
    }
