"""Pytest fixtures for the user-exists service tests."""

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_existence_checker
from app.core.exceptions import AccountNotFoundError, ServiceError
from app.main import app
from app.schemas.users import AccountRecord
from app.services.existence_checker import ExistenceChecker


class FakeDirectory:
    """In-memory identity directory that records every lookup."""

    def __init__(self, accounts=None, error=None):
        self.accounts = dict(accounts or {})
        self.error = error
        self.calls = []

    def get_user_by_email(self, email):
        self.calls.append(email)
        if self.error is not None:
            raise self.error
        if email not in self.accounts:
            raise AccountNotFoundError("No user record found for the provided email")
        return self.accounts[email]


@pytest.fixture
def directory():
    return FakeDirectory(
        accounts={
            "a@b.com": AccountRecord(uid="123"),
            "jane@example.com": AccountRecord(
                uid="uid-jane",
                display_name="Jane Doe",
                photo_url="https://example.com/jane.png",
            ),
        }
    )


@pytest.fixture
def failing_directory():
    return FakeDirectory(error=ServiceError("User pool us-east-1_x does not exist."))


@pytest.fixture
def checker(directory):
    return ExistenceChecker(directory)


@pytest.fixture
def test_client(directory):
    """TestClient wired to the fake directory."""
    app.dependency_overrides[get_existence_checker] = lambda: ExistenceChecker(directory)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_directory():
    """Factory for one-off fake directories."""
    return FakeDirectory
