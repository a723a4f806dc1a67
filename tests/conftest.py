"""Pytest fixtures for the owners service, clients and API tests."""

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from bookowners.api.main import app
from bookowners.integrations.contracts.interfaces import CategorizedBooks, CategorizedBooksProvider
from bookowners.integrations.policy.response_wrappers import normalize_book_owners_response


class StubOwnersService(CategorizedBooksProvider):
    """Returns a canned result (or raises) and records every call."""

    def __init__(self, result: Optional[List[CategorizedBooks]] = None, error: Optional[Exception] = None):
        self.result = result
        self.error = error
        self.calls: List[bool] = []

    async def get_books_categorized_by_age(self, hardcover_only: bool = False):
        self.calls.append(hardcover_only)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def owners_payload():
    """Raw upstream payload mixing children, adults, formats and a bookless owner."""
    return [
        {
            "name": "Jane",
            "age": 23,
            "books": [
                {"name": "Hamlet", "type": "Hardcover"},
                {"name": "Wuthering Heights", "type": "Paperback"},
            ],
        },
        {"name": "Charlotte", "age": 14, "books": [{"name": "Hamlet", "type": "Paperback"}]},
        {
            "name": "Max",
            "age": 25,
            "books": [
                {"name": "React: The Ultimate Guide", "type": "Hardcover"},
                {"name": "Gulliver's Travels", "type": "Hardcover"},
                {"name": "Jane Eyre", "type": "Paperback"},
                {"name": "Great Expectations", "type": "Hardcover"},
            ],
        },
        {"name": "William", "age": 15, "books": [{"name": "Great Expectations", "type": "Hardcover"}]},
        {
            "name": "Charles",
            "age": 17,
            "books": [
                {"name": "Little Red Riding Hood", "type": "Hardcover"},
                {"name": "The Hobbit", "type": "Ebook"},
            ],
        },
        {"name": "Bob", "age": 30, "books": None},
    ]


@pytest.fixture
def owners(owners_payload):
    return normalize_book_owners_response(owners_payload)


@pytest.fixture
def stub_service():
    return StubOwnersService


@pytest.fixture
def api_client():
    app.dependency_overrides.clear()
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
    app.dependency_overrides.clear()
