"""
Integrations layer.
This package contains all code used to communicate with the upstream book owners API
and to turn its data into the categorized responses served by our API.

Key rule:
- API endpoints MUST NOT call the upstream API directly.
- Endpoints go through the OwnersService, which calls a BookOwnersSource client.
- We use the MOCK client during development and swap to the REAL_HTTP client when the upstream URL is configured.

Switching implementations:
- The selection of mock vs real clients happens in ONE place (bookowners/api/dependencies.py).
"""

from .contracts.interfaces import (
    AgeCategory,
    Book,
    BookDetail,
    BookOwnersSource,
    CategorizedBooks,
    CategorizedBooksProvider,
    Owner,
    age_category_for,
)
from .policy.owners_service import OwnersService, categorize_books_by_age
from .policy.response_wrappers import IntegrationResponseError, normalize_book_owners_response

__all__ = [
    # contracts
    "AgeCategory", "Book", "BookDetail", "BookOwnersSource", "CategorizedBooks",
    "CategorizedBooksProvider", "Owner", "age_category_for",
    # policy
    "OwnersService", "categorize_books_by_age",
    "IntegrationResponseError", "normalize_book_owners_response",
]
