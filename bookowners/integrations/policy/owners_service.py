"""
Owners Service.

Groups the books returned by the book owners API into age categories:
- "Child" for owners younger than 18, "Adult" otherwise
- optionally keeps only hardcover books
- books inside each category are sorted by name

The service never catches errors from the owners source; they propagate
to the API error handler unchanged.
"""

import logging
from typing import Dict, Iterable, List, Optional

from bookowners.integrations.contracts.interfaces import (
    HARDCOVER,
    AgeCategory,
    BookDetail,
    BookOwnersSource,
    CategorizedBooks,
    CategorizedBooksProvider,
    Owner,
    age_category_for,
)

logger = logging.getLogger(__name__)


def categorize_books_by_age(owners: Optional[Iterable[Owner]], hardcover_only: bool = False) -> List[CategorizedBooks]:
    """Group every owner's books by the owner's age category.

    Categories appear in the order their first surviving book is seen, and
    a category with no surviving books is left out entirely.
    """
    groups: Dict[AgeCategory, List[BookDetail]] = {}

    for owner in owners or []:
        for book in owner.books or []:
            if hardcover_only and book.type != HARDCOVER:
                continue
            category = age_category_for(owner.age)
            groups.setdefault(category, []).append(
                BookDetail(
                    book_name=book.name,
                    book_type=book.type,
                    owner_name=owner.name,
                    age=owner.age,
                )
            )

    return [
        CategorizedBooks(age_category=category, books=sorted(details, key=lambda d: d.book_name))
        for category, details in groups.items()
    ]


class OwnersService(CategorizedBooksProvider):
    def __init__(self, client: BookOwnersSource):
        self.client = client

    async def get_books_categorized_by_age(self, hardcover_only: bool = False) -> List[CategorizedBooks]:
        owners = await self.client.get_book_owners()
        categorized = categorize_books_by_age(owners, hardcover_only)
        logger.info(
            "Categorized books for %d owners into %d categories (hardcover_only=%s)",
            len(owners or []),
            len(categorized),
            hardcover_only,
        )
        return categorized
