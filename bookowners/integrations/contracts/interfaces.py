from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


HARDCOVER = "Hardcover"
ADULT_AGE = 18


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class AgeCategory(str, Enum):
    CHILD = "Child"
    ADULT = "Adult"


def age_category_for(age: int) -> AgeCategory:
    """Owners under 18 are children, everyone else is an adult."""
    return AgeCategory.CHILD if age < ADULT_AGE else AgeCategory.ADULT


# ---------------------------------------------------------------------------
# Upstream data models
# ---------------------------------------------------------------------------

class Book(BaseModel):
    name: str
    type: str


class Owner(BaseModel):
    name: str
    age: int
    books: Optional[List[Book]] = None   # upstream may omit or null it


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class BookDetail(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    book_name: str = Field(alias="bookName")
    book_type: str = Field(alias="bookType")
    owner_name: str = Field(alias="ownerName")
    age: int


class CategorizedBooks(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    age_category: AgeCategory = Field(alias="ageCategory")
    books: List[BookDetail] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Abstract interfaces
# ---------------------------------------------------------------------------

class BookOwnersSource(ABC):
    """Every book owners client (real or mock) must implement this interface."""

    @abstractmethod
    async def get_book_owners(self) -> List[Owner]:
        """Return all owners known to the source; never ``None``."""


class CategorizedBooksProvider(ABC):
    """Service seam used by the API layer."""

    @abstractmethod
    async def get_books_categorized_by_age(self, hardcover_only: bool = False) -> List[CategorizedBooks]:
        """Fetch owners and group their books by age category."""
