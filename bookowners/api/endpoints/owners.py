from typing import List

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from bookowners.api.dependencies import get_owners_service
from bookowners.integrations.contracts.interfaces import CategorizedBooks, CategorizedBooksProvider

NOT_FOUND_MESSAGE = "No categorized books found"

router = APIRouter()


@router.get(
    "/booksbycategory",
    name="GetBooksCategorizedByAge",
    response_model=List[CategorizedBooks],
    responses={404: {"description": NOT_FOUND_MESSAGE, "content": {"text/plain": {}}}},
)
async def get_books_categorized_by_age(
    hardcover_only: bool = Query(default=False, alias="hardcoverOnly", description="Only include Hardcover books"),
    service: CategorizedBooksProvider = Depends(get_owners_service),
):
    """Return the owners' books grouped into Child and Adult categories."""
    categorized = await service.get_books_categorized_by_age(hardcover_only)
    if not categorized:
        return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=404)
    return categorized
