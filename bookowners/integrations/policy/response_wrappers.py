from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from bookowners.integrations.contracts.interfaces import Book, Owner


class IntegrationResponseError(ValueError):
    def __init__(self, message: str, *, payload: Any = None) -> None:
        super().__init__(message)
        self.payload = payload


def normalize_book_owners_response(raw: Any) -> List[Owner]:
    """Turn a decoded ``/api/v1/bookowners`` body into ``Owner`` models.

    A null body means "no owners". Null entries are dropped and missing
    fields take their defaults (empty name or type, age 0). Anything that
    is not an array of owner objects raises ``IntegrationResponseError``.
    """
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise IntegrationResponseError(
            f"Expected a JSON array of owners, got {type(raw).__name__}.",
            payload=raw,
        )

    owners: List[Owner] = []
    for item in raw:
        if item is None:
            continue
        owners.append(normalize_owner(item))
    return owners


def normalize_owner(raw: Any) -> Owner:
    if not isinstance(raw, dict):
        raise IntegrationResponseError(f"Owner entry must be an object; got {raw!r}.", payload=raw)

    raw_books = _first_present(raw, "books", "Books")
    books: Optional[List[Book]] = None
    if raw_books is not None:
        if not isinstance(raw_books, list):
            raise IntegrationResponseError(f"Owner books must be an array; got {raw_books!r}.", payload=raw)
        books = [_normalize_book(b) for b in raw_books if b is not None]

    return _build_model(
        Owner,
        {
            "name": _first_present(raw, "name", "Name", default=""),
            "age": _first_present(raw, "age", "Age", default=0),
            "books": books,
        },
        raw,
    )


def _normalize_book(raw: Any) -> Book:
    if not isinstance(raw, dict):
        raise IntegrationResponseError(f"Book entry must be an object; got {raw!r}.", payload=raw)
    return _build_model(
        Book,
        {
            "name": _first_present(raw, "name", "Name", default=""),
            "type": _first_present(raw, "type", "Type", default=""),
        },
        raw,
    )


def _first_present(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    # values are copied as-is; only a missing or null key falls through
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return default


def _build_model(model_type, payload: Dict[str, Any], raw: Any):
    try:
        return model_type(**payload)
    except ValidationError as exc:
        raise IntegrationResponseError(f"Response validation failed: {exc}", payload=raw) from exc
