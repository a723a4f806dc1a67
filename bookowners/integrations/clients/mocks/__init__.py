from .book_owners import MockBookOwnersClient

__all__ = ["MockBookOwnersClient"]
