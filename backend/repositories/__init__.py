from .books import BooksRepository, normalize_id

__all__ = ["BooksRepository", "normalize_id"]
