"""
Book repository backed by an in-memory list.

The collection lives only as long as the repository instance; nothing is
written to disk.
"""
import logging
import re
import threading
from dataclasses import replace
from typing import Any, Dict, List, Optional

from domain.models import Book, BookId, utcnow

logger = logging.getLogger(__name__)

_INT_ID = re.compile(r"^[+-]?[0-9]+$")

# Fields a client may change on update. id and created_at are fixed.
UPDATABLE_FIELDS = ("title", "author", "finished")


def normalize_id(value: Any) -> BookId:
    """Canonical form used to compare ids: integer-looking values become int."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if _INT_ID.match(text):
        try:
            return int(text)
        except ValueError:
            # Longer than the interpreter allows for int(); cannot match a stored id.
            return text
    return text


class BooksRepository:
    """CRUD operations for books."""

    def __init__(self) -> None:
        self._books: List[Book] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._books)

    def _index_of(self, book_id: Any) -> Optional[int]:
        wanted = normalize_id(book_id)
        for index, book in enumerate(self._books):
            if normalize_id(book.id) == wanted:
                return index
        return None

    def list_books(self) -> List[Book]:
        with self._lock:
            return list(self._books)

    def get_book(self, book_id: Any) -> Optional[Book]:
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                logger.debug("Book %r not found", book_id)
                return None
            return self._books[index]

    def create_book(
        self,
        title: Optional[str] = None,
        author: Optional[str] = None,
        finished: Optional[bool] = False,
    ) -> Book:
        with self._lock:
            book = Book(
                id=self._next_id,
                title=title,
                author=author,
                finished=finished,
                created_at=utcnow(),
            )
            self._next_id += 1
            self._books.append(book)
        logger.info("Created book %s (%r by %r)", book.id, book.title, book.author)
        return book

    def update_book(self, book_id: Any, changes: Dict[str, Any]) -> Optional[Book]:
        """
        Replace the matching book with a copy carrying `changes`.

        Only keys in UPDATABLE_FIELDS are applied; anything else (including
        id and created_at) is ignored. Returns None when no book matches.
        """
        updates = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                logger.debug("Book %r not found for update", book_id)
                return None
            updated = replace(self._books[index], **updates)
            self._books[index] = updated
        logger.info("Updated book %s fields=%s", updated.id, sorted(updates))
        return updated

    def delete_book(self, book_id: Any) -> bool:
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                logger.debug("Book %r not found for delete", book_id)
                return False
            removed = self._books.pop(index)
        logger.info("Deleted book %s", removed.id)
        return True
