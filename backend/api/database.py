"""
In-memory database for the API.

One BooksRepository per process, handed to route handlers through
`get_books_repo` so tests can swap it with `app.dependency_overrides`.
"""
import logging
from typing import Dict, List

from repositories import BooksRepository

logger = logging.getLogger(__name__)

# In-memory storage
books_repo = BooksRepository()

SAMPLE_BOOKS: List[Dict] = [
    {
        "title": "The New Turing Omnibus",
        "author": "Alexander K. Dewdney",
        "finished": False,
    },
]


def get_books_repo() -> BooksRepository:
    """FastAPI dependency returning the process-wide repository."""
    return books_repo


def seed_sample_books(repo: BooksRepository) -> int:
    """Add the sample books to an empty repository. Returns how many were added."""
    if len(repo):
        logger.info("Skipping sample books, repository already holds %d", len(repo))
        return 0
    for data in SAMPLE_BOOKS:
        repo.create_book(**data)
    logger.info("Seeded %d sample book(s)", len(SAMPLE_BOOKS))
    return len(SAMPLE_BOOKS)
