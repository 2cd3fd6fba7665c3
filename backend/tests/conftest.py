import sys
from pathlib import Path

import pytest

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))


@pytest.fixture
def repo():
    from repositories import BooksRepository

    return BooksRepository()


@pytest.fixture
def client(repo):
    """TestClient over the books router, backed by a fresh repository."""
    from fastapi import FastAPI
    from fastapi.testclient import TestClient

    from api.database import get_books_repo
    from api.routes import books as books_router

    app = FastAPI()
    app.include_router(books_router.router, prefix="/books")
    app.dependency_overrides[get_books_repo] = lambda: repo
    return TestClient(app)
