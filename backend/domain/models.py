"""
Core domain models for the book shelf.
These are framework-agnostic and can be used across all services.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union


BookId = Union[int, str]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Book:
    """
    A book on the shelf.

    `title` and `author` may be missing; nothing is validated on create.
    `created_at` is set once and survives every update.
    """
    id: BookId
    title: Optional[str] = None
    author: Optional[str] = None
    finished: Optional[bool] = False
    created_at: datetime = field(default_factory=utcnow)


@dataclass
class BanRequest:
    """A request to ban a book. Only the placeholder instance exists today."""
    id: str
    book: Dict[str, Any] = field(default_factory=dict)
