"""
Ban request service.

Placeholder: requests are not stored anywhere yet. Every call answers with the
same canned request regardless of which book was named, and never looks at the
book collection.
"""
import logging
from typing import Any, Dict

from domain.models import BanRequest

logger = logging.getLogger(__name__)

BAN_REQUEST_MESSAGE = "Request for ban"

PLACEHOLDER_BAN_REQUEST = BanRequest(
    id="7d7sdststsftf7",
    book={
        "id": "d5fE_asz",
        "title": "The New Turing Omnibus",
        "author": "Alexander K. Dewdney",
        "finished": False,
    },
)


def request_ban(book_id: str) -> BanRequest:
    """Accept a ban request for `book_id`. Nothing is recorded."""
    logger.warning("Ban request for book %r accepted but not recorded (not implemented)", book_id)
    return PLACEHOLDER_BAN_REQUEST


def ban_request_envelope(request: BanRequest) -> Dict[str, Any]:
    return {
        "success": True,
        "message": BAN_REQUEST_MESSAGE,
        "request": {
            "_id": request.id,
            "bookId": dict(request.book),
        },
    }
