"""
Books API routes.
"""
from datetime import datetime
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, ConfigDict, Field

from api.database import get_books_repo
from domain.models import Book
from repositories import BooksRepository
from services.ban_requests import ban_request_envelope, request_ban

router = APIRouter()

LIST_MESSAGE = "Books has been found."

SAMPLE_BOOK = {
    "id": "d5fE_asz",
    "title": "The New Turing Omnibus",
    "author": "Alexander K. Dewdney",
    "finished": False,
    "createdAt": "2020-03-10T04:05:06.157Z",
}

NOT_FOUND = {404: {"description": "The book was not found"}}


class BookCreate(BaseModel):
    title: Optional[str] = None
    author: Optional[str] = None
    finished: Optional[bool] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": SAMPLE_BOOK["title"],
                "author": SAMPLE_BOOK["author"],
                "finished": False,
            }
        }
    )


class BookUpdate(BookCreate):
    """Only fields present in the request body are applied."""


class BookResponse(BaseModel):
    id: Union[int, str] = Field(description="The auto-generated id of the book")
    title: Optional[str] = Field(default=None, description="The title of your book")
    author: Optional[str] = Field(default=None, description="The book author")
    finished: Optional[bool] = Field(
        default=False, description="Whether you have finished reading the book"
    )
    created_at: datetime = Field(alias="createdAt", description="The date the book was added")

    model_config = ConfigDict(populate_by_name=True, json_schema_extra={"example": SAMPLE_BOOK})


class BookListResponse(BaseModel):
    success: bool
    message: str
    books: List[BookResponse]


class BanRequestBook(BaseModel):
    id: Union[int, str]
    title: Optional[str] = None
    author: Optional[str] = None
    finished: Optional[bool] = None


class BanRequestDetail(BaseModel):
    id: str = Field(alias="_id")
    book: BanRequestBook = Field(alias="bookId")

    model_config = ConfigDict(populate_by_name=True)


class BanRequestResponse(BaseModel):
    success: bool
    message: str
    request: BanRequestDetail


def book_to_response(book: Book) -> BookResponse:
    """Convert domain Book to API response."""
    return BookResponse(
        id=book.id,
        title=book.title,
        author=book.author,
        finished=book.finished,
        created_at=book.created_at,
    )


@router.get(
    "",
    response_model=BookListResponse,
    summary="Lists all the books",
    responses={200: {"description": "The list of the books"}},
)
async def list_books(repo: BooksRepository = Depends(get_books_repo)):
    """List all books in insertion order."""
    books = repo.list_books()
    return BookListResponse(
        success=True,
        message=LIST_MESSAGE,
        books=[book_to_response(b) for b in books],
    )


@router.post(
    "",
    response_model=BookResponse,
    status_code=201,
    summary="Create a new book",
    responses={201: {"description": "The created book."}},
)
async def create_book(
    data: Optional[BookCreate] = None,
    repo: BooksRepository = Depends(get_books_repo),
):
    """Create a new book. Missing fields take their defaults; explicit nulls are kept."""
    fields = data.model_dump(exclude_unset=True) if data else {}
    book = repo.create_book(**fields)
    return book_to_response(book)


@router.post(
    "/requestban/{book_id}",
    response_model=BanRequestResponse,
    summary="Request to ban a book",
    responses={200: {"description": "Request for book ban successful"}},
)
async def request_book_ban(book_id: str):
    """
    Request that a book be banned.

    Not implemented yet: always answers with the same canned request and
    does not look the book up.
    """
    return ban_request_envelope(request_ban(book_id))


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get the book by id",
    responses={200: {"description": "The book response by id"}, **NOT_FOUND},
)
async def get_book(book_id: str, repo: BooksRepository = Depends(get_books_repo)):
    book = repo.get_book(book_id)
    if not book:
        return Response(status_code=404)
    return book_to_response(book)


@router.put(
    "/{book_id}",
    status_code=204,
    response_class=Response,
    summary="Update the book by the id",
    responses={204: {"description": "The book was updated"}, **NOT_FOUND},
)
async def update_book(
    book_id: str,
    data: Optional[BookUpdate] = None,
    repo: BooksRepository = Depends(get_books_repo),
):
    """Update the fields present in the body; id and createdAt never change."""
    changes = data.model_dump(exclude_unset=True) if data else {}
    updated = repo.update_book(book_id, changes)
    if updated is None:
        return Response(status_code=404)
    return Response(status_code=204)


@router.delete(
    "/{book_id}",
    status_code=204,
    response_class=Response,
    summary="Remove the book by id",
    responses={204: {"description": "The book was deleted"}, **NOT_FOUND},
)
async def delete_book(book_id: str, repo: BooksRepository = Depends(get_books_repo)):
    if not repo.delete_book(book_id):
        return Response(status_code=404)
    return Response(status_code=204)
