from typing import Any

from fastapi import APIRouter, Body, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from folio.auth import get_claims
from folio.database import get_session
from folio.schemas.book import BookCreate, BookResponse, BookUpdate, BookWithAuthors
from folio.services import book_service

router = APIRouter(prefix="/api/books", tags=["books"], dependencies=[Depends(get_claims)])


@router.get("", response_model=list[BookResponse])
async def list_books(session: AsyncSession = Depends(get_session)):
    return await book_service.list_books(session)


@router.get("/{book_id}", response_model=BookWithAuthors)
async def get_book(book_id: int, session: AsyncSession = Depends(get_session)):
    book = await book_service.get_book(session, book_id)
    book_dict = BookWithAuthors.model_validate(book).model_dump()
    book_dict["authors"] = [link.author for link in book.author_links]
    return BookWithAuthors(**book_dict)


@router.post("", response_model=BookResponse, status_code=201)
async def create_book(
    data: BookCreate, response: Response, session: AsyncSession = Depends(get_session)
):
    book = await book_service.create_book(session, data)
    response.headers["Location"] = f"/api/books/{book.id}"
    return book


@router.put("/{book_id}", status_code=204)
async def update_book(
    book_id: int, data: BookUpdate, session: AsyncSession = Depends(get_session)
):
    await book_service.update_book(session, book_id, data)


@router.patch("/{book_id}", status_code=204)
async def patch_book(
    book_id: int,
    operations: list[dict[str, Any]] | None = Body(None),
    session: AsyncSession = Depends(get_session),
):
    await book_service.patch_book(session, book_id, operations)


@router.delete("/{book_id}", status_code=204)
async def delete_book(book_id: int, session: AsyncSession = Depends(get_session)):
    await book_service.delete_book(session, book_id)
