"""Create, update, patch and delete books together with their authors."""

import logging
from collections import Counter
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from folio.errors import NoAuthors, NotFound, UnknownAuthor, ValidationFailed
from folio.models import Author, AuthorBook, Book
from folio.schemas.book import BookCreate, BookUpdate
from folio.schemas.patch import PatchOperation
from folio.services.ordering import assign_author_order
from folio.services.patching import apply_patch, parse_operations

logger = logging.getLogger(__name__)


async def find_book(session: AsyncSession, book_id: int, include_authors: bool = False) -> Book | None:
    stmt = select(Book).where(Book.id == book_id)
    if include_authors:
        stmt = stmt.options(selectinload(Book.author_links).selectinload(AuthorBook.author))
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


async def book_exists(session: AsyncSession, book_id: int) -> bool:
    result = await session.execute(select(Book.id).where(Book.id == book_id))
    return result.scalar_one_or_none() is not None


async def find_existing_author_ids(session: AsyncSession, author_ids: Sequence[int]) -> set[int]:
    result = await session.execute(select(Author.id).where(Author.id.in_(author_ids)))
    return set(result.scalars().all())


async def _validated_author_ids(session: AsyncSession, author_ids: list[int] | None) -> list[int]:
    if not author_ids:
        raise NoAuthors()
    existing = await find_existing_author_ids(session, author_ids)
    # Duplicates also fail here: the distinct matches can never reach the submitted count.
    if len(existing) != len(author_ids):
        missing = [author_id for author_id in author_ids if author_id not in existing]
        counts = Counter(author_ids)
        duplicates = [author_id for author_id in counts if counts[author_id] > 1]
        logger.warning(
            "Rejected author ids %s (missing: %s, duplicate: %s)", author_ids, missing, duplicates
        )
        raise UnknownAuthor(missing, duplicates)
    return author_ids


async def get_book(session: AsyncSession, book_id: int) -> Book:
    book = await find_book(session, book_id, include_authors=True)
    if book is None:
        raise NotFound("Book", book_id)
    return book


async def list_books(session: AsyncSession) -> Sequence[Book]:
    result = await session.execute(select(Book).order_by(Book.id))
    return result.scalars().all()


async def create_book(session: AsyncSession, data: BookCreate) -> Book:
    author_ids = await _validated_author_ids(session, data.author_ids)

    book = Book(title=data.title, created_at=data.created_at)
    book.author_links = [AuthorBook(author_id=author_id) for author_id in author_ids]
    assign_author_order(book.author_links)

    session.add(book)
    await session.commit()
    logger.info("Created book %s with authors %s", book.id, author_ids)
    return book


async def update_book(session: AsyncSession, book_id: int, data: BookUpdate) -> Book:
    author_ids = await _validated_author_ids(session, data.author_ids)

    book = await find_book(session, book_id, include_authors=True)
    if book is None:
        raise NotFound("Book", book_id)

    book.title = data.title
    if "created_at" in data.model_fields_set:
        book.created_at = data.created_at

    links = {link.author_id: link for link in book.author_links}
    book.author_links = [
        links.get(author_id) or AuthorBook(author_id=author_id) for author_id in author_ids
    ]
    assign_author_order(book.author_links)

    await session.commit()
    logger.info("Updated book %s with authors %s", book.id, author_ids)
    return book


async def patch_book(
    session: AsyncSession,
    book_id: int,
    operations: Sequence[PatchOperation | dict] | None,
) -> Book:
    parse_operations(operations)

    book = await find_book(session, book_id)
    if book is None:
        raise NotFound("Book", book_id)

    book, result = apply_patch(book, operations)
    if not result.valid:
        raise ValidationFailed(result.errors)

    await session.commit()
    logger.info("Patched book %s", book.id)
    return book


async def delete_book(session: AsyncSession, book_id: int) -> None:
    book = await find_book(session, book_id)
    if book is None:
        raise NotFound("Book", book_id)
    await session.delete(book)
    await session.commit()
    logger.info("Deleted book %s", book_id)
