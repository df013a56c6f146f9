"""Comments on books, stamped with the identity of their creator."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.errors import NotFound
from folio.models import Comment
from folio.schemas.comment import CommentCreate, CommentUpdate
from folio.services.book_service import book_exists
from folio.services.identity import resolve_user_id

logger = logging.getLogger(__name__)


async def get_comment(session: AsyncSession, comment_id: int) -> Comment:
    comment = await session.get(Comment, comment_id)
    if comment is None:
        raise NotFound("Comment", comment_id)
    return comment


async def list_comments(session: AsyncSession, book_id: int) -> Sequence[Comment]:
    if not await book_exists(session, book_id):
        raise NotFound("Book", book_id)
    result = await session.execute(
        select(Comment).where(Comment.book_id == book_id).order_by(Comment.id)
    )
    return result.scalars().all()


async def create_comment(
    session: AsyncSession,
    book_id: int,
    data: CommentCreate,
    claims: Mapping[str, Any],
) -> Comment:
    if not await book_exists(session, book_id):
        raise NotFound("Book", book_id)
    user_id = await resolve_user_id(session, claims)

    comment = Comment(content=data.content, book_id=book_id, user_id=user_id)
    session.add(comment)
    await session.commit()
    await session.refresh(comment)
    logger.info("User %s commented on book %s", user_id, book_id)
    return comment


async def update_comment(
    session: AsyncSession,
    book_id: int,
    comment_id: int,
    data: CommentUpdate,
) -> Comment:
    """Overwrite a comment's content.

    The comment's creator is not compared with the caller; any authenticated
    caller may edit any comment.
    """
    if not await book_exists(session, book_id):
        raise NotFound("Book", book_id)
    comment = await session.get(Comment, comment_id)
    if comment is None:
        raise NotFound("Comment", comment_id)

    comment.content = data.content
    comment.book_id = book_id
    await session.commit()
    logger.info("Updated comment %s on book %s", comment_id, book_id)
    return comment
