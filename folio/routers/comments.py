from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from folio.auth import get_claims
from folio.database import get_session
from folio.schemas.comment import CommentCreate, CommentResponse, CommentUpdate
from folio.services import comment_service

router = APIRouter(prefix="/api/books/{book_id}/comments", tags=["comments"])


@router.get("", response_model=list[CommentResponse], dependencies=[Depends(get_claims)])
async def list_comments(book_id: int, session: AsyncSession = Depends(get_session)):
    return await comment_service.list_comments(session, book_id)


@router.get("/{comment_id}", response_model=CommentResponse, dependencies=[Depends(get_claims)])
async def get_comment(book_id: int, comment_id: int, session: AsyncSession = Depends(get_session)):
    return await comment_service.get_comment(session, comment_id)


@router.post("", response_model=CommentResponse, status_code=201)
async def create_comment(
    book_id: int,
    data: CommentCreate,
    claims: dict = Depends(get_claims),
    session: AsyncSession = Depends(get_session),
):
    return await comment_service.create_comment(session, book_id, data, claims)


@router.put("/{comment_id}", status_code=204, dependencies=[Depends(get_claims)])
async def update_comment(
    book_id: int,
    comment_id: int,
    data: CommentUpdate,
    session: AsyncSession = Depends(get_session),
):
    await comment_service.update_comment(session, book_id, comment_id, data)
