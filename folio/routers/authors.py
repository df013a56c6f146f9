from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.database import get_session
from folio.models import Author
from folio.schemas.author import AuthorCreate, AuthorResponse

router = APIRouter(prefix="/api/authors", tags=["authors"])


@router.get("", response_model=list[AuthorResponse])
async def list_authors(session: AsyncSession = Depends(get_session)):
    result = await session.execute(select(Author).order_by(Author.name))
    return result.scalars().all()


@router.get("/{author_id}", response_model=AuthorResponse)
async def get_author(author_id: int, session: AsyncSession = Depends(get_session)):
    author = await session.get(Author, author_id)
    if author is None:
        raise HTTPException(status_code=404, detail="Author not found")
    return author


@router.post("", response_model=AuthorResponse, status_code=201)
async def create_author(data: AuthorCreate, session: AsyncSession = Depends(get_session)):
    author = Author(**data.model_dump())
    session.add(author)
    await session.commit()
    await session.refresh(author)
    return author
