from datetime import datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field
from pydantic_core import PydanticCustomError

from folio.schemas.author import AuthorResponse


def _required(value: Any) -> Any:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise PydanticCustomError("required", "Field is required")
    return value


def _first_letter_capitalized(value: str) -> str:
    first = value[0]
    if first != first.upper():
        raise PydanticCustomError("first_letter_capitalized", "The first letter must be capitalized")
    return value


Title = Annotated[
    str,
    Field(max_length=250),
    BeforeValidator(_required),
    AfterValidator(_first_letter_capitalized),
]


class BookCreate(BaseModel):
    title: Title
    author_ids: list[int] | None = None
    created_at: datetime | None = None


class BookUpdate(BaseModel):
    title: Title
    author_ids: list[int] | None = None
    created_at: datetime | None = None


class BookPatch(BaseModel):
    """Fields of a book that may be changed through a patch document."""

    model_config = ConfigDict(from_attributes=True)

    title: Title
    created_at: datetime | None = None


class BookResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    created_at: datetime | None


class BookWithAuthors(BookResponse):
    authors: list[AuthorResponse] = []
