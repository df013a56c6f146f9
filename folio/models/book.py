from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from folio.database import Base


class AuthorBook(Base):
    __tablename__ = "authors_books"

    book_id: Mapped[int] = mapped_column(ForeignKey("books.id", ondelete="CASCADE"), primary_key=True)
    author_id: Mapped[int] = mapped_column(ForeignKey("authors.id", ondelete="CASCADE"), primary_key=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    book: Mapped["Book"] = relationship(back_populates="author_links")
    author: Mapped["Author"] = relationship(back_populates="book_links")


class Book(Base):
    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(250), nullable=False)
    created_at: Mapped[datetime | None] = mapped_column(DateTime)

    author_links: Mapped[list["AuthorBook"]] = relationship(
        back_populates="book", cascade="all, delete-orphan", order_by="AuthorBook.order"
    )
    comments: Mapped[list["Comment"]] = relationship(back_populates="book", cascade="all, delete-orphan")
