from folio.models.author import Author
from folio.models.book import AuthorBook, Book
from folio.models.comment import Comment
from folio.models.user import User

__all__ = ["Author", "AuthorBook", "Book", "Comment", "User"]
