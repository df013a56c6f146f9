"""Keep the author order of a book explicit."""

from collections.abc import Sequence

from folio.models import AuthorBook


def assign_author_order(links: Sequence[AuthorBook]) -> None:
    """Set each link's ``order`` to its position in ``links``.

    The list position is the caller's intended credit order. Storage does not
    preserve it, so it is written into the ``order`` column on every write.
    """
    for index, link in enumerate(links):
        link.order = index
