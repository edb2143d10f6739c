from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Tuple

from catalog.errors import NullInputError, ValidationError

MIN_RATING = 0
MAX_RATING = 5
MIN_PAGES = 0
AUTHORS_SEPARATOR = ", "
RATING_STEP = Decimal("0.01")


@dataclass(frozen=True, init=False)
class BookEntry:
    """A single immutable book record in the catalog."""

    title: str
    authors: Tuple[str, ...]
    rating: float
    isbn: str
    pages: int

    def __init__(self, title: str, authors: Iterable[str], rating: float, isbn: str, pages: int) -> None:
        if title is None:
            raise NullInputError("Given title must not be null.")
        if authors is None:
            raise NullInputError("Given authors must not be null.")
        if isinstance(authors, str):
            raise ValidationError(f"Given authors must be a sequence of names, not a string: {authors!r}")
        # Copy so later changes to the caller's list never reach the record
        authors = tuple(authors)
        for author in authors:
            if author is None:
                raise NullInputError("An author of the book must not be null.")
        if isbn is None:
            raise NullInputError("Given ISBN must not be null.")
        if rating is None:
            raise NullInputError("Given rating must not be null.")
        if pages is None:
            raise NullInputError("Given number of pages must not be null.")

        if not authors:
            raise ValidationError("A book must have at least one author.")
        if any(author == "" for author in authors):
            raise ValidationError(f"Author names must not be empty, but got: {list(authors)}")
        if isinstance(rating, bool) or not isinstance(rating, (int, float)):
            raise ValidationError(f"Given rating must be a number, but it is: {rating!r}")
        if not MIN_RATING <= rating <= MAX_RATING:
            raise ValidationError(
                f"Given rating must be between {MIN_RATING} and {MAX_RATING}, but it is: {rating}"
            )
        if isinstance(pages, bool) or not isinstance(pages, int):
            raise ValidationError(f"Given number of pages must be an integer, but it is: {pages!r}")
        if pages < MIN_PAGES:
            raise ValidationError(f"Given number of pages must not be less than {MIN_PAGES}, but it is: {pages}")

        object.__setattr__(self, "title", title)
        object.__setattr__(self, "authors", authors)
        object.__setattr__(self, "rating", rating)
        object.__setattr__(self, "isbn", isbn)
        object.__setattr__(self, "pages", pages)

    def has_author(self, name: str) -> bool:
        return name in self.authors

    def _format_rating(self) -> str:
        # Round half up on the decimal text, so 4.125 shows as 4.13
        return str(Decimal(str(self.rating)).quantize(RATING_STEP, rounding=ROUND_HALF_UP))

    def __str__(self) -> str:
        return (
            f"{self.title}\n"
            f"by {AUTHORS_SEPARATOR.join(self.authors)}\n"
            f"Rating: {self._format_rating()}\n"
            f"ISBN: {self.isbn}\n"
            f"{self.pages} pages"
        )
