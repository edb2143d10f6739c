import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from catalog.book import BookEntry
from catalog.errors import DecodeFieldError
from catalog.loader import LibraryFileLoader
from utils.validators import MESSAGES, ArgumentValidator

logger = logging.getLogger(__name__)


class Library:
    """Manages the ordered in-memory collection of books."""

    def __init__(self, loader: Optional[LibraryFileLoader] = None) -> None:
        self.loader = loader or LibraryFileLoader()
        self.books: List[BookEntry] = []

    # ------------------------- Core operations ------------------------- #
    def get_book_data(self) -> List[BookEntry]:
        """The live list of books. Commands mutate it in place."""
        return self.books

    def load_data(self, file_name: Union[str, Path]) -> int:
        """Load books from a CSV source and append them to the collection.

        Returns the number of books added. A source that cannot be read or
        contains a malformed row adds nothing.
        """
        ArgumentValidator.require_not_none(file_name, MESSAGES.path_null)
        ArgumentValidator.require_not_none(self.loader, MESSAGES.loader_null)

        if not self.loader.load_file_content(file_name):
            return 0
        try:
            new_books = self.loader.parse_file_content()
        except DecodeFieldError as e:
            logger.error("Loading %s aborted, no books added: %s", file_name, e)
            return 0

        self.books.extend(new_books)
        logger.info("Added %d books from %s", len(new_books), file_name)
        return len(new_books)

    def replace_book_data(self, books: Iterable[BookEntry]) -> None:
        ArgumentValidator.require_not_none(books, MESSAGES.data_null)
        self.books[:] = list(books)

    def is_empty(self) -> bool:
        return not self.books

    def __len__(self) -> int:
        return len(self.books)
