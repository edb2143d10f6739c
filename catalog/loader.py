import logging
import re
from pathlib import Path
from typing import List, Optional, Union

from catalog.book import BookEntry
from catalog.errors import DecodeFieldError, SourceReadError, ValidationError
from utils.validators import MESSAGES, ArgumentValidator

logger = logging.getLogger(__name__)

DATA_VALUES_SEPARATOR = ","
AUTHOR_SEPARATOR = "-"
FIELD_COUNT = 5
TITLE_INDEX = 0
AUTHORS_INDEX = 1
RATING_INDEX = 2
ISBN_INDEX = 3
PAGES_INDEX = 4

# Float.parseFloat-style decimal text (surrounding whitespace allowed) and plain integers
RATING_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
PAGES_PATTERN = re.compile(r"[+-]?\d+")


class LibraryFileLoader:
    """Reads a CSV record source and decodes its rows into BookEntry objects.

    Loading and decoding are separate steps: load_file_content() buffers the
    raw lines, parse_file_content() turns the buffered rows (everything after
    the header line) into books.
    """

    def __init__(self) -> None:
        self._file_content: Optional[List[str]] = None

    def load_file_content(self, file_name: Union[str, Path]) -> bool:
        """Buffer all lines of the given file. Returns False if it cannot be read."""
        ArgumentValidator.require_not_none(file_name, MESSAGES.path_null)
        try:
            self._file_content = self._read_lines(Path(file_name))
        except SourceReadError as e:
            logger.error("Reading file content failed: %s", e)
            self._file_content = None
            return False
        logger.debug("Loaded %d lines from %s", len(self._file_content), file_name)
        return True

    def content_loaded(self) -> bool:
        return self._file_content is not None

    def parse_file_content(self) -> List[BookEntry]:
        """Decode the buffered rows. The first malformed row aborts the whole batch."""
        if not self.content_loaded():
            logger.error("No content loaded before parsing.")
            return []

        books: List[BookEntry] = []
        # Line 1 is the header
        for line_number, line in enumerate(self._file_content[1:], start=2):
            if not line.strip():
                continue
            books.append(self._parse_line(line_number, line))
        return books

    @staticmethod
    def _read_lines(path: Path) -> List[str]:
        try:
            return path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(f"{path}: {e}") from e

    @staticmethod
    def _parse_line(line_number: int, line: str) -> BookEntry:
        book_data = line.split(DATA_VALUES_SEPARATOR)
        if len(book_data) != FIELD_COUNT:
            raise DecodeFieldError(
                line_number, f"expected {FIELD_COUNT} fields but found {len(book_data)}", line
            )

        # float() and int() also take "1_000" and padded digits, so check the text first
        if not RATING_PATTERN.fullmatch(book_data[RATING_INDEX].strip()):
            raise DecodeFieldError(line_number, f"rating is not a number: {book_data[RATING_INDEX]!r}", line)
        if not PAGES_PATTERN.fullmatch(book_data[PAGES_INDEX]):
            raise DecodeFieldError(line_number, f"pages is not an integer: {book_data[PAGES_INDEX]!r}", line)
        rating = float(book_data[RATING_INDEX])
        pages = int(book_data[PAGES_INDEX])

        try:
            return BookEntry(
                title=book_data[TITLE_INDEX],
                authors=book_data[AUTHORS_INDEX].split(AUTHOR_SEPARATOR),
                rating=rating,
                isbn=book_data[ISBN_INDEX],
                pages=pages,
            )
        except ValidationError as e:
            raise DecodeFieldError(line_number, str(e), line) from e
