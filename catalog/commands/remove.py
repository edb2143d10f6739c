from dataclasses import dataclass
from typing import ClassVar, List, Optional

from catalog.book import BookEntry
from catalog.commands.base import BookField, CommandType
from catalog.library import Library
from utils.validators import MESSAGES, ArgumentValidator

MIN_WORDS = 2


@dataclass(frozen=True)
class RemoveCommand:
    """Remove the first book with a given title, or every book by a given author."""

    key: BookField
    term: str
    kind: ClassVar[CommandType] = CommandType.REMOVE

    def __post_init__(self) -> None:
        ArgumentValidator.require_not_none(self.key, MESSAGES.removal_key_null)
        ArgumentValidator.require_not_none(self.term, MESSAGES.removal_term_null)


def parse_arguments(argument_input: str) -> Optional[RemoveCommand]:
    argument_input = ArgumentValidator.strip_argument(argument_input)

    words = ArgumentValidator.split_words(argument_input)
    if len(words) < MIN_WORDS:
        return None
    key = BookField.from_keyword(words[0])
    if key is None:
        return None

    # Drop the key and the single separator after it; the rest is the term
    term = argument_input[len(words[0]) + 1:].strip()
    if not term:
        return None
    return RemoveCommand(key=key, term=term)


def remove_title(books: List[BookEntry], title: str) -> bool:
    """Remove the first book whose title equals ``title``. Returns True if one was removed."""
    for position, book in enumerate(books):
        if book.title == title:
            del books[position]
            return True
    return False


def remove_author(books: List[BookEntry], author: str) -> int:
    """Remove every book naming ``author``. Returns how many were removed."""
    # Collect first, then delete, so the scan never runs over a shrinking list
    matches = [position for position, book in enumerate(books) if book.has_author(author)]
    for position in reversed(matches):
        del books[position]
    return len(matches)


def execute(command: RemoveCommand, data: Library) -> None:
    ArgumentValidator.require_not_none(data, MESSAGES.data_null)

    books = data.get_book_data()
    if command.key is BookField.TITLE:
        if remove_title(books, command.term):
            print(f"{command.term}: removed successfully.")
        else:
            print(f"{command.term}: not found.")
    else:
        removed = remove_author(books, command.term)
        print(f"{removed} books removed for author: {command.term}")
