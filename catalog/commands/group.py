from dataclasses import dataclass
from typing import ClassVar, Dict, List, Optional

from catalog.book import BookEntry
from catalog.commands.base import BookField, CommandType
from catalog.library import Library
from utils.validators import MESSAGES, ArgumentValidator, TextValidator

GROUP_PREFIX = "## "
SINGLE_DIGIT_GROUP = "[0-9]"
GROUP_ELEMENT_PREFIX = "\t"


@dataclass(frozen=True)
class GroupCommand:
    """Print book titles grouped by title initial or by author."""

    key: BookField
    kind: ClassVar[CommandType] = CommandType.GROUP

    def __post_init__(self) -> None:
        ArgumentValidator.require_not_none(self.key, MESSAGES.parsed_argument_null)


def parse_arguments(argument_input: str) -> Optional[GroupCommand]:
    key = BookField.from_keyword(ArgumentValidator.strip_argument(argument_input))
    if key is None:
        return None
    return GroupCommand(key=key)


def title_initial(title: str) -> str:
    """Group label for a title: its uppercased first character, or the digit group."""
    if TextValidator.starts_with_digit(title):
        return SINGLE_DIGIT_GROUP
    return title[:1].upper()


def group_by_title(books: List[BookEntry]) -> Dict[str, List[str]]:
    index: Dict[str, List[str]] = {}
    for book in books:
        index.setdefault(title_initial(book.title), []).append(book.title)
    return index


def group_by_author(books: List[BookEntry]) -> Dict[str, List[str]]:
    index: Dict[str, List[str]] = {}
    for book in books:
        # A book listing the same author twice is grouped under them once
        for author in dict.fromkeys(book.authors):
            index.setdefault(author, []).append(book.title)
    return index


def print_alphabetically(index: Dict[str, List[str]]) -> None:
    for label in sorted(index):
        print(GROUP_PREFIX + label)
        for title in index[label]:
            print(GROUP_ELEMENT_PREFIX + title)


def execute(command: GroupCommand, data: Library) -> None:
    ArgumentValidator.require_not_none(data, MESSAGES.data_null)

    books = data.get_book_data()
    if not books:
        print(MESSAGES.empty_library)
        return

    print(f"Grouped data by {command.key.value}")
    if command.key is BookField.TITLE:
        print_alphabetically(group_by_title(books))
    else:
        print_alphabetically(group_by_author(books))
