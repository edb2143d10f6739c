from dataclasses import dataclass
from typing import ClassVar, List, Optional

from catalog.book import BookEntry
from catalog.commands.base import CommandType
from catalog.library import Library
from utils.validators import MESSAGES, ArgumentValidator


@dataclass(frozen=True)
class SearchCommand:
    """Print every title containing a single search word, ignoring case."""

    term: str
    kind: ClassVar[CommandType] = CommandType.SEARCH

    def __post_init__(self) -> None:
        ArgumentValidator.require_not_none(self.term, MESSAGES.parsed_argument_null)


def parse_arguments(argument_input: str) -> Optional[SearchCommand]:
    argument_input = ArgumentValidator.strip_argument(argument_input)
    if ArgumentValidator.is_single_word(argument_input):
        return SearchCommand(term=argument_input)
    return None


def find_titles(books: List[BookEntry], term: str) -> List[str]:
    needle = term.lower()
    return [book.title for book in books if needle in book.title.lower()]


def execute(command: SearchCommand, data: Library) -> None:
    ArgumentValidator.require_not_none(data, MESSAGES.data_null)

    hits = find_titles(data.get_book_data(), command.term)
    if not hits:
        print(f"No hits found for search term: {command.term}")
        return
    for title in hits:
        print(title)
