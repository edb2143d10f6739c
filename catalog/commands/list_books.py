from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional

from catalog.commands.base import CommandType
from catalog.library import Library
from utils.validators import MESSAGES, ArgumentValidator


class ListMode(str, Enum):
    DEFAULT = ""
    SHORT = "short"
    LONG = "long"


@dataclass(frozen=True)
class ListCommand:
    """Print the books in the library, titles only or in full."""

    mode: ListMode
    kind: ClassVar[CommandType] = CommandType.LIST

    def __post_init__(self) -> None:
        ArgumentValidator.require_not_none(self.mode, MESSAGES.parsed_argument_null)


def parse_arguments(argument_input: str) -> Optional[ListCommand]:
    argument_input = ArgumentValidator.strip_argument(argument_input)
    try:
        return ListCommand(mode=ListMode(argument_input))
    except ValueError:
        return None


def execute(command: ListCommand, data: Library) -> None:
    ArgumentValidator.require_not_none(data, MESSAGES.data_null)

    books = data.get_book_data()
    if not books:
        print(MESSAGES.empty_library)
    else:
        print(f"{len(books)} books in library:")

    if command.mode is ListMode.LONG:
        for book in books:
            print(book)
            print()
    else:
        for book in books:
            print(book.title)
