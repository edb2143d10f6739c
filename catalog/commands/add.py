from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Optional

from catalog.commands.base import CommandType
from catalog.library import Library
from utils.validators import MESSAGES, ArgumentValidator

FILE_NAME_EXTENSION = ".csv"


@dataclass(frozen=True)
class AddCommand:
    """Add books from a CSV file to the library."""

    path: Path
    kind: ClassVar[CommandType] = CommandType.ADD

    def __post_init__(self) -> None:
        ArgumentValidator.require_not_none(self.path, MESSAGES.parsed_argument_null)


def parse_arguments(argument_input: str) -> Optional[AddCommand]:
    argument_input = ArgumentValidator.strip_argument(argument_input)
    if argument_input.endswith(FILE_NAME_EXTENSION):
        return AddCommand(path=Path(argument_input))
    return None


def execute(command: AddCommand, data: Library) -> None:
    ArgumentValidator.require_not_none(data, MESSAGES.data_null)
    data.load_data(command.path)
