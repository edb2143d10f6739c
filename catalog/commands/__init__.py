"""
Catalog Commands

Each command kind is a frozen dataclass holding its validated payload.
Commands only come out of parse_command()/build_command(), so a command
object always carries a valid payload. execute() dispatches once on the
command's kind.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Union

from catalog.commands import add, group, list_books, remove, search
from catalog.commands.add import AddCommand
from catalog.commands.base import BookField, CommandType, ParseResult
from catalog.commands.group import GroupCommand
from catalog.commands.list_books import ListCommand, ListMode
from catalog.commands.remove import RemoveCommand
from catalog.commands.search import SearchCommand
from catalog.errors import ValidationError
from catalog.library import Library
from utils.validators import MESSAGES, ArgumentValidator

logger = logging.getLogger(__name__)

Command = Union[AddCommand, ListCommand, GroupCommand, RemoveCommand, SearchCommand]

_PARSERS: Dict[CommandType, Callable[[str], Optional[Command]]] = {
    CommandType.ADD: add.parse_arguments,
    CommandType.LIST: list_books.parse_arguments,
    CommandType.GROUP: group.parse_arguments,
    CommandType.REMOVE: remove.parse_arguments,
    CommandType.SEARCH: search.parse_arguments,
}

_EXECUTORS: Dict[CommandType, Callable[..., None]] = {
    CommandType.ADD: add.execute,
    CommandType.LIST: list_books.execute,
    CommandType.GROUP: group.execute,
    CommandType.REMOVE: remove.execute,
    CommandType.SEARCH: search.execute,
}


def parse_command(kind: Union[CommandType, str], argument_input: str) -> ParseResult:
    """Validate raw argument text for one command kind.

    The result carries the command on success or a readable reason on failure.
    A None argument input raises NullInputError.
    """
    kind = CommandType(kind)
    command = _PARSERS[kind](argument_input)
    if command is None:
        reason = MESSAGES.invalid_argument.format(command=kind.value, argument=argument_input)
        logger.debug(reason)
        return ParseResult(kind=kind, error=reason)
    return ParseResult(kind=kind, command=command)


def build_command(kind: Union[CommandType, str], argument_input: str) -> Command:
    """Like parse_command(), but raises ValidationError when the arguments are invalid."""
    result = parse_command(kind, argument_input)
    if not result.ok:
        raise ValidationError(result.error)
    return result.command


def execute(command: Command, data: Library) -> None:
    ArgumentValidator.require_not_none(command, MESSAGES.parsed_argument_null)
    ArgumentValidator.require_not_none(data, MESSAGES.data_null)
    _EXECUTORS[command.kind](command, data)


__all__ = [
    "AddCommand",
    "BookField",
    "Command",
    "CommandType",
    "GroupCommand",
    "ListCommand",
    "ListMode",
    "ParseResult",
    "RemoveCommand",
    "SearchCommand",
    "build_command",
    "execute",
    "parse_command",
]
