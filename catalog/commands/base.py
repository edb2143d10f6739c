"""
Command Base

Shared tags and the parse result shape for all catalog commands.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class CommandType(str, Enum):
    ADD = "ADD"
    LIST = "LIST"
    GROUP = "GROUP"
    REMOVE = "REMOVE"
    SEARCH = "SEARCH"

    @classmethod
    def from_keyword(cls, keyword: str) -> Optional["CommandType"]:
        try:
            return cls(keyword)
        except ValueError:
            return None


class BookField(str, Enum):
    """Record field used by GROUP and REMOVE."""

    TITLE = "TITLE"
    AUTHOR = "AUTHOR"

    @classmethod
    def from_keyword(cls, keyword: str) -> Optional["BookField"]:
        # Exact match only: "title" is not a valid key
        try:
            return cls(keyword)
        except ValueError:
            return None


@dataclass(frozen=True)
class ParseResult:
    """Outcome of validating raw argument text for one command kind."""

    kind: CommandType
    command: Optional[Any] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.command is not None
