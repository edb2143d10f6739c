import re
from dataclasses import dataclass
from typing import Any, List, Optional

from catalog.errors import NullInputError


@dataclass(frozen=True)
class ValidationMessages:
    """Fixed messages used by the validation layer."""

    argument_input_null: str = "Given argument input should not be null."
    data_null: str = "Given library data must not be null."
    parsed_argument_null: str = "Given parsed argument must not be null."
    removal_key_null: str = "Given parameter of removal must not be null."
    removal_term_null: str = "Given name of removal must not be null."
    path_null: str = "Given filename must not be null."
    loader_null: str = "Given file loader must not be null."
    empty_library: str = "The library has no book entries."
    invalid_argument: str = "Invalid argument for the {command} command: {argument!r}"


MESSAGES = ValidationMessages()

_WHITESPACE = re.compile(r"\s+")


class ArgumentValidator:
    """Shared checks for raw command argument text."""

    @staticmethod
    def require_not_none(value: Any, message: str) -> Any:
        if value is None:
            raise NullInputError(message)
        return value

    @staticmethod
    def strip_argument(argument_input: Optional[str]) -> str:
        ArgumentValidator.require_not_none(argument_input, MESSAGES.argument_input_null)
        return argument_input.strip()

    @staticmethod
    def split_words(text: str) -> List[str]:
        # "" splits into no words at all
        if not text:
            return []
        return _WHITESPACE.split(text)

    @staticmethod
    def is_single_word(text: str) -> bool:
        return bool(text) and _WHITESPACE.search(text) is None


class TextValidator:
    """Basic text checks for record fields."""

    @staticmethod
    def starts_with_digit(text: str) -> bool:
        return bool(text) and text[0].isdecimal()
