"""
module keyprompt.checks.primitives.ischeck

Contains the definition of the IsCheck class, a check that accepts a candidate
only if it is equal to one of a fixed set of strings
"""

from typing import Tuple

from ..abstract import Check
from ..dataclasses import ValidationOutcome


class IsCheck(Check):
    """
    class IsCheck

    A check that accepts a candidate only if it is equal to one of a fixed
    set of strings. Comparison is case-insensitive unless requested otherwise
    """

    __comparison_strings: Tuple[str, ...]
    __case_sensitive: bool

    def __init__(
        self: "IsCheck", *strings: str, case_sensitive: bool = False
    ) -> None:
        self.__case_sensitive = case_sensitive
        self.__comparison_strings = tuple(
            self._fold(string, case_sensitive) for string in strings
        )

    @property
    def case_sensitive(self: "IsCheck") -> bool:
        return self.__case_sensitive

    def evaluate(self: "IsCheck", candidate: str) -> ValidationOutcome:
        if self._fold(candidate, self.__case_sensitive) in self.__comparison_strings:
            return ValidationOutcome.accept()

        return ValidationOutcome.reject()

    @staticmethod
    def _fold(string: str, case_sensitive: bool) -> str:
        return string if case_sensitive else string.casefold()

    @property
    def name(self: "IsCheck") -> str:
        return f"is({', '.join(map(repr, self.__comparison_strings))})"
