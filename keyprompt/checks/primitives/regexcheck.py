"""
module keyprompt.checks.primitives.regexcheck

Contains the definition of the RegexCheck class, a check that accepts a candidate
only if the whole candidate matches a regular expression
"""

import re

from ..abstract import Check
from ..dataclasses import ValidationOutcome


class RegexCheck(Check):
    """
    class RegexCheck

    A check that accepts a candidate only if the whole candidate matches a
    regular expression. The length, consists_of and numeric checks are all
    built on this class
    """

    __pattern: re.Pattern

    def __init__(self: "RegexCheck", pattern: str | re.Pattern) -> None:
        self.__pattern = re.compile(pattern)

    @property
    def pattern(self: "RegexCheck") -> re.Pattern:
        return self.__pattern

    def evaluate(self: "RegexCheck", candidate: str) -> ValidationOutcome:
        if self.__pattern.fullmatch(candidate) is None:
            return ValidationOutcome.reject()

        return ValidationOutcome.accept()

    @property
    def name(self: "RegexCheck") -> str:
        return f"matches_regex({self.__pattern.pattern!r})"
