"""
module keyprompt.checks.combinators.anycheck

Contains the definition of the AnyCheck class, a check that passes if any one
of a series of checks passes
"""

from typing import Iterable, Tuple

from ..abstract import Check
from ..dataclasses import ValidationOutcome


class AnyCheck(Check):
    """
    class AnyCheck

    A check that passes if any one of a series of checks passes. The checks
    are tried in order and the messages of the individual rejections are
    discarded: when every check rejects, only the generic message is reported
    """

    __checks: Tuple[Check, ...]

    def __init__(self: "AnyCheck", checks: Iterable[Check]) -> None:
        self.__checks = tuple(checks)

    @property
    def checks(self: "AnyCheck") -> Tuple[Check, ...]:
        return self.__checks

    def evaluate(self: "AnyCheck", candidate: str) -> ValidationOutcome:
        for check in self.__checks:
            if check.evaluate(candidate).accepted:
                return ValidationOutcome.accept()

        return ValidationOutcome.reject()

    @property
    def name(self: "AnyCheck") -> str:
        return f"any({', '.join(check.name for check in self.__checks)})"
