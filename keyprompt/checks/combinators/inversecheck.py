"""
module keyprompt.checks.combinators.inversecheck

Contains the definition of the InverseCheck class, a check that accepts exactly
the candidates another check rejects
"""

from ..abstract import Check
from ..dataclasses import ValidationOutcome


class InverseCheck(Check):
    """
    class InverseCheck

    A check that accepts exactly the candidates another check rejects
    """

    __check: Check

    def __init__(self: "InverseCheck", check: Check) -> None:
        self.__check = check

    @property
    def check(self: "InverseCheck") -> Check:
        return self.__check

    def evaluate(self: "InverseCheck", candidate: str) -> ValidationOutcome:
        if self.__check.evaluate(candidate).accepted:
            return ValidationOutcome.reject()

        return ValidationOutcome.accept()

    @property
    def name(self: "InverseCheck") -> str:
        return f"inverse({self.__check.name})"
