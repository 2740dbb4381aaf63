"""
module keyprompt.checks.combinators.customcheck

Contains the definition of the CustomCheck class, a check that replaces the
rejection message of another check
"""

from ..abstract import Check
from ..dataclasses import ValidationOutcome


class CustomCheck(Check):
    """
    class CustomCheck

    Gives any check a new rejection message. The wrapped check decides
    acceptance; only the message shown to the user changes
    """

    __check: Check
    __message: str

    def __init__(self: "CustomCheck", check: Check, message: str) -> None:
        self.__check = check
        self.__message = message

    @property
    def check(self: "CustomCheck") -> Check:
        return self.__check

    @property
    def message(self: "CustomCheck") -> str:
        return self.__message

    def evaluate(self: "CustomCheck", candidate: str) -> ValidationOutcome:
        if self.__check.evaluate(candidate).rejected:
            return ValidationOutcome.reject(self.__message)

        return ValidationOutcome.accept()

    @property
    def name(self: "CustomCheck") -> str:
        return f"custom({self.__check.name}, {self.__message!r})"
