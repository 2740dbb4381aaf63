"""
module keyprompt.checks.combinators.callablecheck

Contains the definition of the CallableCheck class, a check that adapts a plain
function which raises InvalidInputException into a Check
"""

from typing import Callable

from ..abstract import Check
from ..dataclasses import ValidationOutcome
from ..exceptions import InvalidInputException


class CallableCheck(Check):
    """
    class CallableCheck

    Adapts a plain function into a Check. The function rejects a candidate by
    raising InvalidInputException and accepts it by returning normally
    """

    __function: Callable[[str], None]

    def __init__(self: "CallableCheck", function: Callable[[str], None]) -> None:
        self.__function = function

    @property
    def function(self: "CallableCheck") -> Callable[[str], None]:
        return self.__function

    def evaluate(self: "CallableCheck", candidate: str) -> ValidationOutcome:
        try:
            self.__function(candidate)
        except InvalidInputException as iie:
            return ValidationOutcome.reject(iie.message)

        return ValidationOutcome.accept()

    @property
    def name(self: "CallableCheck") -> str:
        return getattr(self.__function, "__name__", repr(self.__function))
