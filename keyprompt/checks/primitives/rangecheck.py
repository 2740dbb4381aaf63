"""
module keyprompt.checks.primitives.rangecheck

Contains the definition of the RangeCheck class, a check that accepts a candidate
only if it is a numeric literal whose value lies within an inclusive range
"""

from ..abstract import Check
from ..dataclasses import ValidationOutcome
from ..enums import NumericType


class RangeCheck(Check):
    """
    class RangeCheck

    A check that accepts a candidate only if it is a valid literal for a
    numeric type and its value lies within [minimum, maximum]. A bound of
    None leaves that side of the range open
    """

    __numeric_check: Check
    __numeric_type: NumericType
    __minimum: int | float | None
    __maximum: int | float | None

    def __init__(
        self: "RangeCheck",
        numeric_check: Check,
        numeric_type: NumericType,
        minimum: int | float | None,
        maximum: int | float | None,
    ) -> None:
        if minimum is not None and maximum is not None and minimum > maximum:
            raise ValueError(
                f"Range minimum {minimum} is greater than its maximum {maximum}"
            )

        self.__numeric_check = numeric_check
        self.__numeric_type = numeric_type
        self.__minimum = minimum
        self.__maximum = maximum

    @property
    def maximum(self: "RangeCheck") -> int | float | None:
        return self.__maximum

    @property
    def minimum(self: "RangeCheck") -> int | float | None:
        return self.__minimum

    def evaluate(self: "RangeCheck", candidate: str) -> ValidationOutcome:
        if (outcome := self.__numeric_check.evaluate(candidate)).rejected:
            return outcome

        # values the numeric type cannot represent are rejected like any
        # other invalid input
        value: int | float
        try:
            value = self.__numeric_type.parse(candidate)
        except (OverflowError, ValueError):
            return ValidationOutcome.reject()

        if (self.__minimum is not None and value < self.__minimum) or (
            self.__maximum is not None and value > self.__maximum
        ):
            return ValidationOutcome.reject()

        return ValidationOutcome.accept()

    @property
    def name(self: "RangeCheck") -> str:
        return (
            f"range({self.__numeric_type.name}, {self.__minimum}, {self.__maximum})"
        )
