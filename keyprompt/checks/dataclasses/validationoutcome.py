"""
module keyprompt.checks.dataclasses.validationoutcome

Contains the definition of the ValidationOutcome dataclass, the result of
evaluating a check against a candidate string
"""

from dataclasses import dataclass

from ... import constants
from ..exceptions import InvalidInputException


@dataclass(frozen=True)
class ValidationOutcome:
    """
    class ValidationOutcome

    The result of evaluating a check against a candidate string. Either
    accepted, or rejected with a message to show to the user
    """

    accepted: bool
    message: str | None = None

    @classmethod
    def accept(cls) -> "ValidationOutcome":
        return cls(accepted=True)

    @classmethod
    def reject(
        cls, message: str = constants.INVALID_INPUT_PROMPT
    ) -> "ValidationOutcome":
        return cls(accepted=False, message=message)

    @property
    def rejected(self: "ValidationOutcome") -> bool:
        return not self.accepted

    def raise_if_rejected(self: "ValidationOutcome") -> None:
        """
        Converts a rejected outcome into an InvalidInputException

        Args:
            None

        Returns:
            Nothing

        Raises:
            InvalidInputException: If this outcome is a rejection
        """

        if self.rejected:
            raise InvalidInputException(
                self.message
                if self.message is not None
                else constants.INVALID_INPUT_PROMPT
            )
