"""
module keyprompt.checks.exceptions.invalidinputexception

Contains the definition of the InvalidInputException class which is
thrown when a check is called on a candidate string that it rejects
"""

from ... import constants
from ...keypromptexception import KeyPromptException


class InvalidInputException(KeyPromptException):
    """
    class InvalidInputException

    An exception thrown when a check is called on a candidate string
    that it rejects. Carries the message that should be shown to the user
    """

    message: str

    def __init__(
        self: "InvalidInputException", message: str = constants.INVALID_INPUT_PROMPT
    ) -> None:
        super().__init__(message)

        self.message = message
