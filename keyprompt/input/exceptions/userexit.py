"""
module keyprompt.input.exceptions.userexit

Contains the definition of the UserExit exception class, an exception
thrown whenever input was closed while keyprompt was waiting for a keystroke
"""

from ...keypromptexception import KeyPromptException


class UserExit(KeyPromptException):
    """
    class UserExit

    An exception thrown whenever input was closed while keyprompt was
    waiting for a keystroke
    """
