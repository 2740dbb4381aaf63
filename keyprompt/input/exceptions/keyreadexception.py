"""
module keyprompt.input.exceptions.keyreadexception

Contains the definition of the KeyReadException class which is thrown by a
key source when reading a keystroke failed in a way that can be recovered from
"""

from ...keypromptexception import KeyPromptException


class KeyReadException(KeyPromptException):
    """
    class KeyReadException

    An exception thrown by a key source when reading a keystroke failed
    in a way that can be recovered from by resetting the key source
    """
