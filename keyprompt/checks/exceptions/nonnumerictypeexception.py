"""
module keyprompt.checks.exceptions.nonnumerictypeexception

Contains the definition of the NonNumericTypeException class which is
thrown when a numeric check is requested for a type that is not numeric
"""

from ...keypromptexception import KeyPromptException


class NonNumericTypeException(KeyPromptException, TypeError):
    """
    class NonNumericTypeException

    An exception thrown when a numeric or range check is constructed for
    a type that cannot be considered numeric. This is a programming error
    and is never retried by the validator
    """
