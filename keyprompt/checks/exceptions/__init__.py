"""
module keyprompt.checks.exceptions

Contains all definitions of exceptions specifically thrown by checks
and the factories that construct them
"""

from .invalidinputexception import InvalidInputException
from .nonnumerictypeexception import NonNumericTypeException
