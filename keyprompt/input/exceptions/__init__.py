"""
module keyprompt.input.exceptions

Contains all definitions of exceptions thrown while reading keystrokes
"""

from .keyreadexception import KeyReadException
from .userexit import UserExit
