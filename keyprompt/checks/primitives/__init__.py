"""
module keyprompt.checks.primitives

Contains the definitions of the checks that test a candidate string directly
rather than by composing other checks
"""

from .ischeck import IsCheck
from .rangecheck import RangeCheck
from .regexcheck import RegexCheck
