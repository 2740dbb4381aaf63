"""
module keyprompt.checks.combinators

Contains the definitions of the checks that wrap, invert or combine other checks
"""

from .anycheck import AnyCheck
from .callablecheck import CallableCheck
from .customcheck import CustomCheck
from .inversecheck import InverseCheck
