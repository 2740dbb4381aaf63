"""
module keyprompt.checks.abstract

Contains the definition of the Check abstract base class that is
implemented by all check primitives and combinators
"""

from .check import Check
