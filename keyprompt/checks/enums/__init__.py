"""
module keyprompt.checks.enums

Contains the definitions of all enum classes used when constructing checks
"""

from .numerictype import NumericType, resolve_numeric_type
