"""
module keyprompt.input.enums

Contains the definitions of all enum classes related to capturing input
"""

from .style import Style
