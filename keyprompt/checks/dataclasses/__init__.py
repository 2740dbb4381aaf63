"""
module keyprompt.checks.dataclasses

Contains all dataclass definitions related to the results of evaluating checks
"""

from .validationoutcome import ValidationOutcome
