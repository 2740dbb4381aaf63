"""
module keyprompt.input.dataclasses

Contains all dataclass definitions related to configuring how input is captured
"""

from .inputconfig import InputConfig
