"""
module keyprompt.input.display

Contains the definition of the TerminalDisplay class, the surface that
prompts, echoed keystrokes and rejection messages are written to
"""

from .terminaldisplay import TerminalDisplay
