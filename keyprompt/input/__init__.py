"""
module keyprompt.input

Contains the input producers that turn a stream of keystrokes into a
candidate string (LineEditor and InstantCapture) along with the key sources
and the display they depend on
"""

from .instantcapture import InstantCapture
from .lineeditor import LineEditor
