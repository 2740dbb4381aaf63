"""
module keyprompt.input.abstract

Contains the definitions of the KeySource abstract base class that is
implemented by each platform's keystroke reader and the InputProducer
abstract base class that is implemented by each input style
"""

from .inputproducer import InputProducer
from .keysource import KeySource
