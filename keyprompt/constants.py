from typing import FrozenSet

INVALID_INPUT_PROMPT: str = "Invalid Input"
INPUT_MASK: str = "*"

ASK_SUFFIX: str = "?\n"
GET_SUFFIX: str = ": "

# posix terminals send LF/DEL, the windows console sends CR/BS
KEYS_NEWLINE: FrozenSet[str] = frozenset({"\n", "\r"})
KEYS_BACKSPACE: FrozenSet[str] = frozenset({"\x7f", "\b"})
KEY_INTERRUPT: str = "\x03"
KEY_END_OF_INPUT: str = "\x04"

CURSOR_BACK: str = "\b"
ERASE_SEQUENCE: str = CURSOR_BACK + " " + CURSOR_BACK
