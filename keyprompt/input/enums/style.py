from enum import auto, Enum


class Style(Enum):
    BASIC = auto()
    MASKED = auto()
    INSTANT = auto()
