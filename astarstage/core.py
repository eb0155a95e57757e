"""Shared enumerations and small helpers: colours, cursor kinds, key codes, randomness, logging."""

from __future__ import annotations

import random
import sys
from enum import Enum, IntEnum

_LOG_BUFFER_SIZE = 1024


class Color(IntEnum):
    """Console foreground colour attributes."""

    RED = 0x0004
    GREEN = 0x0002
    BLUE = 0x0001
    WHITE = RED + GREEN + BLUE


class CursorType(Enum):
    """Kinds of text cursor a screen buffer can show."""

    NO_CURSOR = 0
    SOLID_CURSOR = 1
    NORMAL_CURSOR = 2


class Key(IntEnum):
    """Virtual key codes understood by the engine's input state."""

    LBUTTON = 0x01
    RBUTTON = 0x02
    CANCEL = 0x03
    MBUTTON = 0x04
    BACK = 0x08
    TAB = 0x09
    CLEAR = 0x0C
    RETURN = 0x0D
    SHIFT = 0x10
    CONTROL = 0x11
    MENU = 0x12
    PAUSE = 0x13
    CAPITAL = 0x14
    KANA = 0x15
    HANGEUL = 0x15
    HANGUL = 0x15
    IME_ON = 0x16
    JUNJA = 0x17
    FINAL = 0x18
    HANJA = 0x19
    KANJI = 0x19
    IME_OFF = 0x1A
    ESCAPE = 0x1B
    CONVERT = 0x1C
    NONCONVERT = 0x1D
    ACCEPT = 0x1E
    MODECHANGE = 0x1F
    SPACE = 0x20
    PRIOR = 0x21
    NEXT = 0x22
    END = 0x23
    HOME = 0x24
    LEFT = 0x25
    UP = 0x26
    RIGHT = 0x27
    DOWN = 0x28
    SELECT = 0x29
    PRINT = 0x2A
    EXECUTE = 0x2B
    SNAPSHOT = 0x2C
    INSERT = 0x2D
    DELETE = 0x2E
    HELP = 0x2F
    LWIN = 0x5B
    RWIN = 0x5C
    APPS = 0x5D
    SLEEP = 0x5F
    NUMPAD0 = 0x60
    NUMPAD1 = 0x61
    NUMPAD2 = 0x62
    NUMPAD3 = 0x63
    NUMPAD4 = 0x64
    NUMPAD5 = 0x65
    NUMPAD6 = 0x66
    NUMPAD7 = 0x67
    NUMPAD8 = 0x68
    NUMPAD9 = 0x69
    MULTIPLY = 0x6A
    ADD = 0x6B
    SEPARATOR = 0x6C
    SUBTRACT = 0x6D
    DECIMAL = 0x6E
    DIVIDE = 0x6F
    F1 = 0x70
    F2 = 0x71
    F3 = 0x72
    F4 = 0x73
    F5 = 0x74
    F6 = 0x75
    F7 = 0x76
    F8 = 0x77
    F9 = 0x78
    F10 = 0x79
    F11 = 0x7A
    F12 = 0x7B
    NUMLOCK = 0x90
    SCROLL = 0x91
    LSHIFT = 0xA0
    RSHIFT = 0xA1
    LCONTROL = 0xA2
    RCONTROL = 0xA3
    LMENU = 0xA4
    RMENU = 0xA5


def random_int(low: int, high: int) -> int:
    """Return a random integer between low and high, both inclusive."""
    diff = (high - low) + 1
    return int(diff * random.random()) + low


def random_percent(low: float, high: float) -> float:
    """Return a random float between low and high."""
    return random.random() * (high - low) + low


def log(fmt: str, *args: object) -> str:
    """Write a printf-style formatted message to stdout and return what was written."""
    text = fmt % args if args else fmt
    text = text[: _LOG_BUFFER_SIZE - 1]
    sys.stdout.write(text)
    return text