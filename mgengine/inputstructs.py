"""Enumerations describing keys, mouse axes, input devices and cursor modes."""

from __future__ import annotations

from enum import Enum, IntEnum


class KeyboardKeys(IntEnum):
    """Engine keyboard key codes, independent of any windowing backend."""

    UNKNOWN = -1
    KEY_ARROW_LEFT = 0
    KEY_ARROW_RIGHT = 1
    KEY_ARROW_UP = 2
    KEY_ARROW_DOWN = 3
    KEY_SPACE = 4
    KEY_ESCAPE = 5
    KEY_ENTER = 6
    KEY_A = 7
    KEY_B = 8
    KEY_C = 9
    KEY_D = 10
    KEY_E = 11
    KEY_F = 12
    KEY_G = 13
    KEY_H = 14
    KEY_I = 15
    KEY_J = 16
    KEY_K = 17
    KEY_L = 18
    KEY_M = 19
    KEY_N = 20
    KEY_O = 21
    KEY_P = 22
    KEY_Q = 23
    KEY_R = 24
    KEY_S = 25
    KEY_T = 26
    KEY_U = 27
    KEY_V = 28
    KEY_W = 29
    KEY_X = 30
    KEY_Y = 31
    KEY_Z = 32
    KEY_0 = 33
    KEY_1 = 34
    KEY_2 = 35
    KEY_3 = 36
    KEY_4 = 37
    KEY_5 = 38
    KEY_6 = 39
    KEY_7 = 40
    KEY_8 = 41
    KEY_9 = 42
    KEY_F1 = 43
    KEY_F2 = 44
    KEY_F3 = 45
    KEY_F4 = 46
    KEY_F5 = 47
    KEY_F6 = 48
    KEY_F7 = 49
    KEY_F8 = 50
    KEY_F9 = 51
    KEY_F10 = 52
    KEY_F11 = 53
    KEY_F12 = 54
    KEY_LEFT_SHIFT = 55
    KEY_LEFT_CONTROL = 56
    KEY_RIGHT_SHIFT = 57
    KEY_RIGHT_CONTROL = 58
    KEY_LEFT_ALT = 59
    KEY_RIGHT_ALT = 60
    KEY_LEFT_SUPER = 61
    KEY_RIGHT_SUPER = 62
    KEY_TAB = 63
    KEY_CAPS_LOCK = 64
    KEY_BACKSPACE = 65
    KEY_DELETE = 66
    KEY_INSERT = 67
    KEY_HOME = 68
    KEY_END = 69
    KEY_PAGE_UP = 70
    KEY_PAGE_DOWN = 71
    KEY_KP_0 = 72
    KEY_KP_1 = 73
    KEY_KP_2 = 74
    KEY_KP_3 = 75
    KEY_KP_4 = 76
    KEY_KP_5 = 77
    KEY_KP_6 = 78
    KEY_KP_7 = 79
    KEY_KP_8 = 80
    KEY_KP_9 = 81
    KEY_KP_DECIMAL = 82
    KEY_KP_DIVIDE = 83
    KEY_KP_MULTIPLY = 84
    KEY_KP_SUBTRACT = 85
    KEY_KP_ADD = 86
    KEY_KP_ENTER = 87
    KEY_KP_EQUAL = 88
    KEY_NUM_LOCK = 89
    KEY_PRINT_SCREEN = 90
    KEY_SCROLL_LOCK = 91
    KEY_PAUSE = 92
    KEY_MENU = 93
    KEY_LEFT_BRACKET = 94
    KEY_RIGHT_BRACKET = 95
    KEY_SEMICOLON = 96
    KEY_APOSTROPHE = 97
    KEY_COMMA = 98
    KEY_PERIOD = 99
    KEY_SLASH = 100
    KEY_BACKSLASH = 101
    KEY_MINUS = 102
    KEY_EQUAL = 103
    KEY_GRAVE_ACCENT = 104
    KEY_WORLD_1 = 105
    KEY_WORLD_2 = 106
    KEY_LAST = 106


class MouseAxis(Enum):
    """Mouse movement and scroll axes."""

    UNKNOWN = 0
    X = 1
    Y = 2
    SCROLL_X = 3
    SCROLL_Y = 4


class InputDevices(Enum):
    """Kinds of input device a mapping can read from."""

    KEYBOARD = 0
    JOYSTICK = 1
    MOUSE = 2


class CursorModes(IntEnum):
    """How the cursor behaves inside the window."""

    NORMAL = 0
    HIDDEN = 1
    DISABLED = 2