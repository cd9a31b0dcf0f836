"""Translation of engine key codes to GLFW key codes."""

from __future__ import annotations

import string
from typing import Dict

from .inputstructs import KeyboardKeys

K = KeyboardKeys

_GLFW_KEYS: Dict[KeyboardKeys, int] = {
    K.KEY_SPACE: 32,
    K.KEY_APOSTROPHE: 39,
    K.KEY_COMMA: 44,
    K.KEY_MINUS: 45,
    K.KEY_PERIOD: 46,
    K.KEY_SLASH: 47,
    K.KEY_SEMICOLON: 59,
    K.KEY_EQUAL: 61,
    K.KEY_LEFT_BRACKET: 91,
    K.KEY_BACKSLASH: 92,
    K.KEY_RIGHT_BRACKET: 93,
    K.KEY_GRAVE_ACCENT: 96,
    K.KEY_WORLD_1: 161,
    K.KEY_WORLD_2: 162,
    K.KEY_ESCAPE: 256,
    K.KEY_ENTER: 257,
    K.KEY_TAB: 258,
    K.KEY_BACKSPACE: 259,
    K.KEY_INSERT: 260,
    K.KEY_DELETE: 261,
    K.KEY_ARROW_RIGHT: 262,
    K.KEY_ARROW_LEFT: 263,
    K.KEY_ARROW_DOWN: 264,
    K.KEY_ARROW_UP: 265,
    K.KEY_PAGE_UP: 266,
    K.KEY_PAGE_DOWN: 267,
    K.KEY_HOME: 268,
    K.KEY_END: 269,
    K.KEY_CAPS_LOCK: 280,
    K.KEY_SCROLL_LOCK: 281,
    K.KEY_NUM_LOCK: 282,
    K.KEY_PRINT_SCREEN: 283,
    K.KEY_PAUSE: 284,
    K.KEY_KP_DECIMAL: 330,
    K.KEY_KP_DIVIDE: 331,
    K.KEY_KP_MULTIPLY: 332,
    K.KEY_KP_SUBTRACT: 333,
    K.KEY_KP_ADD: 334,
    K.KEY_KP_ENTER: 335,
    K.KEY_KP_EQUAL: 336,
    K.KEY_LEFT_SHIFT: 340,
    K.KEY_LEFT_CONTROL: 341,
    K.KEY_LEFT_ALT: 342,
    K.KEY_LEFT_SUPER: 343,
    K.KEY_RIGHT_SHIFT: 344,
    K.KEY_RIGHT_CONTROL: 345,
    K.KEY_RIGHT_ALT: 346,
    K.KEY_RIGHT_SUPER: 347,
    K.KEY_MENU: 348,
}
_GLFW_KEYS.update({K[f"KEY_{c}"]: ord(c) for c in string.ascii_uppercase})
_GLFW_KEYS.update({K[f"KEY_{d}"]: ord(str(d)) for d in range(10)})
_GLFW_KEYS.update({K[f"KEY_F{n}"]: 289 + n for n in range(1, 13)})
_GLFW_KEYS.update({K[f"KEY_KP_{d}"]: 320 + d for d in range(10)})


def glfw_key(key: KeyboardKeys) -> int:
    """Return the GLFW key code for ``key``; raise KeyError if it has none."""
    try:
        return _GLFW_KEYS[KeyboardKeys(key)]
    except (KeyError, ValueError):
        raise KeyError(f"Key {int(key)} not found in GLFW key map") from None