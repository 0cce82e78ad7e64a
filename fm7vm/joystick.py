"""Joystick assignment: codes stored in the settings and the choices shown for them.

In joystick mode the choices are: not used, up, down, left, right,
button A, button B. In keyboard mode choice 0 is "not used" and choice
``n`` is the ``n``-th entry of ``keyboard_choices()``.
"""

from __future__ import annotations

from typing import List

from fm7vm.fmkeys import (
    fm77av_key_names,
    fm77av_keycodes,
    fm77av_to_index,
    index_to_fm77av,
)
from fm7vm.settings import JOY_CODE_MAX

DIRECTION_BASE = 0x70
BUTTON_BASE = 0x74
JOYSTICK_CHOICES = 7
LAST_KEYCODE = 0x66


def joystick_code_to_choice(code: int, keyboard: bool) -> int:
    """The choice that shows a stored code."""
    if code < 0:
        raise ValueError(f"joystick code out of range: {code}")
    if keyboard:
        if code == 0 or code > LAST_KEYCODE:
            return 0
        return fm77av_to_index(code) + 1
    if code > JOY_CODE_MAX:
        raise ValueError(f"joystick code out of range: {code}")
    if code < DIRECTION_BASE:
        return 0
    if code < BUTTON_BASE:
        return code - DIRECTION_BASE + 1
    return code - BUTTON_BASE + 5


def joystick_choice_to_code(choice: int, keyboard: bool) -> int:
    """The code stored for a choice."""
    if keyboard:
        if not 0 <= choice <= len(fm77av_keycodes()):
            raise ValueError(f"choice out of range: {choice}")
        return 0 if choice == 0 else index_to_fm77av(choice - 1)
    if not 0 <= choice < JOYSTICK_CHOICES:
        raise ValueError(f"choice out of range: {choice}")
    if choice == 0:
        return 0
    if choice < 5:
        return choice - 1 + DIRECTION_BASE
    return choice - 5 + BUTTON_BASE


def keyboard_choices() -> List[str]:
    """Legends of the keys selectable in keyboard mode, after "not used"."""
    return [fm77av_key_names(code)[0] or "" for code in fm77av_keycodes()]