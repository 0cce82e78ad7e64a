import pytest

from fm7vm.fmkeys import fm77av_key_names, fm77av_keycodes
from fm7vm.joystick import (
    joystick_choice_to_code,
    joystick_code_to_choice,
    keyboard_choices,
)
from fm7vm.settings import DEFAULT_JOY_CODES


def test_joystick_codes_pinned():
    assert joystick_code_to_choice(0, False) == 0
    assert joystick_code_to_choice(0x70, False) == 1
    assert joystick_code_to_choice(0x74, False) == 5
    assert joystick_code_to_choice(0x75, False) == 6


def test_default_codes_show_in_order():
    choices = [joystick_code_to_choice(code, False) for code in DEFAULT_JOY_CODES]
    assert choices == [1, 2, 3, 4, 0, 5, 6]


def test_joystick_round_trip():
    for choice in range(7):
        code = joystick_choice_to_code(choice, False)
        assert joystick_code_to_choice(code, False) == choice


def test_joystick_choice_out_of_range():
    with pytest.raises(ValueError):
        joystick_choice_to_code(7, False)


def test_joystick_code_out_of_range():
    with pytest.raises(ValueError):
        joystick_code_to_choice(0x76, False)


def test_keyboard_unused_codes_show_as_none():
    assert joystick_code_to_choice(0, True) == 0
    assert joystick_code_to_choice(0x67, True) == 0
    assert joystick_choice_to_code(0, True) == 0


def test_keyboard_escape_is_first_choice():
    assert joystick_code_to_choice(0x01, True) == 1
    assert keyboard_choices()[0] == "ESC"


def test_keyboard_round_trip_and_labels():
    choices = keyboard_choices()
    assert len(choices) == len(fm77av_keycodes())
    for choice in range(1, len(choices) + 1):
        code = joystick_choice_to_code(choice, True)
        assert joystick_code_to_choice(code, True) == choice
        assert choices[choice - 1] == fm77av_key_names(code)[0]


def test_keyboard_choice_out_of_range():
    with pytest.raises(ValueError):
        joystick_choice_to_code(len(fm77av_keycodes()) + 1, True)


def test_negative_code_rejected():
    with pytest.raises(ValueError):
        joystick_code_to_choice(-1, True)