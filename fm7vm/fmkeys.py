"""The FM77AV keyboard: key codes and their legends."""

from __future__ import annotations

from bisect import bisect_left
from typing import List, Optional, Tuple

KeyNames = Tuple[Optional[str], Optional[str]]

# Indexed by FM77AV key code: (main legend, kana legend or note).
_KEYS: Tuple[KeyNames, ...] = (
    (None, None),  # 0x00
    ("ESC", None),  # 0x01
    ("1", "ぬ"),  # 0x02
    ("2", "ふ"),  # 0x03
    ("3", "あ"),  # 0x04
    ("4", "う"),  # 0x05
    ("5", "え"),  # 0x06
    ("6", "お"),  # 0x07
    ("7", "や"),  # 0x08
    ("8", "ゆ"),  # 0x09
    ("9", "よ"),  # 0x0A
    ("0", "わ"),  # 0x0B
    ("-", "ほ"),  # 0x0C
    ("^", "へ"),  # 0x0D
    ("\\", "ー"),  # 0x0E
    ("BS", None),  # 0x0F
    ("TAB", None),  # 0x10
    ("Q", "た"),  # 0x11
    ("W", "て"),  # 0x12
    ("E", "い"),  # 0x13
    ("R", "す"),  # 0x14
    ("T", "か"),  # 0x15
    ("Y", "ん"),  # 0x16
    ("U", "な"),  # 0x17
    ("I", "に"),  # 0x18
    ("O", "ら"),  # 0x19
    ("P", "せ"),  # 0x1A
    ("@", "゛"),  # 0x1B
    ("[", "゜"),  # 0x1C
    ("RETURN", None),  # 0x1D
    ("A", "ち"),  # 0x1E
    ("S", "と"),  # 0x1F
    ("D", "し"),  # 0x20
    ("F", "は"),  # 0x21
    ("G", "き"),  # 0x22
    ("H", "く"),  # 0x23
    ("J", "ま"),  # 0x24
    ("K", "の"),  # 0x25
    ("L", "り"),  # 0x26
    (";", "れ"),  # 0x27
    (":", "け"),  # 0x28
    ("]", "む"),  # 0x29
    ("Z", "つ"),  # 0x2A
    ("X", "さ"),  # 0x2B
    ("C", "そ"),  # 0x2C
    ("V", "ひ"),  # 0x2D
    ("B", "こ"),  # 0x2E
    ("N", "み"),  # 0x2F
    ("M", "も"),  # 0x30
    (",", "ね"),  # 0x31
    (".", "る"),  # 0x32
    ("/", "め"),  # 0x33
    ("_", "ろ"),  # 0x34
    ("SPACE(右)", None),  # 0x35
    ("*", "テンキー"),  # 0x36
    ("/", "テンキー"),  # 0x37
    ("+", "テンキー"),  # 0x38
    ("-", "テンキー"),  # 0x39
    ("7", "テンキー"),  # 0x3A
    ("8", "テンキー"),  # 0x3B
    ("9", "テンキー"),  # 0x3C
    ("=", "テンキー"),  # 0x3D
    ("4", "テンキー"),  # 0x3E
    ("5", "テンキー"),  # 0x3F
    ("6", "テンキー"),  # 0x40
    (",", "テンキー"),  # 0x41
    ("1", "テンキー"),  # 0x42
    ("2", "テンキー"),  # 0x43
    ("3", "テンキー"),  # 0x44
    ("RETURN", "テンキー"),  # 0x45
    ("0", "テンキー"),  # 0x46
    (".", "テンキー"),  # 0x47
    ("INS", None),  # 0x48
    ("EL", None),  # 0x49
    ("CLS", None),  # 0x4A
    ("DEL", None),  # 0x4B
    ("DUP", None),  # 0x4C
    ("↑", None),  # 0x4D
    ("HOME", None),  # 0x4E
    ("←", None),  # 0x4F
    ("↓", None),  # 0x50
    ("→", None),  # 0x51
    ("CTRL", None),  # 0x52
    ("SHIFT(左)", None),  # 0x53
    ("SHIFT(右)", None),  # 0x54
    ("CAP", None),  # 0x55
    ("GRAPH", None),  # 0x56
    ("SPACE(左)", None),  # 0x57
    ("SPACE(中)", None),  # 0x58
    (None, None),  # 0x59
    ("かな", None),  # 0x5A
    (None, None),  # 0x5B
    ("BREAK", None),  # 0x5C
    ("PF1", None),  # 0x5D
    ("PF2", None),  # 0x5E
    ("PF3", None),  # 0x5F
    ("PF4", None),  # 0x60
    ("PF5", None),  # 0x61
    ("PF6", None),  # 0x62
    ("PF7", None),  # 0x63
    ("PF8", None),  # 0x64
    ("PF9", None),  # 0x65
    ("PF10", None),  # 0x66
)

_KEYCODES: Tuple[int, ...] = tuple(
    code for code, (name, _) in enumerate(_KEYS) if name is not None
)


def index_to_fm77av(index: int) -> int:
    """Key code of the ``index``-th named key, counting from zero."""
    if not 0 <= index < len(_KEYCODES):
        raise IndexError(f"key index out of range: {index}")
    return _KEYCODES[index]


def fm77av_to_index(keycode: int) -> int:
    """Position of ``keycode`` among the named keys.

    For a code with no legend this is the position the next named key has;
    codes past the end of the table give the number of named keys.
    """
    if keycode < 0:
        raise ValueError(f"key code out of range: {keycode}")
    return bisect_left(_KEYCODES, keycode)


def fm77av_key_names(keycode: int) -> KeyNames:
    """The (legend, kana legend) pair of a key code; either may be None."""
    if not 0 <= keycode < len(_KEYS):
        raise ValueError(f"key code out of range: {keycode}")
    return _KEYS[keycode]


def fm77av_keycodes() -> List[int]:
    """All key codes that carry a legend, in ascending order."""
    return list(_KEYCODES)