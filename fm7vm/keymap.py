"""Mapping of host DirectInput scan codes onto FM77AV keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from fm7vm.dikeys import directinput_name
from fm7vm.fmkeys import fm77av_key_names, fm77av_keycodes, index_to_fm77av

KEYMAP_SIZE = 256


@dataclass(frozen=True)
class KeyRow:
    """One line of the key assignment table.

    ``index`` is the row number, ``keycode`` the FM77AV key code and
    ``label`` that code in two hex digits. ``dikey`` is the scan code
    mapped to the key (0 when none) and ``dikey_name`` its name, or an
    empty string when the code has no name.
    """

    index: int
    keycode: int
    label: str
    name: str
    kana: Optional[str]
    dikey: int
    dikey_name: str


def _check_keymap(keymap: Sequence[int]) -> None:
    if len(keymap) != KEYMAP_SIZE:
        raise ValueError(f"key map must have {KEYMAP_SIZE} entries")


def fm77av_to_directinput(keymap: Sequence[int], keycode: int) -> int:
    """The lowest scan code mapped to ``keycode``, or 0 if none is."""
    _check_keymap(keymap)
    return next((dikey for dikey, value in enumerate(keymap) if value == keycode), 0)


def assign_key(keymap: Sequence[int], index: int, dikey: int) -> List[int]:
    """Return a copy of ``keymap`` with the ``index``-th key moved to ``dikey``.

    Any other scan code that was mapped to the same key is cleared.
    """
    _check_keymap(keymap)
    if not 0 <= dikey < KEYMAP_SIZE:
        raise ValueError(f"scan code out of range: {dikey}")
    keycode = index_to_fm77av(index)
    result = [0 if value == keycode else value for value in keymap]
    result[dikey] = keycode
    return result


def keymap_rows(keymap: Sequence[int]) -> List[KeyRow]:
    """One row per FM77AV key that has a legend, in key code order."""
    _check_keymap(keymap)
    rows: List[KeyRow] = []
    for index, keycode in enumerate(fm77av_keycodes()):
        name, kana = fm77av_key_names(keycode)
        dikey = fm77av_to_directinput(keymap, keycode)
        rows.append(
            KeyRow(
                index=index,
                keycode=keycode,
                label=f"{keycode:02X}",
                name=name or "",
                kana=kana,
                dikey=dikey,
                dikey_name=directinput_name(dikey) or "",
            )
        )
    return rows