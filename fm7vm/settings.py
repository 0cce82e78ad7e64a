"""Emulator settings stored in an INI file."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

KEYMAP_SIZE = 256
JOY_PORTS = 2
JOY_BUTTONS = 2
JOY_CODES = 7
JOY_CODE_MAX = 0x75
DEFAULT_JOY_CODES = (0x70, 0x71, 0x72, 0x73, 0, 0x74, 0x75)
SAMPLE_RATES = (0, 22050, 44100)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

_Ini = Dict[str, Dict[str, str]]


def _default_joy_codes() -> List[List[int]]:
    return [list(DEFAULT_JOY_CODES) for _ in range(JOY_PORTS)]


@dataclass
class Config:
    """All user settings, with the values used when nothing is stored."""

    fm7_ver: int = 2
    cycle_steel: bool = True
    main_speed: int = 1752
    mmr_speed: int = 1466
    tape_full_speed: bool = True

    sample_rate: int = 44100
    sound_buffer: int = 80
    beep_freq: int = 1200

    key_map: List[int] = field(default_factory=lambda: [0] * KEYMAP_SIZE)

    joy_type: List[int] = field(default_factory=lambda: [1, 2])
    joy_rapid: List[List[int]] = field(
        default_factory=lambda: [[0] * JOY_BUTTONS for _ in range(JOY_PORTS)]
    )
    joy_code: List[List[int]] = field(default_factory=_default_joy_codes)

    dd480_line: bool = False
    full_scan: bool = False
    dd480_status: bool = True

    whg_enable: bool = True
    digitize_enable: bool = True

    def __post_init__(self) -> None:
        if len(self.key_map) != KEYMAP_SIZE:
            raise ValueError(f"key map must have {KEYMAP_SIZE} entries")


def _find(mapping: Dict[str, object], name: str) -> Optional[str]:
    folded = name.casefold()
    for key in mapping:
        if key.casefold() == folded:
            return key
    return None


def _read_ini(path) -> _Ini:
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        return {}
    sections: _Ini = {}
    current: Optional[Dict[str, str]] = None
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith(";"):
            continue
        if line.startswith("["):
            end = line.find("]")
            name = (line[1:end] if end > 0 else line[1:]).strip()
            existing = _find(sections, name)
            if existing is None:
                sections[name] = {}
                existing = name
            current = sections[existing]
            continue
        if current is None or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        # The first occurrence of a key wins.
        if _find(current, key) is None:
            current[key] = value.strip()
    return sections


def _write_ini(path, sections: _Ini) -> None:
    lines: List[str] = []
    for name, entries in sections.items():
        if lines:
            lines.append("")
        lines.append(f"[{name}]")
        lines.extend(f"{key}={value}" for key, value in entries.items())
    Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")


class _Section:
    def __init__(self, ini: _Ini, name: str) -> None:
        found = _find(ini, name)
        if found is None:
            ini[name] = {}
            found = name
        self.entries = ini[found]

    def get_int(self, key: str, default: int) -> int:
        found = _find(self.entries, key)
        if found is None:
            return default
        value = self.entries[found]
        if not value:
            return default
        match = _INT_PREFIX.match(value)
        return int(match.group(1)) if match else 0

    def get_bool(self, key: str, default: bool) -> bool:
        return self.get_int(key, 1 if default else 0) != 0

    def set_int(self, key: str, value: int) -> None:
        found = _find(self.entries, key)
        if found is not None:
            del self.entries[found]
        self.entries[key] = str(int(value))

    def set_bool(self, key: str, value: bool) -> None:
        self.set_int(key, 1 if value else 0)


def load_config(path, default_keymap: Optional[Sequence[int]] = None) -> Config:
    """Read settings from ``path``; values missing or out of range get defaults.

    ``default_keymap`` is used when the file maps no key at all.
    """
    ini = _read_ini(path)
    config = Config()

    general = _Section(ini, "General")
    config.fm7_ver = general.get_int("Version", 2)
    if not 0 <= config.fm7_ver <= 2:
        config.fm7_ver = 2
    config.cycle_steel = general.get_bool("CycleSteel", True)
    config.main_speed = general.get_int("MainSpeed", 1752)
    if not 0 <= config.main_speed <= 9999:
        config.main_speed = 1752
    config.mmr_speed = general.get_int("MMRSpeed", 1466)
    if not 0 <= config.mmr_speed <= 9999:
        config.mmr_speed = 1466
    config.tape_full_speed = general.get_bool("TapeFullSpeed", True)

    sound = _Section(ini, "Sound")
    config.sample_rate = sound.get_int("SampleRate", 44100)
    if config.sample_rate not in SAMPLE_RATES:
        config.sample_rate = 44100
    config.sound_buffer = sound.get_int("SoundBuffer", 80)
    if not 20 <= config.sound_buffer <= 1000:
        config.sound_buffer = 80
    config.beep_freq = sound.get_int("BeepFreq", 1200)
    if not 100 <= config.beep_freq <= 9999:
        config.beep_freq = 1200

    keyboard = _Section(ini, "Keyboard")
    config.key_map = [keyboard.get_int(f"Key{i}", 0) & 0xFF for i in range(KEYMAP_SIZE)]
    if not any(config.key_map) and default_keymap is not None:
        if len(default_keymap) != KEYMAP_SIZE:
            raise ValueError(f"default key map must have {KEYMAP_SIZE} entries")
        config.key_map = [value & 0xFF for value in default_keymap]

    joystick = _Section(ini, "JoyStick")
    for port in range(JOY_PORTS):
        joy_type = joystick.get_int(f"Type{port}", port + 1)
        config.joy_type[port] = joy_type if 0 <= joy_type <= 3 else port + 1

        for button in range(JOY_BUTTONS):
            rapid = joystick.get_int(f"Rapid{port * 10 + button}", 0)
            config.joy_rapid[port][button] = rapid if 0 <= rapid <= 9 else 0

        codes = [joystick.get_int(f"Code{port * 10 + j}", -1) for j in range(JOY_CODES)]
        if all(0 <= code <= JOY_CODE_MAX for code in codes):
            config.joy_code[port] = codes
        else:
            config.joy_code[port] = list(DEFAULT_JOY_CODES)

    screen = _Section(ini, "Screen")
    config.dd480_line = screen.get_bool("DD480Line", False)
    config.full_scan = screen.get_bool("FullScan", False)
    config.dd480_status = screen.get_bool("DD480Status", True)

    option = _Section(ini, "Option")
    config.whg_enable = option.get_bool("WHGEnable", True)
    config.digitize_enable = option.get_bool("DigitizeEnable", True)
    return config


def save_config(config: Config, path) -> None:
    """Write settings to ``path``, keeping entries of the file that are not ours.

    Unmapped keys (value 0) are not written.
    """
    ini = _read_ini(path)

    general = _Section(ini, "General")
    general.set_int("Version", config.fm7_ver)
    general.set_bool("CycleSteel", config.cycle_steel)
    general.set_int("MainSpeed", config.main_speed)
    general.set_int("MMRSpeed", config.mmr_speed)
    general.set_bool("TapeFullSpeed", config.tape_full_speed)

    sound = _Section(ini, "Sound")
    sound.set_int("SampleRate", config.sample_rate)
    sound.set_int("SoundBuffer", config.sound_buffer)
    sound.set_int("BeepFreq", config.beep_freq)

    keyboard = _Section(ini, "Keyboard")
    for code, value in enumerate(config.key_map):
        if value != 0:
            keyboard.set_int(f"Key{code}", value)

    joystick = _Section(ini, "JoyStick")
    for port in range(JOY_PORTS):
        joystick.set_int(f"Type{port}", config.joy_type[port])
        for button in range(JOY_BUTTONS):
            joystick.set_int(f"Rapid{port * 10 + button}", config.joy_rapid[port][button])
        for j in range(JOY_CODES):
            joystick.set_int(f"Code{port * 10 + j}", config.joy_code[port][j])

    screen = _Section(ini, "Screen")
    screen.set_bool("DD480Line", config.dd480_line)
    screen.set_bool("FullScan", config.full_scan)
    screen.set_bool("DD480Status", config.dd480_status)

    option = _Section(ini, "Option")
    option.set_bool("WHGEnable", config.whg_enable)
    option.set_bool("DigitizeEnable", config.digitize_enable)

    _write_ini(path, ini)