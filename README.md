# fm7vm

Building blocks for an FM-7 / FM77AV virtual machine: the snapshot file
format, two memory-mapped devices, and the keyboard, joystick and settings
tables an emulator front end works with.

The package covers:

- **State files** (`fm7vm.statefile`): the `XM7 VM STATE` snapshot format.
  `StateWriter` and `StateReader` write and read big-endian bytes, words,
  double words and booleans (`0x00` / `0xFF`). `save_state(path, info,
  components)` writes the header, a `SystemInfo` (`fm7_ver`, `boot_mode`)
  and then calls `save(writer)` on each component in turn;
  `load_state(path, components)` checks the header, calls
  `load(reader, version)` on each component and returns the `SystemInfo`.
  A bad header, a version below 2, a short read or any failing component
  raises `StateError`.
- **TTL palette** (`fm7vm.ttlpalet.TtlPalette`): the eight digital colour
  registers at `$FD38`-`$FD3F`.
- **Sub-CPU memory** (`fm7vm.submem.SubMemory`): the sub CPU's address
  space — VRAM planes hidden by `multi_page`, work RAM, shared RAM, I/O at
  `$D400`-`$D4FF` dispatched to a list of `devices`, and the type A/B/C
  system ROMs and character ROM banks. `read_no_io` reads without side
  effects.
- **Key tables** (`fm7vm.dikeys`, `fm7vm.fmkeys`): names of DirectInput
  scan codes, and FM77AV key codes with their legends and kana.
- **Key mapping** (`fm7vm.keymap`): `keymap_rows`, `assign_key` and
  `fm77av_to_directinput` for a 256-entry map from scan code to FM77AV key.
- **Joystick assignment** (`fm7vm.joystick`): conversion between stored
  joystick codes and the choices shown for them, in joystick or keyboard
  mode.
- **Settings** (`fm7vm.settings`): `load_config` and `save_config` read and
  write the emulator's INI file as a `Config` object. Values that are
  missing or out of range are replaced by their defaults; entries of the
  file that are not settings are kept when saving.

## Installing

```
pip install .
```

The package needs nothing beyond the Python standard library (3.10 or
later). To run the test suite:

```
pip install ".[test]"
pytest
```

## State files

A component is any object with `save(writer)` and `load(reader, version)`
methods; the palette and sub-CPU memory both qualify.

```python
from fm7vm.statefile import StateError, SystemInfo, load_state, save_state
from fm7vm.ttlpalet import TtlPalette

palette = TtlPalette()
palette.write(0xFD39, 0x03)
save_state("snapshot.xm7", SystemInfo(fm7_ver=2, boot_mode=0), [palette])

restored = TtlPalette()
try:
    info = load_state("snapshot.xm7", [restored])
except StateError as exc:
    print("could not load:", exc)
```

## Devices

Each device is a plain object. Addresses it does not own are left alone:
`TtlPalette.read` returns `None` and `TtlPalette.write` returns `False`, so
a memory bus can offer an access to each device in turn.

```python
from fm7vm.ttlpalet import TtlPalette

palette = TtlPalette(notify=lambda: print("palette changed"))
palette.reset()
palette.write(0xFD38, 0x05)
print(hex(palette.read(0xFD38)))   # 0xf5: the upper nibble reads as 0xF0
```

`SubMemory` is built from the four ROM images (type C: `0x2800` bytes;
types A, B and the character ROM: `0x2000` bytes each) and a shared RAM
`bytearray` of at least `0x80` bytes; wrong sizes raise `ValueError`.

## Key tables and settings

```python
from fm7vm.dikeys import directinput_name
from fm7vm.fmkeys import fm77av_key_names
from fm7vm.keymap import assign_key, keymap_rows
from fm7vm.settings import load_config, save_config

print(directinput_name(0x01))      # DIK_ESCAPE
print(fm77av_key_names(0x02))      # ('1', 'ぬ')

config = load_config("fm7.ini")
config.key_map = assign_key(config.key_map, 0, 0x01)   # ESC key on DIK_ESCAPE
for row in keymap_rows(config.key_map)[:3]:
    print(row.label, row.name, row.dikey_name)
save_config(config, "fm7.ini")
```

## What this package does not do

It is a set of parts, not a running machine. It has no CPU cores, no
scheduler, no display, sound, disk, cassette tape or printer devices, and
no tools for creating or converting disk and tape images or capturing the
screen. It provides no command-line program and no user interface; the
settings, key and joystick tables are for a front end to build on.