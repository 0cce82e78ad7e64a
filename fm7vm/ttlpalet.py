"""Eight-entry digital (TTL) colour palette at $FD38-$FD3F."""

from __future__ import annotations

from typing import Callable, Optional

from fm7vm.statefile import StateError, StateReader, StateWriter

PALETTE_FIRST = 0xFD38
PALETTE_LAST = 0xFD3F


class TtlPalette:
    """The digital palette registers."""

    def __init__(self, notify: Optional[Callable[[], None]] = None) -> None:
        self.notify = notify
        self.palette = list(range(8))

    def _changed(self) -> None:
        if self.notify is not None:
            self.notify()

    def reset(self) -> None:
        self.palette = list(range(8))
        self._changed()

    def read(self, addr: int) -> Optional[int]:
        """Return the register value, or None if the address is not ours."""
        if PALETTE_FIRST <= addr <= PALETTE_LAST:
            return self.palette[addr - PALETTE_FIRST] | 0xF0
        return None

    def write(self, addr: int, value: int) -> bool:
        """Store a colour; return whether the address belonged to the palette."""
        if PALETTE_FIRST <= addr <= PALETTE_LAST:
            self.palette[addr - PALETTE_FIRST] = value & 0x07
            self._changed()
            return True
        return False

    def save(self, writer: StateWriter) -> None:
        writer.write(bytes(self.palette))

    def load(self, reader: StateReader, version: int) -> None:
        if version < 2:
            raise StateError(f"palette state version {version} not supported")
        self.palette = list(reader.read(8))