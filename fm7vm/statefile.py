"""Machine state files: big-endian field encoding and the file header."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Iterable, Protocol

HEADER_PREFIX = b"XM7 VM STATE   "
STATE_VERSION = 5
MIN_VERSION = 2


class StateError(Exception):
    """Raised when a state file cannot be written or read back."""


class StateWriter:
    """Writes state fields to a binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream

    def write(self, data: bytes) -> None:
        try:
            self.stream.write(bytes(data))
        except OSError as exc:
            raise StateError(f"write failed: {exc}") from exc

    def write_byte(self, value: int) -> None:
        self.write(bytes([value & 0xFF]))

    def write_word(self, value: int) -> None:
        self.write((value & 0xFFFF).to_bytes(2, "big"))

    def write_dword(self, value: int) -> None:
        self.write((value & 0xFFFFFFFF).to_bytes(4, "big"))

    def write_bool(self, value: bool) -> None:
        self.write_byte(0xFF if value else 0x00)


class StateReader:
    """Reads state fields from a binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream

    def read(self, size: int) -> bytes:
        try:
            data = self.stream.read(size)
        except OSError as exc:
            raise StateError(f"read failed: {exc}") from exc
        if data is None or len(data) != size:
            raise StateError(f"expected {size} bytes, got {len(data or b'')}")
        return data

    def read_byte(self) -> int:
        return self.read(1)[0]

    def read_word(self) -> int:
        return int.from_bytes(self.read(2), "big")

    def read_dword(self) -> int:
        return int.from_bytes(self.read(4), "big")

    def read_bool(self) -> bool:
        value = self.read_byte()
        if value == 0x00:
            return False
        if value == 0xFF:
            return True
        raise StateError(f"invalid boolean byte 0x{value:02x}")


@dataclass
class SystemInfo:
    """System-wide settings stored at the start of a state file."""

    fm7_ver: int = 2
    boot_mode: int = 0


class SaveableComponent(Protocol):
    def save(self, writer: StateWriter) -> None: ...


class LoadableComponent(Protocol):
    def load(self, reader: StateReader, version: int) -> None: ...


def save_state(path, info: SystemInfo, components: Iterable[SaveableComponent]) -> None:
    """Write the header, system info and every component, in order.

    Every component is given its turn even if an earlier one fails; a
    StateError naming the failures is raised at the end.
    """
    failures: list[str] = []
    try:
        stream = open(path, "wb")
    except OSError as exc:
        raise StateError(f"cannot open {path}: {exc}") from exc
    with stream:
        writer = StateWriter(stream)
        writer.write(HEADER_PREFIX + str(STATE_VERSION).encode("ascii"))
        writer.write_word(info.fm7_ver)
        writer.write_word(info.boot_mode)
        for component in components:
            try:
                component.save(writer)
            except StateError as exc:
                failures.append(f"{type(component).__name__}: {exc}")
    if failures:
        raise StateError("; ".join(failures))


def load_state(path, components: Iterable[LoadableComponent]) -> SystemInfo:
    """Read a state file, loading each component in order.

    Returns the system info from the file. Raises StateError for a bad
    header, an unsupported version, or if any component failed to load.
    """
    try:
        stream = open(path, "rb")
    except OSError as exc:
        raise StateError(f"cannot open {path}: {exc}") from exc
    failures: list[str] = []
    with stream:
        reader = StateReader(stream)
        header = reader.read(16)
        if header[:15] != HEADER_PREFIX:
            raise StateError("not a machine state file")
        version = header[15] - 0x30
        if version < MIN_VERSION:
            raise StateError(f"unsupported state version {version}")
        info = SystemInfo(fm7_ver=reader.read_word(), boot_mode=reader.read_word())
        for component in components:
            try:
                component.load(reader, version)
            except StateError as exc:
                failures.append(f"{type(component).__name__}: {exc}")
    if failures:
        raise StateError("; ".join(failures))
    return info