"""Sub-CPU address space: VRAM, work RAM, shared RAM, I/O and ROM banks."""

from __future__ import annotations

from typing import Callable, Optional, Protocol, Sequence

from fm7vm.statefile import StateError, StateReader, StateWriter

VRAM_SIZE = 0x18000
VRAM_B_OFFSET = 0xC000
SUBROM_C_SIZE = 0x2800
SUBROM_SIZE = 0x2000
CGROM_SIZE = 0x2000
SUB_RAM_SIZE = 0x1680
SUB_IO_SIZE = 0x100
SHARED_RAM_SIZE = 0x80


class SubIoDevice(Protocol):
    def read(self, addr: int) -> Optional[int]: ...

    def write(self, addr: int, value: int) -> bool: ...


def _check_size(name: str, data, size: int) -> bytes:
    data = bytes(data)
    if len(data) != size:
        raise ValueError(f"{name} must be {size:#x} bytes, got {len(data):#x}")
    return data


class SubMemory:
    """Memory map seen by the sub CPU.

    ``multi_page`` and ``alu_command`` mirror the registers of the same name;
    ``devices`` lists I/O handlers tried in order for $D400-$D4FF;
    ``on_alu_access`` is called with the address of VRAM accesses handled by
    the logic/line unit, and ``on_vram_write`` with each plain VRAM write.
    """

    def __init__(self, rom_c, rom_a, rom_b, rom_cg, shared_ram: bytearray) -> None:
        self.rom_c = _check_size("type C ROM", rom_c, SUBROM_C_SIZE)
        self.rom_a = _check_size("type A ROM", rom_a, SUBROM_SIZE)
        self.rom_b = _check_size("type B ROM", rom_b, SUBROM_SIZE)
        self.rom_cg = _check_size("character ROM", rom_cg, CGROM_SIZE)
        if len(shared_ram) < SHARED_RAM_SIZE:
            raise ValueError(f"shared RAM must hold at least {SHARED_RAM_SIZE:#x} bytes")
        self.shared_ram = shared_ram

        self.vram = bytearray(VRAM_SIZE)
        self.ram = bytearray(SUB_RAM_SIZE)
        self.io = bytearray(b"\xff" * SUB_IO_SIZE)

        self.multi_page = 0
        self.alu_command = 0
        self.devices: list[SubIoDevice] = []
        self.on_alu_access: Optional[Callable[[int], None]] = None
        self.on_vram_write: Optional[Callable[[int, int], None]] = None

        self.vram_offset = 0
        self.vram_active = 0
        self.subrom_bank = 0
        self.cgrom_bank = 0
        self.reset()

    @property
    def vram_b(self) -> memoryview:
        return memoryview(self.vram)[VRAM_B_OFFSET:]

    def reset(self) -> None:
        self.vram_offset = 0
        self.vram_active = 0
        self.subrom_bank = 0
        self.cgrom_bank = 0
        self.io[:] = b"\xff" * SUB_IO_SIZE

    @staticmethod
    def _check_addr(addr: int) -> None:
        if not 0 <= addr <= 0xFFFF:
            raise ValueError(f"address out of range: {addr:#x}")

    def _plane_hidden(self, addr: int) -> bool:
        return bool(self.multi_page & (1 << (addr >> 14)))

    def _alu(self, addr: int) -> None:
        if self.on_alu_access is not None:
            self.on_alu_access(addr)

    def _rom_read(self, addr: int) -> Optional[int]:
        if addr >= 0xE000:
            if self.subrom_bank == 0:
                return self.rom_c[addr - 0xD800]
            if self.subrom_bank == 1:
                return self.rom_a[addr - 0xE000]
            if self.subrom_bank == 2:
                return self.rom_b[addr - 0xE000]
        if addr >= 0xD800:
            return self.rom_cg[self.cgrom_bank * 0x0800 + (addr - 0xD800)]
        return None

    def read(self, addr: int) -> int:
        self._check_addr(addr)
        if addr < 0xC000:
            if self._plane_hidden(addr):
                return 0xFF
            self._alu(addr)
            return self.vram[self.vram_offset + addr]
        if addr < 0xD380:
            return self.ram[addr - 0xC000]
        if addr < 0xD400:
            return self.shared_ram[addr - 0xD380]
        rom = self._rom_read(addr)
        if rom is not None:
            return rom
        if addr >= 0xD500:
            return self.ram[addr - 0xD500 + 0x1380]
        for device in self.devices:
            value = device.read(addr)
            if value is not None:
                return value
        return 0xFF

    def read_no_io(self, addr: int) -> int:
        """Read without side effects, as a debugger would."""
        self._check_addr(addr)
        if addr < 0xC000:
            return self.vram[self.vram_offset + addr]
        if addr < 0xD380:
            return self.ram[addr - 0xC000]
        if addr < 0xD400:
            return self.shared_ram[addr - 0xD380]
        if addr < 0xD500:
            return self.io[addr - 0xD400]
        if addr < 0xD800:
            return self.ram[addr - 0xD500 + 0x1380]
        rom = self._rom_read(addr)
        assert rom is not None
        return rom

    def write(self, addr: int, value: int) -> None:
        self._check_addr(addr)
        value &= 0xFF
        if addr < 0xC000:
            if self._plane_hidden(addr):
                return
            # The logic unit also acts on plain memory writes.
            if self.alu_command & 0x80:
                self._alu(addr)
                return
            self.vram[self.vram_offset + addr] = value
            if self.on_vram_write is not None:
                self.on_vram_write(addr, value)
            return
        if addr < 0xD380:
            self.ram[addr - 0xC000] = value
            return
        if addr < 0xD400:
            self.shared_ram[addr - 0xD380] = value
            return
        if 0xD500 <= addr < 0xD800:
            self.ram[addr - 0xD500 + 0x1380] = value
            return
        if addr >= 0xD800:
            return
        self.io[addr - 0xD400] = value
        for device in self.devices:
            if device.write(addr, value):
                return

    def save(self, writer: StateWriter) -> None:
        writer.write(self.vram)
        writer.write(self.ram)
        writer.write(self.io)
        writer.write_byte(self.subrom_bank)
        writer.write_byte(self.cgrom_bank)

    def load(self, reader: StateReader, version: int) -> None:
        if version < 2:
            raise StateError(f"sub memory state version {version} not supported")
        self.vram[:] = reader.read(VRAM_SIZE)
        self.ram[:] = reader.read(SUB_RAM_SIZE)
        self.io[:] = reader.read(SUB_IO_SIZE)
        self.subrom_bank = reader.read_byte()
        self.cgrom_bank = reader.read_byte()


def pattern(size: int, seed: int) -> bytes:
    """Bytes whose value depends on position; handy for telling banks apart."""
    return bytes((i + seed) & 0xFF for i in range(size))


__all__: Sequence[str] = ("SubMemory", "SubIoDevice")