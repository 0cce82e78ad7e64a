import io

import pytest

from fm7vm.statefile import StateError, StateReader, StateWriter
from fm7vm.ttlpalet import TtlPalette


def test_reset_gives_identity_palette():
    pal = TtlPalette()
    pal.write(0xFD38, 5)
    pal.reset()
    assert [pal.read(0xFD38 + i) for i in range(8)] == [0xF0 | i for i in range(8)]


def test_write_masks_to_three_bits():
    pal = TtlPalette()
    assert pal.write(0xFD3A, 0xFF) is True
    assert pal.read(0xFD3A) == 0xF7
    assert pal.palette[2] == 7


def test_outside_range_not_handled():
    pal = TtlPalette()
    assert pal.read(0xFD37) is None
    assert pal.read(0xFD40) is None
    assert pal.write(0xFD40, 1) is False
    assert pal.palette == list(range(8))


def test_notify_called_on_reset_and_write():
    calls = []
    pal = TtlPalette(lambda: calls.append(1))
    pal.reset()
    pal.write(0xFD3F, 1)
    pal.write(0x1234, 1)
    assert len(calls) == 2


def test_save_load_round_trip():
    pal = TtlPalette()
    for i in range(8):
        pal.write(0xFD38 + i, 7 - i)
    buf = io.BytesIO()
    pal.save(StateWriter(buf))
    assert buf.getvalue() == bytes(7 - i for i in range(8))
    other = TtlPalette()
    other.load(StateReader(io.BytesIO(buf.getvalue())), 5)
    assert other.palette == pal.palette


def test_load_old_version_raises():
    with pytest.raises(StateError):
        TtlPalette().load(StateReader(io.BytesIO(bytes(8))), 1)