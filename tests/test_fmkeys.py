import pytest

from fm7vm.fmkeys import (
    fm77av_key_names,
    fm77av_keycodes,
    fm77av_to_index,
    index_to_fm77av,
)


def test_first_named_key_is_escape():
    assert index_to_fm77av(0) == 0x01
    assert fm77av_key_names(0x01) == ("ESC", None)


def test_key_with_kana_legend():
    assert fm77av_key_names(0x02) == ("1", "ぬ")


def test_keys_without_legend():
    assert fm77av_key_names(0x00) == (None, None)
    assert fm77av_key_names(0x59) == (None, None)
    assert fm77av_key_names(0x5B) == (None, None)
    assert 0x59 not in fm77av_keycodes()
    assert 0x5B not in fm77av_keycodes()


def test_last_named_key():
    codes = fm77av_keycodes()
    assert codes[-1] == 0x66
    assert index_to_fm77av(len(codes) - 1) == 0x66
    assert fm77av_key_names(0x66) == ("PF10", None)


def test_keycodes_sorted_and_unique():
    codes = fm77av_keycodes()
    assert codes == sorted(set(codes))
    assert all(fm77av_key_names(code)[0] is not None for code in codes)


@pytest.mark.parametrize("index", range(len(fm77av_keycodes())))
def test_index_round_trip(index):
    assert fm77av_to_index(index_to_fm77av(index)) == index


def test_unnamed_code_maps_to_next_named_position():
    assert fm77av_to_index(0x59) == fm77av_to_index(0x5A)
    assert index_to_fm77av(fm77av_to_index(0x5B)) == 0x5C


def test_code_past_table_gives_count():
    assert fm77av_to_index(0x70) == len(fm77av_keycodes())


def test_index_out_of_range():
    with pytest.raises(IndexError):
        index_to_fm77av(len(fm77av_keycodes()))
    with pytest.raises(IndexError):
        index_to_fm77av(-1)


def test_bad_keycodes():
    with pytest.raises(ValueError):
        fm77av_key_names(0x67)
    with pytest.raises(ValueError):
        fm77av_key_names(-1)
    with pytest.raises(ValueError):
        fm77av_to_index(-1)


def test_keycodes_returns_copy():
    codes = fm77av_keycodes()
    codes.clear()
    assert fm77av_keycodes()[0] == 0x01