import pytest

from fm7vm.settings import DEFAULT_JOY_CODES, Config, load_config, save_config


def write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(tmp_path / "none.ini")
    assert config == Config()
    assert config.main_speed == 1752
    assert config.mmr_speed == 1466
    assert config.sample_rate == 44100
    assert config.joy_type == [1, 2]
    assert config.joy_code == [list(DEFAULT_JOY_CODES)] * 2


def test_round_trip(tmp_path):
    path = tmp_path / "cfg.ini"
    config = Config()
    config.fm7_ver = 1
    config.cycle_steel = False
    config.main_speed = 2000
    config.sample_rate = 22050
    config.sound_buffer = 200
    config.beep_freq = 2400
    config.key_map[0x01] = 0x5C
    config.key_map[0x1E] = 0x1E
    config.joy_type = [3, 0]
    config.joy_rapid = [[1, 9], [0, 4]]
    config.joy_code = [[0x11, 0x12, 0x13, 0x14, 0, 0x15, 0x16], list(DEFAULT_JOY_CODES)]
    config.dd480_line = True
    config.full_scan = True
    config.dd480_status = False
    config.whg_enable = False
    config.digitize_enable = False
    save_config(config, path)
    assert load_config(path) == config


def test_out_of_range_values_fall_back(tmp_path):
    path = write(tmp_path / "cfg.ini", (
        "[General]\nVersion=7\nMainSpeed=10000\nMMRSpeed=-1\n"
        "[Sound]\nSampleRate=11025\nSoundBuffer=10\nBeepFreq=99\n"
        "[JoyStick]\nType0=4\nType1=-1\nRapid0=10\nRapid11=3\n"
    ))
    config = load_config(path)
    assert config.fm7_ver == 2
    assert config.main_speed == 1752
    assert config.mmr_speed == 1466
    assert config.sample_rate == 44100
    assert config.sound_buffer == 80
    assert config.beep_freq == 1200
    assert config.joy_type == [1, 2]
    assert config.joy_rapid == [[0, 0], [0, 3]]


def test_sample_rate_zero_is_allowed(tmp_path):
    path = write(tmp_path / "cfg.ini", "[Sound]\nSampleRate=0\n")
    assert load_config(path).sample_rate == 0


def test_partial_joystick_codes_reset_whole_port(tmp_path):
    path = write(tmp_path / "cfg.ini", (
        "[JoyStick]\nCode0=1\nCode1=2\nCode2=3\nCode3=4\nCode4=5\nCode5=6\n"
        "Code10=1\nCode11=2\nCode12=3\nCode13=4\nCode14=5\nCode15=6\nCode16=7\n"
    ))
    config = load_config(path)
    assert config.joy_code[0] == list(DEFAULT_JOY_CODES)
    assert config.joy_code[1] == [1, 2, 3, 4, 5, 6, 7]


def test_joystick_code_above_limit_resets(tmp_path):
    lines = "".join(f"Code{j}=0\n" for j in range(6)) + "Code6=118\n"
    path = write(tmp_path / "cfg.ini", "[JoyStick]\n" + lines)
    assert load_config(path).joy_code[0] == list(DEFAULT_JOY_CODES)


def test_empty_keymap_uses_default(tmp_path):
    default = list(range(256))
    config = load_config(tmp_path / "none.ini", default)
    assert config.key_map == default


def test_stored_keymap_beats_default(tmp_path):
    path = write(tmp_path / "cfg.ini", "[Keyboard]\nKey30=30\n")
    config = load_config(path, [7] * 256)
    assert config.key_map[30] == 30
    assert config.key_map.count(0) == 255


def test_keymap_values_truncated_to_byte(tmp_path):
    path = write(tmp_path / "cfg.ini", "[Keyboard]\nKey1=258\n")
    assert load_config(path).key_map[1] == 2


def test_default_keymap_wrong_length(tmp_path):
    with pytest.raises(ValueError):
        load_config(tmp_path / "none.ini", [1, 2, 3])


def test_keys_and_sections_case_insensitive(tmp_path):
    path = write(tmp_path / "cfg.ini", "[general]\nversion=1\n[OPTION]\nwhgenable=0\n")
    config = load_config(path)
    assert config.fm7_ver == 1
    assert config.whg_enable is False


def test_boolean_any_nonzero_is_true(tmp_path):
    path = write(tmp_path / "cfg.ini", "[Screen]\nFullScan=5\nDD480Status=0\n")
    config = load_config(path)
    assert config.full_scan is True
    assert config.dd480_status is False


def test_non_numeric_value_reads_as_zero(tmp_path):
    path = write(tmp_path / "cfg.ini", "[General]\nVersion=abc\n")
    assert load_config(path).fm7_ver == 0


def test_save_skips_unmapped_keys(tmp_path):
    path = tmp_path / "cfg.ini"
    config = Config()
    config.key_map[5] = 9
    save_config(config, path)
    text = path.read_text(encoding="utf-8")
    assert "Key5=9" in text
    assert "Key6=" not in text


def test_save_keeps_foreign_entries(tmp_path):
    path = write(tmp_path / "cfg.ini", "[Window]\nLeft=10\n[general]\nversion=0\nExtra=3\n")
    save_config(Config(), path)
    text = path.read_text(encoding="utf-8")
    assert "[Window]" in text
    assert "Left=10" in text
    assert "Extra=3" in text
    assert "version=0" not in text
    assert load_config(path).fm7_ver == 2


def test_config_rejects_bad_keymap():
    with pytest.raises(ValueError):
        Config(key_map=[0] * 10)