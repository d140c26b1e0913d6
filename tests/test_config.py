"""Tests for decoder configuration."""

import pytest

from typetree.config import DecoderConfig, load_decoder_config, parse_byte_order


def test_defaults():
    config = DecoderConfig()
    assert config.byte_order == '<'
    assert config.revision_max_length == 255
    assert config.string_max_length == 256
    assert config.strict_levels is False


@pytest.mark.parametrize("name,expected", [
    ("<", "<"), ("little", "<"), ("LE", "<"), (">", ">"), ("Big", ">"), (" be ", ">"),
])
def test_parse_byte_order(name, expected):
    assert parse_byte_order(name) == expected


def test_invalid_values():
    with pytest.raises(ValueError):
        DecoderConfig(byte_order="middle")
    with pytest.raises(ValueError):
        DecoderConfig(string_max_length=0)
    with pytest.raises(ValueError):
        DecoderConfig(revision_max_length=-1)


def test_load_from_ini(tmp_path):
    path = tmp_path / "typetree.ini"
    path.write_text("[typetree]\nbyte_order = big\nstrict_levels = yes\nstring_max_length = 128\n",
                    encoding='utf-8')
    config = load_decoder_config(path)
    assert config.byte_order == '>'
    assert config.strict_levels is True
    assert config.string_max_length == 128
    assert config.revision_max_length == 255


def test_missing_section_uses_defaults(tmp_path):
    path = tmp_path / "other.ini"
    path.write_text("[other]\nkey = value\n", encoding='utf-8')
    assert load_decoder_config(path) == DecoderConfig()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_decoder_config(tmp_path / "absent.ini")


def test_bad_integer(tmp_path):
    path = tmp_path / "bad.ini"
    path.write_text("[typetree]\nstring_max_length = lots\n", encoding='utf-8')
    with pytest.raises(ValueError):
        load_decoder_config(path)
