import pytest

from notedetect.font import FONT, GLYPH_SIZE, glyph, glyph_offset


def test_uppercase_a_glyph():
    assert glyph("A") == bytes([0x78, 0x14, 0x12, 0x11, 0x12, 0x14, 0x78, 0x00])


def test_digit_zero_glyph():
    assert glyph("0") == bytes([0x3e, 0x41, 0x41, 0x49, 0x41, 0x41, 0x3e, 0x00])


def test_lowercase_m_glyph():
    assert glyph("m") == bytes([0x00, 0x7E, 0x02, 0x02, 0x7C, 0x02, 0x02, 0x7C])


def test_symbol_glyphs():
    assert glyph(".") == bytes([0x00, 0x40, 0, 0, 0, 0, 0, 0])
    assert glyph("#") == bytes([0x00, 0x24, 0x7e, 0x24, 0x24, 0x7e, 0x24, 0x00])
    assert glyph("]") == bytes([0, 0, 0, 0, 0x42, 0x42, 0x7e, 0x00])


def test_unknown_character_is_blank():
    assert glyph_offset("@") == 0
    assert glyph(" ") == bytes(GLYPH_SIZE)


def test_offsets_are_glyph_aligned_and_in_range():
    chars = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz.:[]#"
    offsets = [glyph_offset(c) for c in chars]
    assert all(o % GLYPH_SIZE == 0 for o in offsets)
    assert all(o + GLYPH_SIZE <= len(FONT) for o in offsets)
    assert len(set(offsets)) == len(chars)
    assert 0 not in offsets


def test_every_glyph_has_eight_columns():
    for c in "Zz9:[":
        assert len(glyph(c)) == GLYPH_SIZE


def test_multi_character_rejected():
    with pytest.raises(ValueError):
        glyph_offset("AB")
    with pytest.raises(ValueError):
        glyph("")