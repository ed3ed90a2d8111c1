import pytest
import asllayout as layout


@pytest.mark.parametrize("nbits,mask", [(19, 0b00000111), (16, 0xFF), (9, 0b1), (24, 0xFF), (30, 0b00111111)])
def test_prefix_mask(nbits, mask):
    assert layout.prefixMask(nbits) == mask


def test_layout_bits():
    assert layout.layoutBits(15) == 19
    assert layout.layoutBits(12) == 16


def test_estimate_tries():
    assert layout.estimateTries(5) == 512
    assert layout.estimateTries(15) == 2 ** 19


def test_build_prefix_geohash_only():
    prefix, mask = layout.buildPrefix(0, 0, "u", 5)
    # 'u' = 11010, followed by four zero ASL bits
    assert prefix == b"\xa0\x01"
    assert mask == 1


def test_build_prefix_sex_then_age():
    # sex 2 -> 1,0 then age 1 -> 0,1
    prefix, _ = layout.buildPrefix(1, 2, "u", 5)
    assert prefix == b"\xa9\x01"


def test_build_prefix_size_follows_geobits():
    prefix, mask = layout.buildPrefix(3, 3, "u33dc0", 15)
    assert len(prefix) == 3
    assert mask == 0b111
    prefix, mask = layout.buildPrefix(3, 3, "u33dc0", 12)
    assert len(prefix) == 2
    assert mask == 0xFF


@pytest.mark.parametrize("age,sex", [(4, 0), (0, 4), (-1, 0), (0, -2)])
def test_build_prefix_rejects_wide_fields(age, sex):
    with pytest.raises(layout.InvalidField):
        layout.buildPrefix(age, sex, "u33", 15)


def test_read_fields_mirrors_push():
    prefix, _ = layout.buildPrefix(2, 1, "u33", 15)
    assert layout.readFields(prefix) == {"age": 2, "sex": 1}


def test_matches_prefix_ignores_unmasked_bits():
    prefix, mask = layout.buildPrefix(1, 2, "u33", 15)
    pk = bytearray(32)
    pk[:3] = bytes(prefix)
    pk[2] |= 0xF8
    assert layout.matchesPrefix(pk, bytes(prefix), mask)
    pk[2] ^= 0x01
    assert not layout.matchesPrefix(pk, bytes(prefix), mask)
    pk[2] ^= 0x01
    pk[0] ^= 0x80
    assert not layout.matchesPrefix(pk, bytes(prefix), mask)
