"""Tests for the static version, alignment, format and version-info tables."""

import pytest

from qrsymbol.tables import (
    ALIGNMENT_POSITIONS,
    FORMAT_BITS,
    MAX_CAPACITY,
    VERSION_INFO_BITS,
    VERSION_TABLE,
    get_version,
    version_info_bits,
)

from .conftest import raw_data_modules


def _bch_format(data):
    value = data << 10
    for i in range(14, 9, -1):
        if value & (1 << i):
            value ^= 0x537 << (i - 10)
    return ((data << 10) | value) ^ 0x5412


def _bch_version(version):
    value = version << 12
    for i in range(17, 11, -1):
        if value & (1 << i):
            value ^= 0x1F25 << (i - 12)
    return (version << 12) | value


def test_forty_versions_in_order():
    assert len(VERSION_TABLE) == 40
    assert [d.version for d in VERSION_TABLE] == list(range(1, 41))


@pytest.mark.parametrize("descriptor", VERSION_TABLE, ids=lambda d: f"v{d.version}")
def test_total_codewords_match_block_layout(descriptor):
    total = (descriptor.group1_blocks * (descriptor.group1_data + descriptor.ec_per_block)
             + descriptor.group2_blocks * (descriptor.group2_data + descriptor.ec_per_block))
    assert total == descriptor.total_codewords
    assert sum(descriptor.block_lengths()) == descriptor.data_codewords
    assert len(descriptor.block_lengths()) == descriptor.block_count


@pytest.mark.parametrize("descriptor", VERSION_TABLE, ids=lambda d: f"v{d.version}")
def test_codewords_fill_data_region(descriptor):
    raw = raw_data_modules(descriptor.version)
    assert raw // 8 == descriptor.total_codewords
    assert 0 <= raw - descriptor.total_codewords * 8 < 8


def test_sizes_are_odd_and_increasing():
    sizes = [d.size for d in VERSION_TABLE]
    assert sizes[0] == 21
    assert sizes[-1] == 177
    assert all(s % 2 == 1 for s in sizes)
    assert sizes == sorted(set(sizes))


def test_count_field_width():
    assert get_version(9).count_bits == 8
    assert get_version(10).count_bits == 16
    assert get_version(40).overhead_bits == 20


def test_byte_capacities():
    assert get_version(1).byte_capacity == 17
    assert get_version(10).byte_capacity == 271
    assert MAX_CAPACITY == 2953


def test_alignment_positions_span_the_symbol():
    assert ALIGNMENT_POSITIONS[0] == ()
    for descriptor, centers in zip(VERSION_TABLE[1:], ALIGNMENT_POSITIONS[1:]):
        assert centers[0] == 6
        assert centers[-1] == descriptor.size - 7
        assert len(centers) == descriptor.version // 7 + 2


@pytest.mark.parametrize("mask", range(8))
def test_format_bits_are_bch_words(mask):
    # Level L is encoded as 01
    assert FORMAT_BITS[mask] == _bch_format((0b01 << 3) | mask)


@pytest.mark.parametrize("version", range(7, 41))
def test_version_info_bits_are_bch_words(version):
    assert VERSION_INFO_BITS[version - 7] == _bch_version(version)
    assert version_info_bits(version) == VERSION_INFO_BITS[version - 7]


def test_version_info_not_defined_below_7():
    with pytest.raises(ValueError):
        version_info_bits(6)


@pytest.mark.parametrize("version", [0, 41, -1])
def test_get_version_rejects_out_of_range(version):
    with pytest.raises(ValueError):
        get_version(version)
