# -*- coding: utf-8 -*-
"""
QR Version Tables Module

Static per-version data for error correction level L (ISO/IEC 18004:2015
tables 1, 9, C.1 and D.1): codeword counts and block layout, alignment
pattern centers, and the precomputed format and version information words.

Everything here is an immutable tuple built at import time.
"""

from typing import List, NamedTuple, Tuple

MIN_VERSION = 1
MAX_VERSION = 40

# Byte mode indicator (ISO/IEC 18004:2015 table 2)
MODE_BYTE = 0b0100


class VersionDescriptor(NamedTuple):
    """Codeword layout of one version at error correction level L."""

    version: int
    total_codewords: int
    ec_per_block: int
    group1_blocks: int
    group1_data: int
    group2_blocks: int
    group2_data: int

    @property
    def size(self) -> int:
        return 4 * self.version + 17

    @property
    def block_count(self) -> int:
        return self.group1_blocks + self.group2_blocks

    @property
    def data_codewords(self) -> int:
        return (self.group1_blocks * self.group1_data
                + self.group2_blocks * self.group2_data)

    @property
    def count_bits(self) -> int:
        """Width of the character count field in byte mode."""
        return 8 if self.version < 10 else 16

    @property
    def overhead_bits(self) -> int:
        """Mode indicator plus character count field."""
        return 4 + self.count_bits

    @property
    def byte_capacity(self) -> int:
        """Largest byte-mode payload this version holds."""
        return (self.data_codewords * 8 - self.overhead_bits) // 8

    def block_lengths(self) -> List[int]:
        """Data length of every block, in version-table order."""
        return ([self.group1_data] * self.group1_blocks
                + [self.group2_data] * self.group2_blocks)


# (total codewords, EC codewords per block, group-1 blocks, group-1 data length,
#  group-2 blocks, group-2 data length)
_LEVEL_L = (
    (26, 7, 1, 19, 0, 0),
    (44, 10, 1, 34, 0, 0),
    (70, 15, 1, 55, 0, 0),
    (100, 20, 1, 80, 0, 0),
    (134, 26, 1, 108, 0, 0),
    (172, 18, 2, 68, 0, 0),
    (196, 20, 2, 78, 0, 0),
    (242, 24, 2, 97, 0, 0),
    (292, 30, 2, 116, 0, 0),
    (346, 18, 2, 68, 2, 69),
    (404, 20, 4, 81, 0, 0),
    (466, 24, 2, 92, 2, 93),
    (532, 26, 4, 107, 0, 0),
    (581, 30, 3, 115, 1, 116),
    (655, 22, 5, 87, 1, 88),
    (733, 24, 5, 98, 1, 99),
    (815, 28, 1, 107, 5, 108),
    (901, 30, 5, 120, 1, 121),
    (991, 28, 3, 113, 4, 114),
    (1085, 28, 3, 107, 5, 108),
    (1156, 28, 4, 116, 4, 117),
    (1258, 28, 2, 111, 7, 112),
    (1364, 30, 4, 121, 5, 122),
    (1474, 30, 6, 117, 4, 118),
    (1588, 26, 8, 106, 4, 107),
    (1706, 28, 10, 114, 2, 115),
    (1828, 30, 8, 122, 4, 123),
    (1921, 30, 3, 117, 10, 118),
    (2051, 30, 7, 116, 7, 117),
    (2185, 30, 5, 115, 10, 116),
    (2323, 30, 13, 115, 3, 116),
    (2465, 30, 17, 115, 0, 0),
    (2611, 30, 17, 115, 1, 116),
    (2761, 30, 13, 115, 6, 116),
    (2876, 30, 12, 121, 7, 122),
    (3034, 30, 6, 121, 14, 122),
    (3196, 30, 17, 122, 4, 123),
    (3362, 30, 4, 122, 18, 123),
    (3532, 30, 20, 117, 4, 118),
    (3706, 30, 19, 118, 6, 119),
)

VERSION_TABLE: Tuple[VersionDescriptor, ...] = tuple(
    VersionDescriptor(version, *row) for version, row in enumerate(_LEVEL_L, start=1)
)

# Alignment pattern center coordinates (ISO/IEC 18004:2015 annex E)
ALIGNMENT_POSITIONS: Tuple[Tuple[int, ...], ...] = (
    (),
    (6, 18),
    (6, 22),
    (6, 26),
    (6, 30),
    (6, 34),
    (6, 22, 38),
    (6, 24, 42),
    (6, 26, 46),
    (6, 28, 50),
    (6, 30, 54),
    (6, 32, 58),
    (6, 34, 62),
    (6, 26, 46, 66),
    (6, 26, 48, 70),
    (6, 26, 50, 74),
    (6, 30, 54, 78),
    (6, 30, 56, 82),
    (6, 30, 58, 86),
    (6, 34, 62, 90),
    (6, 28, 50, 72, 94),
    (6, 26, 50, 74, 98),
    (6, 30, 54, 78, 102),
    (6, 28, 54, 80, 106),
    (6, 32, 58, 84, 110),
    (6, 30, 58, 86, 114),
    (6, 34, 62, 90, 118),
    (6, 26, 50, 74, 98, 122),
    (6, 30, 54, 78, 102, 126),
    (6, 26, 52, 78, 104, 130),
    (6, 30, 56, 82, 108, 134),
    (6, 34, 60, 86, 112, 138),
    (6, 30, 58, 86, 114, 142),
    (6, 34, 62, 90, 118, 146),
    (6, 30, 54, 78, 102, 126, 150),
    (6, 24, 50, 76, 102, 128, 154),
    (6, 28, 54, 80, 106, 132, 158),
    (6, 32, 58, 84, 110, 136, 162),
    (6, 26, 54, 82, 110, 138, 166),
    (6, 30, 58, 86, 114, 142, 170),
)

# 15-bit format words for EC level L (indicator 01), indexed by mask,
# already XORed with 0x5412
FORMAT_BITS: Tuple[int, ...] = (
    0x77C4, 0x72F3, 0x7DAA, 0x789D, 0x662F, 0x6318, 0x6C41, 0x6976,
)

# 18-bit version words for versions 7-40
VERSION_INFO_BITS: Tuple[int, ...] = (
    0x07C94, 0x085BC, 0x09A99, 0x0A4D3, 0x0BBF6, 0x0C762, 0x0D847, 0x0E60D,
    0x0F928, 0x10B78, 0x1145D, 0x12A17, 0x13532, 0x149A6, 0x15683, 0x168C9,
    0x177EC, 0x18EC4, 0x191E1, 0x1AFAB, 0x1B08E, 0x1CC1A, 0x1D33F, 0x1ED75,
    0x1F250, 0x209D5, 0x216F0, 0x228BA, 0x2379F, 0x24B0B, 0x2542E, 0x26A64,
    0x27541, 0x28C69,
)

MAX_CAPACITY = VERSION_TABLE[-1].byte_capacity


def get_version(version: int) -> VersionDescriptor:
    """
    Look up the descriptor of a version.

    Raises:
        ValueError: If version is outside 1-40
    """
    if not MIN_VERSION <= version <= MAX_VERSION:
        raise ValueError(f"QR version must be between 1 and 40, got {version}")
    return VERSION_TABLE[version - 1]


def version_info_bits(version: int) -> int:
    """18-bit version information word; only defined for versions 7-40."""
    if version < 7:
        raise ValueError(f"Version information only exists for versions 7-40, got {version}")
    return VERSION_INFO_BITS[version - 7]
