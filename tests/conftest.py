import pytest

from qrsymbol import encode
from qrsymbol.functional_areas import build_function_mask, build_function_patterns
from qrsymbol.masks import MASK_FUNCTIONS, format_info_positions
from qrsymbol.placement import data_module_coords


def read_format_words(matrix):
    """Read both 15-bit format word copies back out of a finished matrix."""
    words = []
    for positions in format_info_positions(len(matrix)):
        word = 0
        for i, (r, c) in enumerate(positions):
            if matrix[r][c]:
                word |= 1 << i
        words.append(word)
    return words


def read_version_words(matrix):
    """Read the version word next to the top-right finder and its transpose."""
    size = len(matrix)
    upper = lower = 0
    for i in range(18):
        r, c = i // 3, size - 11 + i % 3
        if matrix[r][c]:
            upper |= 1 << i
        if matrix[c][r]:
            lower |= 1 << i
    return upper, lower


def raw_data_modules(version):
    """Number of data modules of a version (ISO/IEC 18004 table 1)."""
    result = (16 * version + 128) * version + 64
    if version >= 2:
        num_align = version // 7 + 2
        result -= (25 * num_align - 10) * num_align - 55
        if version >= 7:
            result -= 36
    return result


@pytest.fixture(scope="session")
def hello_symbol():
    return encode("HELLO")


@pytest.fixture(scope="session")
def version7_symbol():
    return encode(b"x" * 135)


def read_codewords(rows, version, mask):
    """Unmask the data region of a finished symbol and read its codeword stream."""
    reserved = build_function_mask(build_function_patterns(version))
    fn = MASK_FUNCTIONS[mask]
    out = bytearray()
    byte = 0
    for i, (r, c) in enumerate(data_module_coords(len(rows), reserved)):
        byte = (byte << 1) | (bool(rows[r][c]) != fn(r, c))
        if i % 8 == 7:
            out.append(byte)
            byte = 0
    return bytes(out)


def deinterleave(stream, descriptor):
    """Split a codeword stream back into (data blocks, error correction blocks)."""
    lengths = descriptor.block_lengths()
    data_blocks = [bytearray() for _ in lengths]
    pos = 0
    for i in range(max(lengths)):
        for block, length in zip(data_blocks, lengths):
            if i < length:
                block.append(stream[pos])
                pos += 1
    ec_blocks = [bytearray() for _ in lengths]
    for _ in range(descriptor.ec_per_block):
        for block in ec_blocks:
            block.append(stream[pos])
            pos += 1
    return [bytes(b) for b in data_blocks], [bytes(b) for b in ec_blocks]
