# -*- coding: utf-8 -*-
"""
Payload Codeword Module

Turns a byte payload into the final interleaved codeword stream of a QR
symbol in byte mode at error correction level L (ISO/IEC 18004:2015
sections 7.4 and 7.6).

Functions:
    select_version: Pick the smallest version that holds a payload
    build_data_codewords: Mode, count, payload, terminator and pad codewords
    split_blocks: Cut the data codewords into the version's blocks
    interleave: Interleave data and error correction blocks
    encode_payload: Full pipeline from payload to codeword stream
"""

import logging
from typing import List, Sequence

from .bitstream import BitBuffer
from .errors import DataTooLarge
from .reed_solomon import encode_block
from .tables import MAX_CAPACITY, MODE_BYTE, VERSION_TABLE, VersionDescriptor

logger = logging.getLogger(__name__)

PAD_CODEWORDS = (0xEC, 0x11)


def select_version(length: int) -> VersionDescriptor:
    """
    Select the smallest version whose data capacity holds `length` bytes.

    A version fits when 8 * data_codewords - overhead >= 8 * length, where
    the overhead is the 4-bit mode indicator plus an 8-bit (versions 1-9) or
    16-bit (versions 10-40) character count.

    Args:
        length (int): Payload length in bytes

    Returns:
        VersionDescriptor: Descriptor of the chosen version

    Raises:
        DataTooLarge: If not even version 40 can hold the payload

    Example:
        >>> select_version(5).version
        1
    """
    for descriptor in VERSION_TABLE:
        available = descriptor.data_codewords * 8 - descriptor.overhead_bits
        if length * 8 <= available:
            logger.debug("Selected version %d for %d bytes", descriptor.version, length)
            return descriptor
    raise DataTooLarge(length, MAX_CAPACITY)


def build_data_codewords(payload: bytes, descriptor: VersionDescriptor) -> bytes:
    """
    Build the padded data codewords of a payload.

    Args:
        payload (bytes): Raw payload
        descriptor (VersionDescriptor): Target version

    Returns:
        bytes: Exactly descriptor.data_codewords codewords
    """
    capacity_bits = descriptor.data_codewords * 8
    bits = BitBuffer()
    bits.put(MODE_BYTE, 4)
    bits.put(len(payload), descriptor.count_bits)
    for byte in payload:
        bits.put(byte, 8)
    if len(bits) > capacity_bits:
        raise DataTooLarge(len(payload), descriptor.byte_capacity)

    # Terminator, cut short when the symbol is already full
    bits.put(0, min(4, capacity_bits - len(bits)))
    bits.pad_to_byte()

    codewords = bytearray(bits.to_bytes())
    pad_index = 0
    while len(codewords) < descriptor.data_codewords:
        codewords.append(PAD_CODEWORDS[pad_index % 2])
        pad_index += 1
    return bytes(codewords)


def split_blocks(data: bytes, descriptor: VersionDescriptor) -> List[bytes]:
    """Cut the data codewords into blocks, group 1 first."""
    blocks = []
    offset = 0
    for length in descriptor.block_lengths():
        blocks.append(data[offset:offset + length])
        offset += length
    return blocks


def interleave(blocks: Sequence[bytes]) -> bytes:
    """
    Interleave blocks column-wise.

    Byte i of every block is emitted in block order for each i; shorter
    blocks stop contributing once exhausted.

    Example:
        >>> interleave([b'ab', b'cde']).decode()
        'acbde'
    """
    out = bytearray()
    longest = max((len(block) for block in blocks), default=0)
    for i in range(longest):
        for block in blocks:
            if i < len(block):
                out.append(block[i])
    return bytes(out)


def encode_payload(payload: bytes, descriptor: VersionDescriptor) -> bytes:
    """
    Produce the codeword stream placed into the symbol.

    Args:
        payload (bytes): Raw payload
        descriptor (VersionDescriptor): Target version (see select_version)

    Returns:
        bytes: Interleaved data codewords followed by interleaved error
            correction codewords, descriptor.total_codewords long
    """
    data_blocks = split_blocks(build_data_codewords(payload, descriptor), descriptor)
    ec_blocks = [encode_block(block, descriptor.ec_per_block) for block in data_blocks]
    return interleave(data_blocks) + interleave(ec_blocks)
