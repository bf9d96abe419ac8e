# -*- coding: utf-8 -*-
"""
Bit Stream Module

Append-only bit buffer used to assemble the data codeword stream.
"""

from typing import List


class BitBuffer:
    """Ordered bit sequence written most-significant bit first."""

    def __init__(self) -> None:
        self._bits: List[int] = []

    def __len__(self) -> int:
        return len(self._bits)

    def put(self, value: int, length: int) -> None:
        """Append the low `length` bits of `value`, MSB first."""
        for i in range(length - 1, -1, -1):
            self._bits.append((value >> i) & 1)

    def pad_to_byte(self) -> None:
        """Append zero bits up to the next byte boundary."""
        remainder = len(self._bits) % 8
        if remainder:
            self.put(0, 8 - remainder)

    def to_bytes(self) -> bytes:
        """
        Slice the stream into 8-bit codewords.

        Raises:
            ValueError: If the stream is not byte aligned
        """
        if len(self._bits) % 8:
            raise ValueError(f"Bit stream of {len(self._bits)} bits is not byte aligned")
        out = bytearray()
        for i in range(0, len(self._bits), 8):
            byte = 0
            for bit in self._bits[i:i + 8]:
                byte = (byte << 1) | bit
            out.append(byte)
        return bytes(out)
