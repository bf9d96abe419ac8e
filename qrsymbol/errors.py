# -*- coding: utf-8 -*-
"""
QR Symbol Errors Module

Exception types raised by the encoder. Only one real failure mode exists:
the payload does not fit in any supported version at error correction level L.
"""


class QRSymbolError(Exception):
    """Base class for every error raised by qrsymbol."""


class DataTooLarge(QRSymbolError, ValueError):
    """
    Raised when a payload cannot fit in version 40 at error correction level L.

    Attributes:
        length (int): Payload length in bytes
        capacity (int): Largest payload (in bytes) the encoder accepts
    """

    def __init__(self, length: int, capacity: int):
        self.length = length
        self.capacity = capacity
        super().__init__(
            f"Data too large for a QR symbol: {length} bytes given, "
            f"at most {capacity} bytes fit at error correction level L"
        )
