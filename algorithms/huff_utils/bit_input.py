from typing import BinaryIO

from bitarray import bitarray
from bitarray.util import ba2int

END = -1
MAX_WIDTH = 32


class BitInputStream:
    """
    A class for reading bits from a buffered binary stream.
    The whole stream is loaded into a bitarray once, so it can be
    rewound with reset() and read again.
    """

    def __init__(self, in_stream: BinaryIO) -> None:
        """
        Initialize BitInputStream by reading the entire stream into a bitarray.

        Args:
            in_stream: Binary stream opened for reading
        """
        self.bits = bitarray(endian="big")
        self.bits.frombytes(in_stream.read())
        self.pos = 0
        self.bits_read = 0

    def read_bits(self, width: int) -> int:
        """
        Read width bits in MSB-first order and return them as an integer.

        Args:
            width: Number of bits to read (1-32)

        Returns:
            The value as a non-negative integer, or END if fewer
            than width bits are left in the stream

        Raises:
            ValueError: If width is out of range
        """
        if not 1 <= width <= MAX_WIDTH:
            raise ValueError(f"Cannot read {width} bits at once")
        if self.pos + width > len(self.bits):
            return END
        val = ba2int(self.bits[self.pos : self.pos + width])
        self.pos += width
        self.bits_read += width
        return val

    def reset(self) -> None:
        """Rewind the stream to its first bit."""
        self.pos = 0

    def __len__(self) -> int:
        return len(self.bits)
