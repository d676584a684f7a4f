from typing import BinaryIO

from bitarray import bitarray
from bitarray.util import int2ba

MAX_WIDTH = 32


class BitOutputStream:
    """
    A class for writing bits to a binary stream.
    Bits are collected in a bitarray and reach the wrapped stream
    only when close() is called.
    """

    def __init__(self, out_stream: BinaryIO) -> None:
        """
        Initialize a new BitOutputStream with an empty bitarray.

        Args:
            out_stream: Binary stream opened for writing
        """
        self.out_stream = out_stream
        self.bits = bitarray(endian="big")
        self.bits_written = 0
        self.closed = False

    def write_bits(self, width: int, value: int) -> None:
        """
        Write the low width bits of value in MSB-first order.

        Args:
            width: Number of bits to write (0-32)
            value: Integer value to write

        Raises:
            ValueError: If width is out of range or the stream is closed
        """
        if self.closed:
            raise ValueError("Write to a closed bit stream")
        if not 0 <= width <= MAX_WIDTH:
            raise ValueError(f"Cannot write {width} bits at once")
        if width == 0:
            return
        self.bits.extend(int2ba(value & ((1 << width) - 1), length=width, endian="big"))
        self.bits_written += width

    def close(self) -> None:
        """
        Pad the last byte with zeros, write everything to the wrapped
        stream and flush it. The wrapped stream stays open.
        """
        if self.closed:
            return
        self.bits.fill()
        self.out_stream.write(self.bits.tobytes())
        self.out_stream.flush()
        self.bits = bitarray(endian="big")
        self.closed = True
