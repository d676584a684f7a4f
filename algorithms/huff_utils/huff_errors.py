"""Errors raised while decoding tree-header Huffman streams."""


class HuffException(ValueError):
    """Base class for malformed compressed data."""


class CorruptHeaderError(HuffException):
    """Wrong magic number, or the stream ended inside the magic or tree header."""


class TruncatedStreamError(HuffException):
    """The payload ended before the PSEUDO_EOF code was read."""


class InvalidTreeError(HuffException):
    """Decoding reached a node that cannot exist in a valid Huffman tree."""
