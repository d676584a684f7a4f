from typing import BinaryIO

from algorithms.huff_utils.bit_input import END, BitInputStream
from algorithms.huff_utils.bit_output import BitOutputStream
from algorithms.huff_utils.huff_errors import (
    CorruptHeaderError,
    InvalidTreeError,
    TruncatedStreamError,
)
from algorithms.huffman_coding import BITS_PER_WORD, PSEUDO_EOF, HuffmanTree, Node
from compressor_ABC import Compressor

BITS_PER_INT = 32
HUFF_NUMBER = 0xFACE8200
HUFF_TREE = HUFF_NUMBER | 1

DEBUG_LOW = 1
DEBUG_HIGH = 4


class HuffProcessor(Compressor):
    """
    Huffman compressor whose output starts with the coding tree itself,
    so no separate dictionary is needed to decompress.

    Stream layout: 32-bit HUFF_TREE magic, preorder tree header
    (0 for an internal node, 1 plus a 9-bit value for a leaf), then the
    codes of all input bytes followed by the PSEUDO_EOF code.
    """

    def __init__(self, debug: int = 0) -> None:
        """
        Args:
            debug: Verbosity of printed diagnostics, DEBUG_LOW or DEBUG_HIGH
        """
        self.debug = debug
        self.log = []

    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Compress input_stream into output_stream. The input is read twice:
        once to count symbols and once to encode them.

        Returns:
            Log information about bits read and written
        """
        self.log.clear()
        bit_in = BitInputStream(input_stream)
        bit_out = BitOutputStream(output_stream)

        counts = HuffmanTree.char_frequency(bit_in)
        original_bits = bit_in.bits_read
        tree = self.make_tree_from_counts(counts)
        if self.debug >= DEBUG_HIGH:
            for val, (code, length) in sorted(tree.res_codes.items()):
                print(f"Encoding for {val:3d} is {self._code_str(code, length)}")

        bit_out.write_bits(BITS_PER_INT, HUFF_TREE)
        self.write_header(tree.root, bit_out)

        bit_in.reset()
        self.write_compressed_bits(tree.res_codes, bit_in, bit_out)
        bit_out.close()

        self._log_stats(original_bits, bit_out.bits_written)
        return "\n".join(self.log)

    def make_tree_from_counts(self, counts: list[int]) -> HuffmanTree:
        if self.debug >= DEBUG_HIGH:
            print(f"{'chunks':>6} {'freq':>10}")
            for val, freq in enumerate(counts):
                if freq > 0:
                    print(f"{val:>6} {freq:>10}")
        tree = HuffmanTree.build_from_freq(counts)
        if self.debug >= DEBUG_HIGH:
            print(f"Tree built from {len(tree.res_codes)} symbols")
        return tree

    def write_header(self, node: Node, bit_out: BitOutputStream) -> None:
        """
        Write the tree in preorder: one marker bit per node,
        followed by BITS_PER_WORD + 1 value bits for a leaf.
        """
        if node.is_leaf:
            bit_out.write_bits(1, 1)
            bit_out.write_bits(BITS_PER_WORD + 1, node.value)
            if self.debug >= DEBUG_HIGH:
                print(f"wrote leaf for tree: {node.value}")
            return
        bit_out.write_bits(1, 0)
        self.write_header(node.left, bit_out)
        self.write_header(node.right, bit_out)

    def write_compressed_bits(
        self,
        codings: dict[int, tuple[int, int]],
        bit_in: BitInputStream,
        bit_out: BitOutputStream,
    ) -> None:
        while (c := bit_in.read_bits(BITS_PER_WORD)) != END:
            code, length = codings[c]
            self._write_code(bit_out, code, length)
            if self.debug >= DEBUG_HIGH:
                print(f"wrote {length} bits: {self._code_str(code, length)}")
        code, length = codings[PSEUDO_EOF]
        self._write_code(bit_out, code, length)
        if self.debug >= DEBUG_HIGH:
            print("wrote EOF")

    @staticmethod
    def _write_code(bit_out: BitOutputStream, code: int, length: int) -> None:
        # codes may be longer than one write, send the high bits first
        while length > BITS_PER_INT:
            length -= BITS_PER_INT
            bit_out.write_bits(BITS_PER_INT, code >> length)
        bit_out.write_bits(length, code)

    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Decompress input_stream into output_stream. Nothing is written
        to output_stream if the compressed data is malformed.

        Returns:
            Log information about bits read and written

        Raises:
            CorruptHeaderError: If the magic number or tree header is bad
            TruncatedStreamError: If the payload ends before PSEUDO_EOF
            InvalidTreeError: If the tree cannot decode the payload
        """
        self.log.clear()
        bit_in = BitInputStream(input_stream)
        bit_out = BitOutputStream(output_stream)

        bits = bit_in.read_bits(BITS_PER_INT)
        if bits == END:
            raise CorruptHeaderError("reader failed while reading magic number")
        if bits != HUFF_TREE:
            raise CorruptHeaderError(f"illegal header starts with {bits:#010x}")

        root = self.read_header(bit_in)
        self.read_compressed_bits(root, bit_in, bit_out)
        bit_out.close()

        self._log_stats(bit_in.bits_read, bit_out.bits_written)
        return "\n".join(self.log)

    def read_header(self, bit_in: BitInputStream, depth: int = 0) -> Node:
        """
        Rebuild the tree written by write_header. Weights are not stored
        in the header, so every rebuilt node has weight 0.
        No leaf of a valid tree lies deeper than PSEUDO_EOF levels.
        """
        bit = bit_in.read_bits(1)
        if bit == END:
            raise CorruptHeaderError("reader failed while reading tree header")
        if bit == 0:
            if depth >= PSEUDO_EOF:
                raise CorruptHeaderError(f"tree header nests deeper than {PSEUDO_EOF} levels")
            left = self.read_header(bit_in, depth + 1)
            right = self.read_header(bit_in, depth + 1)
            return Node(0, 0, left, right)

        value = bit_in.read_bits(BITS_PER_WORD + 1)
        if value == END:
            raise CorruptHeaderError("reader failed while reading leaf value")
        if value > PSEUDO_EOF:
            raise CorruptHeaderError(f"leaf value {value} is out of range")
        if self.debug >= DEBUG_HIGH:
            print(f"read leaf for tree: {value}")
        return Node(value, 0)

    def read_compressed_bits(
        self, root: Node, bit_in: BitInputStream, bit_out: BitOutputStream
    ) -> None:
        # a lone leaf can only be PSEUDO_EOF, whose code is empty
        if root.is_leaf:
            if root.value != PSEUDO_EOF:
                raise InvalidTreeError(f"single leaf tree holds {root.value}")
            return

        current = root
        while True:
            bit = bit_in.read_bits(1)
            if bit == END:
                raise TruncatedStreamError("bad input, no PSEUDO_EOF")
            current = current.left if bit == 0 else current.right
            if current is None:
                raise InvalidTreeError("reached a missing child while decoding")

            if current.is_leaf:
                if current.value == PSEUDO_EOF:
                    break
                bit_out.write_bits(BITS_PER_WORD, current.value)
                current = root

    def _log_stats(self, bits_in: int, bits_out: int) -> None:
        self.log.append(f"Bits read: {bits_in}")
        self.log.append(f"Bits written: {bits_out}")
        diff = bits_in // 8 - (bits_out + 7) // 8
        if diff > 0:
            self.log.append(f"Size reduced by {diff} bytes")
        else:
            self.log.append(f"Size increased by {-diff} bytes")
        if self.debug >= DEBUG_LOW:
            print(f"read {bits_in} bits, wrote {bits_out} bits")

    @staticmethod
    def _code_str(code: int, length: int) -> str:
        return format(code, f"0{length}b") if length else ""
