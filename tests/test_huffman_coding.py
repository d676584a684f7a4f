import io

import pytest

from algorithms.huff_utils.bit_input import END, BitInputStream
from algorithms.huffman_coding import ALPH_SIZE, PSEUDO_EOF, HuffmanTree, Node


def counts_for(data: bytes) -> list[int]:
    return HuffmanTree.char_frequency(BitInputStream(io.BytesIO(data)))


def internal_count(node: Node) -> int:
    if node.is_leaf:
        return 0
    return 1 + internal_count(node.left) + internal_count(node.right)


def test_char_frequency_counts_and_forces_eof():
    bit_in = BitInputStream(io.BytesIO(b"aab"))
    counts = HuffmanTree.char_frequency(bit_in)
    assert len(counts) == ALPH_SIZE + 1
    assert counts[ord("a")] == 2
    assert counts[ord("b")] == 1
    assert counts[PSEUDO_EOF] == 1
    assert sum(counts) == 4
    assert bit_in.read_bits(8) == END


def test_char_frequency_empty_input():
    counts = counts_for(b"")
    assert counts[PSEUDO_EOF] == 1
    assert sum(counts) == 1


def test_build_from_freq_merges_in_insertion_order():
    tree = HuffmanTree.build_from_freq(counts_for(b"aab"))
    assert tree.res_codes == {
        ord("a"): (0b0, 1),
        ord("b"): (0b10, 2),
        PSEUDO_EOF: (0b11, 2),
    }
    assert tree.root.weight == 4


def test_repetition_gives_two_leaves():
    tree = HuffmanTree.build_from_freq(counts_for(b"A" * 1000))
    assert sorted(leaf.value for leaf in tree.leaves()) == [ord("A"), PSEUDO_EOF]
    assert internal_count(tree.root) == 1


def test_leaf_and_internal_counts():
    data = b"the quick brown fox jumps over the lazy dog"
    counts = counts_for(data)
    tree = HuffmanTree.build_from_freq(counts)
    leaves = tree.leaves()
    assert len(leaves) == sum(1 for c in counts if c > 0)
    assert internal_count(tree.root) == len(leaves) - 1


def test_codes_are_prefix_free():
    tree = HuffmanTree.build_from_freq(counts_for(bytes(range(256)) + b"eeeeetttaao"))
    codes = [format(code, f"0{length}b") for code, length in tree.res_codes.values()]
    assert len(codes) == 257
    for i, first in enumerate(codes):
        for j, second in enumerate(codes):
            if i != j:
                assert not second.startswith(first)


def test_leaves_match_codes():
    tree = HuffmanTree.build_from_freq(counts_for(b"mississippi"))
    assert {leaf.value for leaf in tree.leaves()} == set(tree.res_codes)


def test_single_symbol_tree_has_empty_code():
    tree = HuffmanTree.build_from_freq(counts_for(b""))
    assert tree.root.is_leaf
    assert tree.root.value == PSEUDO_EOF
    assert tree.res_codes == {PSEUDO_EOF: (0, 0)}


def test_build_without_symbols_raises():
    with pytest.raises(ValueError):
        HuffmanTree.build_from_freq([0] * (ALPH_SIZE + 1))


def test_node_with_one_child_raises():
    with pytest.raises(ValueError):
        Node(0, 1, Node(1, 1), None)
