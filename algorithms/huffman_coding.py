"""
Huffman coding algorithm -
frequency counting, tree building and code generation
for the tree-header compressed format
"""
import heapq
from itertools import count

from algorithms.huff_utils.bit_input import END, BitInputStream

BITS_PER_WORD = 8
ALPH_SIZE = 1 << BITS_PER_WORD
PSEUDO_EOF = ALPH_SIZE


class Node:
    """
    Class object for Node in Huffman's Tree
    """
    def __init__(self, value: int, weight: int, left=None, right=None):
        """
        Function initializes the structure of a node.

        :param value: symbol held by a leaf, 0 for internal nodes
        :param weight: int, total frequency of the symbols below this node
        :param left: left child, None for leaves
        :param right: right child, None for leaves
        """
        if (left is None) != (right is None):
            raise ValueError("Internal node must have exactly two children")
        self.value = value
        self.weight = weight
        self.left = left
        self.right = right

    @property
    def is_leaf(self) -> bool:
        return self.left is None

    def __repr__(self):
        if self.is_leaf:
            return f"Node(value={self.value}, weight={self.weight})"
        return f"Node(weight={self.weight}, left={self.left!r}, right={self.right!r})"


class HuffmanTree:
    """
    Class object for Huffman Tree - the root node together
    with the codes derived from it.
    """
    def __init__(self, root: Node):
        """
        Function initializes the structure of Huffman Tree
        and generates codes for its leaves.

        :param root: Node, root of an already built tree
        """
        self.root = root
        self.res_codes: dict[int, tuple[int, int]] = {}
        self.codes_generation()

    @staticmethod
    def char_frequency(bit_in: BitInputStream) -> list[int]:
        """
        Function reads the whole stream in 8-bit chunks and counts
        how often each value occurs. PSEUDO_EOF always gets one occurrence.
        The stream is left exhausted.

        :param bit_in: BitInputStream to count symbols in
        :return: list of ALPH_SIZE + 1 counts indexed by symbol
        """
        counts = [0] * (ALPH_SIZE + 1)
        while (c := bit_in.read_bits(BITS_PER_WORD)) != END:
            counts[c] += 1
        counts[PSEUDO_EOF] = 1
        return counts

    @classmethod
    def build_from_freq(cls, counts: list[int]) -> "HuffmanTree":
        """
        Builds the Huffman tree by repeatedly merging the two lightest
        nodes. Equal weights leave the queue in insertion order.

        :param counts: list of counts indexed by symbol, at least one nonzero
        :return: HuffmanTree with generated codes
        """
        order = count()
        nodes = [
            (freq, next(order), Node(val, freq))
            for val, freq in enumerate(counts)
            if freq > 0
        ]
        if not nodes:
            raise ValueError("Cannot build a tree without symbols")
        heapq.heapify(nodes)

        while len(nodes) > 1:
            l_weight, _, l = heapq.heappop(nodes)
            r_weight, _, r = heapq.heappop(nodes)
            parent = Node(0, l_weight + r_weight, l, r)
            heapq.heappush(nodes, (parent.weight, next(order), parent))

        return cls(nodes[0][2])

    def codes_generation(self, node=None, code: int = 0, length: int = 0):
        """
        Recursive function that generates code for each symbol,
        preorder traversal of Huffman's tree. A code is stored as
        (code, length) with the root-side bit as the most significant one.
        A lone leaf root gets the empty code (0, 0).

        :param node: node to start traversal from
        :param code: int, bits of the path so far
        :param length: int, number of bits in the path so far
        """
        # if node is not passed, we start traversal from the root
        if node is None:
            node = self.root

        if node.is_leaf:
            self.res_codes[node.value] = (code, length)
            return

        self.codes_generation(node.left, code << 1, length + 1)
        self.codes_generation(node.right, (code << 1) | 1, length + 1)

    def leaves(self) -> list[Node]:
        """
        Returns leaves of the tree from left to right.
        """
        result = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.is_leaf:
                result.append(node)
            else:
                stack.append(node.right)
                stack.append(node.left)
        return result
