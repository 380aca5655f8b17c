"""
trees.py

Huffman tree construction and traversal.

All walks use an explicit stack, so heavily skewed trees cannot exhaust the
interpreter's recursion limit.
"""


import heapq
from typing import Iterator, List, Optional, Tuple

from .errors import EmptyInputError
from .logger import Logger, TreeBuildLog
from .models import CodeTable, FrequencyTable, HuffmanNode
from .validators import validate_type


def iter_preorder(root: HuffmanNode) -> Iterator[HuffmanNode]:
    """
    Yield the nodes of the tree in pre-order: node, left subtree, right subtree.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        if not node.is_leaf:
            stack.append(node.right)
            stack.append(node.left)


def count_leaves(root: HuffmanNode) -> int:
    return sum(1 for node in iter_preorder(root) if node.is_leaf)


def tree_depth(root: HuffmanNode) -> int:
    """Length of the longest root-to-leaf path; 0 for a lone leaf."""
    depth = 0
    stack = [(root, 0)]
    while stack:
        node, level = stack.pop()
        if node.is_leaf:
            depth = max(depth, level)
        else:
            stack.append((node.left, level + 1))
            stack.append((node.right, level + 1))
    return depth


def trees_equivalent(first: HuffmanNode, second: HuffmanNode) -> bool:
    """
    Check that two trees have the same shape and the same leaf symbols.
    Weights are ignored.
    """
    stack = [(first, second)]
    while stack:
        a, b = stack.pop()
        if a.is_leaf != b.is_leaf:
            return False
        if a.is_leaf:
            if a.symbol != b.symbol:
                return False
        else:
            stack.append((a.right, b.right))
            stack.append((a.left, b.left))
    return True


class TreeBuilder:
    """
    Builds the Huffman tree of a frequency table.

    Tie-break: the queue is ordered by (weight, creation order). Leaves are
    created in ascending symbol order and every merged node is created after
    all existing nodes. On each merge the strictly heavier of the two popped
    nodes goes right; on equal weight the second popped goes right. Since the
    lighter node always pops first, the first popped node is the left child.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    def build(self, frequency_table: FrequencyTable) -> HuffmanNode:
        """
        Args:
            frequency_table (FrequencyTable): The table with at least one symbol.

        Returns:
            HuffmanNode: The root. A table with one symbol yields a lone leaf.

        Raises:
            EmptyInputError: If the table is empty.
        """
        validate_type(frequency_table, "Frequency table", FrequencyTable)
        if frequency_table.get_size() == 0:
            raise EmptyInputError("Frequency table must not be empty")

        queue: List[Tuple[float, int, HuffmanNode]] = []
        order = 0
        for record in frequency_table.items():
            queue.append((record.count, order, HuffmanNode(record.probability, record.symbol)))
            order += 1
        heapq.heapify(queue)

        while len(queue) > 1:
            first_key, _, first = heapq.heappop(queue)
            second_key, _, second = heapq.heappop(queue)
            if first_key > second_key:
                left, right = second, first
            else:
                left, right = first, second
            merged = HuffmanNode(first.weight + second.weight, left=left, right=right)
            heapq.heappush(queue, (first_key + second_key, order, merged))
            order += 1

        root = queue[0][2]
        if self.logger is not None:
            self.logger.log(TreeBuildLog(frequency_table.get_size(), tree_depth(root)))
        return root


class CodeTableGenerator:
    """
    Derives the code of every symbol from its root-to-leaf path,
    '0' for a left branch and '1' for a right branch.
    """

    # A lone leaf has no path, so it gets a one-bit code to keep message length recoverable.
    LONE_LEAF_CODE = "0"

    def generate(self, root: HuffmanNode) -> CodeTable:
        validate_type(root, "Root", HuffmanNode)
        table = CodeTable()
        if root.is_leaf:
            table.add(root.symbol, self.LONE_LEAF_CODE)
            return table

        stack = [(root, "")]
        while stack:
            node, path = stack.pop()
            if node.is_leaf:
                table.add(node.symbol, path)
            else:
                stack.append((node.right, path + "1"))
                stack.append((node.left, path + "0"))
        return table
