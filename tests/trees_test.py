import unittest
from huffcodec.analyzers import FrequencyAnalyzer
from huffcodec.errors import EmptyInputError
from huffcodec.logger import Logger, TreeBuildLog
from huffcodec.models import FrequencyTable, HuffmanNode
from huffcodec.trees import (
    TreeBuilder,
    CodeTableGenerator,
    iter_preorder,
    count_leaves,
    tree_depth,
    trees_equivalent,
)

def build(message):
    return TreeBuilder().build(FrequencyAnalyzer().analyze(message))

class TestTreeBuilder(unittest.TestCase):
    def test_abracadabra_shape(self):
        root = build("abracadabra")
        self.assertEqual(root.left.symbol, 'a')
        self.assertEqual(root.right.left.left.symbol, 'c')
        self.assertEqual(root.right.left.right.symbol, 'd')
        self.assertEqual(root.right.right.left.symbol, 'b')
        self.assertEqual(root.right.right.right.symbol, 'r')

    def test_strict_binary_tree(self):
        root = build("the quick brown fox jumps over the lazy dog")
        nodes = list(iter_preorder(root))
        leaves = [node for node in nodes if node.is_leaf]
        internals = [node for node in nodes if not node.is_leaf]
        self.assertEqual(len(leaves), 27)
        self.assertEqual(len(internals), len(leaves) - 1)
        for node in internals:
            self.assertIsNotNone(node.left)
            self.assertIsNotNone(node.right)

    def test_weight_conservation(self):
        root = build("mississippi river banks")
        for node in iter_preorder(root):
            if not node.is_leaf:
                self.assertAlmostEqual(node.weight, node.left.weight + node.right.weight)
        self.assertAlmostEqual(root.weight, 1.0, places=9)

    def test_single_symbol(self):
        root = build("aaaa")
        self.assertTrue(root.is_leaf)
        self.assertEqual(root.symbol, 'a')
        self.assertEqual(root.weight, 1.0)

    def test_empty_table(self):
        with self.assertRaises(EmptyInputError):
            TreeBuilder().build(FrequencyTable({}))

    def test_invalid_table(self):
        with self.assertRaises(ValueError):
            TreeBuilder().build({'a': 1})

    def test_equal_weights_first_popped_goes_left(self):
        root = TreeBuilder().build(FrequencyTable({'x': 1, 'y': 1}))
        self.assertEqual(root.left.symbol, 'x')
        self.assertEqual(root.right.symbol, 'y')

    def test_heavier_goes_right(self):
        root = TreeBuilder().build(FrequencyTable({'a': 3, 'b': 1}))
        self.assertEqual(root.left.symbol, 'b')
        self.assertEqual(root.right.symbol, 'a')

    def test_deterministic(self):
        first = CodeTableGenerator().generate(build("deterministic codes"))
        second = CodeTableGenerator().generate(build("deterministic codes"))
        self.assertEqual(first, second)

    def test_skewed_distribution(self):
        table = FrequencyTable({chr(65 + i): 2 ** i for i in range(20)})
        root = TreeBuilder().build(table)
        self.assertEqual(tree_depth(root), 19)
        codes = CodeTableGenerator().generate(root)
        self.assertEqual(codes.get_code('A'), '0' * 19)
        self.assertEqual(codes.get_code('B'), '0' * 18 + '1')
        self.assertEqual(codes.get_code('T'), '1')

    def test_from_probabilities(self):
        table = FrequencyTable.from_probabilities({'a': 0.5, 'b': 0.25, 'c': 0.25})
        codes = CodeTableGenerator().generate(TreeBuilder().build(table))
        self.assertEqual(codes.code_lengths(), {'a': 1, 'b': 2, 'c': 2})

    def test_logging(self):
        logger = Logger()
        TreeBuilder(logger).build(FrequencyAnalyzer().analyze("abracadabra"))
        logs = [log for log in logger.get_logs() if isinstance(log, TreeBuildLog)]
        self.assertEqual(len(logs), 1)
        self.assertEqual(logs[0].leaf_count, 5)
        self.assertEqual(logs[0].depth, 3)

class TestCodeTableGenerator(unittest.TestCase):
    def test_abracadabra_codes(self):
        codes = CodeTableGenerator().generate(build("abracadabra"))
        self.assertEqual(codes.to_dict(), {'a': '0', 'c': '100', 'd': '101', 'b': '110', 'r': '111'})

    def test_abracadabra_code_lengths(self):
        lengths = CodeTableGenerator().generate(build("abracadabra")).code_lengths()
        self.assertLessEqual(lengths['a'], lengths['b'])
        self.assertEqual(lengths['b'], lengths['r'])
        self.assertLessEqual(lengths['r'], lengths['c'])
        self.assertEqual(lengths['c'], lengths['d'])

    def test_prefix_free(self):
        for message in ["abracadabra", "hello world", "aab", "0123456789" * 3 + "000", "".join(chr(i) for i in range(256))]:
            codes = CodeTableGenerator().generate(build(message))
            self.assertTrue(codes.is_prefix_free(), message)
            self.assertEqual(codes.get_size(), len(set(message)))

    def test_single_leaf_gets_one_bit(self):
        codes = CodeTableGenerator().generate(build("aaaa"))
        self.assertEqual(codes.to_dict(), {'a': '0'})

    def test_invalid_root(self):
        with self.assertRaises(ValueError):
            CodeTableGenerator().generate(None)

class TestTreeHelpers(unittest.TestCase):
    def _chain(self, depth):
        node = HuffmanNode(1.0, 'a')
        for _ in range(depth):
            node = HuffmanNode(1.0, left=HuffmanNode(1.0, 'b'), right=node)
        return node

    def test_preorder(self):
        root = build("abracadabra")
        order = [node.symbol for node in iter_preorder(root)]
        self.assertEqual(order, [None, 'a', None, None, 'c', 'd', None, 'b', 'r'])

    def test_count_and_depth(self):
        root = build("abracadabra")
        self.assertEqual(count_leaves(root), 5)
        self.assertEqual(tree_depth(root), 3)
        self.assertEqual(tree_depth(HuffmanNode(1.0, 'a')), 0)

    def test_deep_tree_without_recursion(self):
        root = self._chain(5000)
        self.assertEqual(tree_depth(root), 5000)
        self.assertEqual(count_leaves(root), 5001)
        self.assertTrue(trees_equivalent(root, self._chain(5000)))

    def test_equivalence_ignores_weights(self):
        first = HuffmanNode(1.0, left=HuffmanNode(0.5, 'a'), right=HuffmanNode(0.5, 'b'))
        second = HuffmanNode(2.0, left=HuffmanNode(0.1, 'a'), right=HuffmanNode(0.9, 'b'))
        swapped = HuffmanNode(1.0, left=HuffmanNode(0.5, 'b'), right=HuffmanNode(0.5, 'a'))
        self.assertTrue(trees_equivalent(first, second))
        self.assertFalse(trees_equivalent(first, swapped))
        self.assertFalse(trees_equivalent(first, HuffmanNode(1.0, 'a')))

if __name__ == '__main__':
    unittest.main()
