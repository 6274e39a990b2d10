import unittest

from vlc_archiver.code_table import DEFAULT_CODE_TABLE, CodeTable
from vlc_archiver.decoding_tree import DecodingTree
from vlc_archiver.errors import (DuplicateCode, IncompleteEncoding, InvalidBit,
                                 InvalidCodeBit, PrefixConflict, UnexpectedBit)


class TestBuildDecodingTree(unittest.TestCase):

    def test_valid_codes(self):
        tree = DecodingTree.build({'a': '0', 'b': '1'})
        self.assertEqual('a', tree.root.zero.value)
        self.assertEqual('b', tree.root.one.value)
        self.assertIsNone(tree.root.value)

    def test_invalid_code_character(self):
        with self.assertRaises(InvalidCodeBit) as ctx:
            DecodingTree.build({'a': '2'})
        self.assertEqual('a', ctx.exception.character)

    def test_empty_code(self):
        with self.assertRaises(InvalidCodeBit):
            DecodingTree.build({'a': ''})

    def test_shorter_code_inserted_first(self):
        with self.assertRaises(PrefixConflict) as ctx:
            DecodingTree.build({'a': '0', 'b': '01'})
        self.assertEqual('b', ctx.exception.character)
        self.assertEqual('a', ctx.exception.other)

    def test_longer_code_inserted_first(self):
        with self.assertRaises(PrefixConflict) as ctx:
            DecodingTree.build({'b': '01', 'a': '0'})
        self.assertEqual('a', ctx.exception.character)

    def test_duplicate_code(self):
        with self.assertRaises(DuplicateCode) as ctx:
            DecodingTree.build({'a': '01', 'b': '01'})
        self.assertEqual('b', ctx.exception.character)
        self.assertEqual('a', ctx.exception.other)

    def test_errors_are_value_errors(self):
        self.assertRaises(ValueError, DecodingTree.build, {'a': '1', 'b': '1'})

    def test_default_table_is_prefix_free(self):
        tree = DecodingTree.build(DEFAULT_CODE_TABLE)
        for char, code in DEFAULT_CODE_TABLE.items():
            self.assertEqual(char, tree.decode(code))


class TestDecode(unittest.TestCase):

    def setUp(self):
        self.tree = DecodingTree.build(CodeTable({'a': '00', 'b': '01', 'c': '10'}))

    def test_decode(self):
        self.assertEqual('abc', self.tree.decode('000110'))

    def test_decode_empty(self):
        self.assertEqual('', self.tree.decode(''))

    def test_walk_offsets(self):
        self.assertEqual([('a', 2), ('b', 4), ('c', 6)], list(self.tree.walk('000110')))

    def test_decode_bitarray(self):
        from bitarray import bitarray
        self.assertEqual('cab', self.tree.decode(bitarray('100001')))

    def test_incomplete_encoding(self):
        with self.assertRaises(IncompleteEncoding) as ctx:
            self.tree.decode('00011')
        self.assertEqual('1', ctx.exception.pending)

    def test_unexpected_bit(self):
        with self.assertRaises(UnexpectedBit) as ctx:
            self.tree.decode('0011')
        self.assertEqual('1', ctx.exception.bit)
        self.assertEqual(3, ctx.exception.position)

    def test_invalid_bit(self):
        with self.assertRaises(InvalidBit) as ctx:
            self.tree.decode('00x1')
        self.assertEqual('x', ctx.exception.bit)
        self.assertEqual(2, ctx.exception.position)

    def test_tree_is_reusable(self):
        with self.assertRaises(IncompleteEncoding):
            self.tree.decode('0')
        self.assertEqual('ba', self.tree.decode('0100'))


if __name__ == '__main__':
    unittest.main()
