import unittest

from bitarray import bitarray

from vlc_archiver import bit_packer
from vlc_archiver.errors import InvalidBit, InvalidBitstream, InvalidHexChunk


class TestEncodeBitstream(unittest.TestCase):

    def test_exact_chunks(self):
        self.assertEqual(['10101011', '00001000'],
                         bit_packer.encode_bitstream('1010101100001000'))

    def test_last_chunk_is_zero_padded(self):
        self.assertEqual(['10101011', '00001000', '10000000'],
                         bit_packer.encode_bitstream('10101011000010001'))

    def test_short_input(self):
        self.assertEqual(['11000000'], bit_packer.encode_bitstream('11'))

    def test_empty(self):
        self.assertEqual([], bit_packer.encode_bitstream(''))

    def test_bitarray_input_is_not_modified(self):
        bits = bitarray('101')
        self.assertEqual(['10100000'], bit_packer.encode_bitstream(bits))
        self.assertEqual('101', bits.to01())

    def test_invalid_character(self):
        with self.assertRaises(InvalidBitstream) as ctx:
            bit_packer.encode_bitstream('0102')
        self.assertIsInstance(ctx.exception, InvalidBit)
        self.assertEqual(3, ctx.exception.position)

    def test_whitespace_is_rejected(self):
        self.assertRaises(InvalidBitstream, bit_packer.encode_bitstream, '0101 0101')


class TestHexChunks(unittest.TestCase):

    def test_every_byte_round_trips(self):
        for value in range(256):
            chunk = format(value, '08b')
            hex_chunks = bit_packer.chunks_to_hex([chunk])
            self.assertEqual([format(value, '02X')], hex_chunks)
            self.assertEqual([chunk], bit_packer.hex_to_chunks(hex_chunks))

    def test_zero_padded_uppercase(self):
        self.assertEqual(['05', 'FF', 'AB'],
                         bit_packer.chunks_to_hex(['00000101', '11111111', '10101011']))

    def test_lowercase_hex_is_accepted(self):
        self.assertEqual(['10101011'], bit_packer.hex_to_chunks(['ab']))

    def test_bad_chunk_width(self):
        self.assertRaises(InvalidBitstream, bit_packer.chunks_to_hex, ['0101'])

    def test_wrong_token_length(self):
        for token in ('A', 'ABC', ''):
            self.assertRaises(InvalidHexChunk, bit_packer.hex_to_chunks, [token])

    def test_non_hex_token(self):
        for token in ('GZ', '0x', '+F', ' F'):
            with self.assertRaises(InvalidHexChunk) as ctx:
                bit_packer.hex_to_chunks([token])
            self.assertEqual(token, ctx.exception.token)

    def test_join_keeps_order(self):
        self.assertEqual('1111000000001111',
                         bit_packer.join_chunks(['11110000', '00001111']))


class TestSerialize(unittest.TestCase):

    def test_serialize(self):
        self.assertEqual('A1 FF', bit_packer.serialize(['A1', 'FF']))
        self.assertEqual('A1', bit_packer.serialize(['A1']))
        self.assertEqual('', bit_packer.serialize([]))

    def test_deserialize(self):
        self.assertEqual(['A1', 'FF', '00'], bit_packer.deserialize('A1  FF\n00 '))
        self.assertEqual([], bit_packer.deserialize(''))

    def test_deserialize_malformed(self):
        self.assertRaises(InvalidHexChunk, bit_packer.deserialize, 'A1 F')
        self.assertRaises(InvalidHexChunk, bit_packer.deserialize, 'xyz123')


if __name__ == '__main__':
    unittest.main()
