import random
import unittest

from huffcodec.analyzers import FrequencyAnalyzer
from huffcodec.coders import MessageCoder, BitPacker
from huffcodec.errors import EmptyInputError, UnknownSymbolError, MalformedBitstreamError, TruncatedStreamError
from huffcodec.logger import Logger, CodingLog
from huffcodec.trees import TreeBuilder, CodeTableGenerator

ABRACADABRA_BITS = "".join(["0", "110", "111", "0", "100", "0", "101", "0", "110", "111", "0"])

def build(message):
    root = TreeBuilder().build(FrequencyAnalyzer().analyze(message))
    return root, CodeTableGenerator().generate(root)

class TestMessageCoder(unittest.TestCase):
    def setUp(self):
        self.logger = Logger()
        self.coder = MessageCoder(self.logger)
        self.root, self.codes = build("abracadabra")

    def test_encode_abracadabra(self):
        bitstring = self.coder.encode("abracadabra", self.codes)
        self.assertEqual(bitstring, ABRACADABRA_BITS)
        self.assertEqual(len(bitstring), 23)

    def test_decode_abracadabra(self):
        self.assertEqual(self.coder.decode(ABRACADABRA_BITS, self.root), "abracadabra")

    def test_encode_subset_of_alphabet(self):
        self.assertEqual(self.coder.encode("bad", self.codes), "1100101")

    def test_unknown_symbol(self):
        with self.assertRaises(UnknownSymbolError) as context:
            self.coder.encode("abz", self.codes)
        self.assertEqual(context.exception.symbol, 'z')
        self.assertEqual(context.exception.position, 2)

    def test_empty_message(self):
        with self.assertRaises(EmptyInputError):
            self.coder.encode("", self.codes)

    def test_decode_empty_bitstring(self):
        self.assertEqual(self.coder.decode("", self.root), "")

    def test_truncated_stream(self):
        with self.assertRaises(TruncatedStreamError) as context:
            self.coder.decode("011", self.root)
        self.assertEqual(context.exception.position, 3)
        with self.assertRaises(MalformedBitstreamError):
            self.coder.decode(ABRACADABRA_BITS[:-2], self.root)

    def test_invalid_bit(self):
        with self.assertRaises(MalformedBitstreamError) as context:
            self.coder.decode("01x0", self.root)
        self.assertEqual(context.exception.position, 2)

    def test_single_leaf(self):
        root, codes = build("aaaa")
        bitstring = self.coder.encode("aaaa", codes)
        self.assertEqual(bitstring, "0000")
        self.assertEqual(self.coder.decode(bitstring, root), "aaaa")
        with self.assertRaises(MalformedBitstreamError):
            self.coder.decode("001", root)

    def test_round_trip(self):
        rng = random.Random(42)
        alphabet = "abcdefgh ,.!"
        for _ in range(50):
            message = "".join(rng.choice(alphabet) for _ in range(rng.randint(2, 200)))
            if len(set(message)) < 2:
                continue
            root, codes = build(message)
            self.assertEqual(self.coder.decode(self.coder.encode(message, codes), root), message)

    def test_logging(self):
        self.coder.encode("abracadabra", self.codes)
        logs = [log for log in self.logger.get_logs() if isinstance(log, CodingLog)]
        self.assertEqual(len(logs), 1)
        self.assertEqual(logs[0].symbol_count, 11)
        self.assertEqual(logs[0].encoded_size, 23)

class TestBitPacker(unittest.TestCase):
    def setUp(self):
        self.packer = BitPacker()

    def test_pack(self):
        packed = self.packer.pack("101010101")
        self.assertEqual(packed, b"\x00\x00\x00\x09" + bytes([0b10101010, 0b10000000]))

    def test_unpack(self):
        data = b"\x00\x00\x00\x09" + bytes([0b10101010, 0b10000000])
        self.assertEqual(self.packer.unpack(data), "101010101")

    def test_pack_empty(self):
        self.assertEqual(self.packer.pack(""), b"\x00\x00\x00\x00")
        self.assertEqual(self.packer.unpack(b"\x00\x00\x00\x00"), "")

    def test_pack_encoded_message(self):
        packed = self.packer.pack(ABRACADABRA_BITS)
        self.assertEqual(len(packed), 4 + 3)
        self.assertEqual(self.packer.unpack(packed), ABRACADABRA_BITS)

    def test_truncated(self):
        with self.assertRaises(TruncatedStreamError):
            self.packer.unpack(b"\x00\x00")
        with self.assertRaises(TruncatedStreamError):
            self.packer.unpack(b"\x00\x00\x00\x10\xff")

    def test_trailing_bytes(self):
        with self.assertRaises(MalformedBitstreamError):
            self.packer.unpack(b"\x00\x00\x00\x08\xff\x00")

    def test_invalid_bitstring(self):
        with self.assertRaises(MalformedBitstreamError):
            self.packer.pack("0120")

if __name__ == '__main__':
    unittest.main()
