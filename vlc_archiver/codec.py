import threading
from typing import Optional

from bitarray import bitarray

from . import bit_packer
from .case_transform import fold, restore
from .code_table import DEFAULT_CODE_TABLE, CodeTable
from .decoding_tree import DecodingTree

PADDING_TRIM = "trim"
PADDING_STRICT = "strict"
PADDING_POLICIES = (PADDING_TRIM, PADDING_STRICT)


class VlcCodec:
    """
    Packs text with a fixed variable-length code and unpacks it again.

    The packed form is space-separated hex bytes of the code bits, the last
    byte padded with '0' bits. Since 'e' is coded as '000' in the default
    table, padding can read back as extra 'e's or as an unfinished code.
    ``padding`` picks how decode deals with that:

    - "trim": stop at the first character boundary inside the last 7 bits
      that is followed only by '0' bits. A trailing 'e' that sits wholly in
      that window is lost.
    - "strict": decode every bit, so padding may add 'e's or raise
      IncompleteEncoding.
    """

    def __init__(self, table: Optional[CodeTable] = None,
                 tree: Optional[DecodingTree] = None,
                 padding: str = PADDING_TRIM) -> None:
        if padding not in PADDING_POLICIES:
            raise ValueError(f"Unsupported padding policy: {padding}")
        self.table = table if table is not None else DEFAULT_CODE_TABLE
        self.tree = tree if tree is not None else DecodingTree.build(self.table)
        self.padding = padding

    def encode_bits(self, text: str) -> bitarray:
        """
        Codes folded text into one bit sequence.

        Parameters:
        text (str): Text already passed through ``fold``.

        Returns:
        bitarray: The concatenated codes, unpadded.
        """
        bits = bitarray(endian="big")
        for char in text:
            bits.extend(self.table.lookup(char))
        return bits

    def encode(self, text: str) -> str:
        bits = self.encode_bits(fold(text))
        chunks = bit_packer.encode_bitstream(bits)
        return bit_packer.serialize(bit_packer.chunks_to_hex(chunks))

    def decode(self, packed: str) -> str:
        if packed == "":
            return ""
        hex_chunks = bit_packer.deserialize(packed)
        bits = bit_packer.join_chunks(bit_packer.hex_to_chunks(hex_chunks))
        if self.padding == PADDING_STRICT:
            folded = self.tree.decode(bits)
        else:
            folded = self._decode_trimmed(bits)
        return restore(folded)

    def _decode_trimmed(self, bits: str) -> str:
        window_start = len(bits) - (bit_packer.CHUNK_SIZE - 1)
        decoded = []
        for char, end in self.tree.walk(bits):
            decoded.append(char)
            if end >= window_start and "1" not in bits[end:]:
                break
        return "".join(decoded)


_default_codec = None
_default_codec_lock = threading.Lock()


def get_default_codec() -> VlcCodec:
    global _default_codec
    if _default_codec is None:
        with _default_codec_lock:
            if _default_codec is None:
                _default_codec = VlcCodec()
    return _default_codec


def encode(text: str) -> str:
    return get_default_codec().encode(text)


def decode(packed: str) -> str:
    return get_default_codec().decode(packed)
