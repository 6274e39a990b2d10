"""
Conversion between a logical bit sequence and the packed hex text.

The bitstream is cut into 8-bit chunks, the last one right-padded with
zeros, and every chunk is written as two uppercase hex digits. The padding
is not recorded anywhere in the packed text.
"""

import string
from typing import Iterable, List, Union

from bitarray import bitarray
from bitarray.util import ba2hex, hex2ba

from .errors import InvalidBit, InvalidBitstream, InvalidHexChunk

CHUNK_SIZE = 8
HEX_CHUNK_SIZE = 2  # hex digits per 8-bit chunk
HEX_CHUNK_SEP = " "

_HEX_DIGITS = frozenset(string.hexdigits)

Bits = Union[str, bitarray]


def to_bitarray(bits: Bits) -> bitarray:
    """
    Converts a '0'/'1' string into a big-endian bitarray.

    Parameters:
    bits (str | bitarray): The bit sequence. A bitarray is copied.

    Returns:
    bitarray: A new bitarray holding the same bits.
    """
    if isinstance(bits, bitarray):
        return bitarray(bits.to01(), endian="big")
    for position, bit in enumerate(bits):
        if bit != "0" and bit != "1":
            raise InvalidBit(bit, position)
    return bitarray(bits, endian="big")


def encode_bitstream(bits: Bits) -> List[str]:
    """
    Splits a bit sequence into 8-bit chunks, zero-padding the last one.

    Parameters:
    bits (str | bitarray): The bit sequence to split.

    Returns:
    List[str]: The chunks, each exactly 8 characters of '0'/'1'.
    """
    ba = to_bitarray(bits)
    ba.fill()
    return [ba[i:i + CHUNK_SIZE].to01() for i in range(0, len(ba), CHUNK_SIZE)]


def join_chunks(chunks: Iterable[str]) -> str:
    return "".join(chunks)


def chunk_to_hex(chunk: str) -> str:
    if len(chunk) != CHUNK_SIZE:
        raise InvalidBitstream(
            f"invalid binary chunk size: want {CHUNK_SIZE}, got {len(chunk)}"
        )
    return ba2hex(to_bitarray(chunk)).upper()


def chunks_to_hex(chunks: Iterable[str]) -> List[str]:
    return [chunk_to_hex(chunk) for chunk in chunks]


def check_hex_chunk(token: str) -> str:
    if len(token) != HEX_CHUNK_SIZE:
        raise InvalidHexChunk(
            token, f"wrong size: want {HEX_CHUNK_SIZE}, got {len(token)}"
        )
    if not _HEX_DIGITS.issuperset(token):
        raise InvalidHexChunk(token)
    return token


def hex_to_chunk(token: str) -> str:
    return hex2ba(check_hex_chunk(token), endian="big").to01()


def hex_to_chunks(hex_chunks: Iterable[str]) -> List[str]:
    return [hex_to_chunk(token) for token in hex_chunks]


def serialize(hex_chunks: Iterable[str]) -> str:
    return HEX_CHUNK_SEP.join(hex_chunks)


def deserialize(text: str) -> List[str]:
    """
    Parses packed text into hex chunks.

    Tokens may be separated by any run of whitespace. Empty text gives an
    empty list.

    Raises:
    InvalidHexChunk: If a token is not exactly two hex digits.
    """
    return [check_hex_chunk(token) for token in text.split()]
