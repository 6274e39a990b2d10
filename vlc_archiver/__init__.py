from .code_table import DEFAULT_CODE_TABLE, CodeTable
from .codec import VlcCodec, decode, encode, get_default_codec
from .compression import Compressor
from .decoding_tree import DecodingTree
from .errors import (CodeTableError, DuplicateCode, EmptyPathError,
                     IncompleteEncoding, InvalidBit, InvalidBitstream,
                     InvalidCodeBit, InvalidHexChunk, PrefixConflict,
                     UnexpectedBit, UnknownCharacter, VlcError)

__version__ = "0.1.0"
