from collections.abc import Mapping
from typing import Iterator, List, Tuple

from .errors import InvalidCodeBit, UnknownCharacter


class CodeTable(Mapping):
    """
    Fixed mapping from a character to its variable-length code.

    The codes are strings over '0' and '1' and must be prefix-free, which
    ``validate`` checks by building a decoding tree. A table is read-only
    once constructed.
    """

    def __init__(self, codes, version: str = "custom") -> None:
        """
        Parameters:
        codes (Mapping[str, str]): Character to bitstring mapping.
        version (str): Label identifying the table revision.
        """
        table = {}
        for char, code in dict(codes).items():
            if not code or any(bit not in "01" for bit in code):
                raise InvalidCodeBit(char, code)
            table[char] = code
        self._codes = table
        self.version = version

    def lookup(self, char: str) -> str:
        """
        Returns the code of a character.

        Raises:
        UnknownCharacter: If the character has no code in this table.
        """
        try:
            return self._codes[char]
        except KeyError:
            raise UnknownCharacter(char) from None

    def entries(self) -> List[Tuple[str, str]]:
        return list(self._codes.items())

    def validate(self) -> "CodeTable":
        from .decoding_tree import DecodingTree

        DecodingTree.build(self)
        return self

    def __getitem__(self, char: str) -> str:
        return self._codes[char]

    def __iter__(self) -> Iterator[str]:
        return iter(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def __repr__(self) -> str:
        return f"CodeTable(version={self.version!r}, size={len(self)})"


DEFAULT_CODE_TABLE = CodeTable(
    {
        # Frequent lowercase letters
        "e": "000",
        "t": "0010",
        "a": "0011",
        "o": "0100",
        "n": "0101",
        "s": "0110",
        "r": "0111",
        "h": "10000",
        "i": "10001",

        # Digits
        "0": "1001000",
        "1": "1001001",
        "2": "1001010",
        "3": "1001011",
        "4": "1001100",
        "5": "1001101",
        "6": "1001110",
        "7": "1001111",
        "8": "1010000",
        "9": "1010001",

        # Punctuation, '!' doubles as the uppercase marker
        " ": "1010010",
        ".": "1010011",
        ",": "1010100",
        "!": "1010101",
        "?": "1010110",
        "-": "1010111",
        "_": "1011000",
        "@": "1011001",
        "#": "1011010",
        "$": "1011011",
        "%": "1011100",
        "^": "1011101",
        "&": "1011110",
        "*": "1011111",
        "(": "1100000",
        ")": "1100001",

        # Remaining lowercase letters
        "d": "1100010",
        "l": "1100011",
        "c": "1100100",
        "u": "1100101",
        "m": "1100110",
        "w": "1100111",
        "f": "1101000",
        "g": "1101001",
        "y": "1101010",
        "p": "1101011",
        "b": "1101100",
        "v": "1101101",
        "k": "1101110",
        "j": "1101111",
        "x": "1110000",
        "q": "1110001",
        "z": "1110010",
    },
    version="1",
)
