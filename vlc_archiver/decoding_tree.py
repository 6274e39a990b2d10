from typing import Iterator, Optional, Tuple

from bitarray import bitarray

from .errors import (DuplicateCode, IncompleteEncoding, InvalidBit,
                     InvalidCodeBit, PrefixConflict, UnexpectedBit)


class Node:
    __slots__ = ("value", "zero", "one")

    def __init__(self, value: Optional[str] = None) -> None:
        self.value = value
        self.zero: Optional["Node"] = None
        self.one: Optional["Node"] = None

    @property
    def is_leaf(self) -> bool:
        return self.value is not None

    def has_children(self) -> bool:
        return self.zero is not None or self.one is not None


class DecodingTree:
    """
    Binary trie over the codes of a code table.

    Every root-to-leaf path spells one code and the leaf holds its
    character. The tree is not modified after ``build``, so one instance
    can be shared by any number of concurrent decodes.
    """

    def __init__(self, root: Node) -> None:
        self.root = root

    @classmethod
    def build(cls, table) -> "DecodingTree":
        """
        Builds the tree for a code table.

        Parameters:
        table (Mapping[str, str]): Character to code mapping, usually a CodeTable.

        Returns:
        DecodingTree: The tree rooted at a fresh node.

        Raises:
        InvalidCodeBit: If a code is empty or has a character other than '0'/'1'.
        PrefixConflict: If one code is a prefix of another.
        DuplicateCode: If two characters share a code.
        """
        root = Node()
        for char, code in table.items():
            if not code:
                raise InvalidCodeBit(char, code)
            current = root
            for i, bit in enumerate(code):
                if bit == "0":
                    if current.zero is None:
                        current.zero = Node()
                    current = current.zero
                elif bit == "1":
                    if current.one is None:
                        current.one = Node()
                    current = current.one
                else:
                    raise InvalidCodeBit(char, code)

                if i < len(code) - 1 and current.is_leaf:
                    raise PrefixConflict(char, code, current.value)

            if current.has_children():
                raise PrefixConflict(char, code)
            if current.is_leaf:
                raise DuplicateCode(char, code, current.value)
            current.value = char
        return cls(root)

    def walk(self, bits) -> Iterator[Tuple[str, int]]:
        """
        Decodes lazily, yielding each character with the offset just past
        its code.

        Raises:
        InvalidBit: On a bit other than '0'/'1'.
        UnexpectedBit: When no code continues with the current bit.
        IncompleteEncoding: When the bits end in the middle of a code.
        """
        if isinstance(bits, bitarray):
            bits = bits.to01()
        current = self.root
        start = 0
        for position, bit in enumerate(bits):
            if bit == "0":
                child = current.zero
            elif bit == "1":
                child = current.one
            else:
                raise InvalidBit(bit, position)
            if child is None:
                raise UnexpectedBit(bit, position)
            current = child

            if current.is_leaf:
                yield current.value, position + 1
                current = self.root
                start = position + 1

        if current is not self.root:
            raise IncompleteEncoding(bits[start:])

    def decode(self, bits) -> str:
        return "".join(char for char, _ in self.walk(bits))
