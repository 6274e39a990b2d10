class VlcError(ValueError):
    pass


class UnknownCharacter(VlcError):
    def __init__(self, character):
        self.character = character
        super().__init__(f"undefined character: {character!r} (U+{ord(character):04X})")


class InvalidBitstream(VlcError):
    pass


class InvalidBit(InvalidBitstream):
    def __init__(self, bit, position):
        self.bit = bit
        self.position = position
        super().__init__(f"invalid bit {bit!r} at position {position}")


class InvalidHexChunk(VlcError):
    def __init__(self, token, reason="not a 2-digit hex value"):
        self.token = token
        super().__init__(f"invalid hex chunk {token!r}: {reason}")


class CodeTableError(VlcError):
    pass


class InvalidCodeBit(CodeTableError):
    def __init__(self, character, code):
        self.character = character
        self.code = code
        super().__init__(f"invalid code {code!r} for {character!r}")


class PrefixConflict(CodeTableError):
    def __init__(self, character, code, other=None):
        self.character = character
        self.code = code
        self.other = other
        if other is None:
            message = f"code {code!r} for {character!r} is a prefix of another code"
        else:
            message = f"code conflict: the code of {other!r} is a prefix of {code!r} for {character!r}"
        super().__init__(message)


class DuplicateCode(CodeTableError):
    def __init__(self, character, code, other):
        self.character = character
        self.code = code
        self.other = other
        super().__init__(f"duplicate code {code!r} for {character!r} and {other!r}")


class UnexpectedBit(VlcError):
    def __init__(self, bit, position):
        self.bit = bit
        self.position = position
        super().__init__(f"unexpected {bit} at position {position}")


class IncompleteEncoding(VlcError):
    def __init__(self, pending):
        self.pending = pending
        super().__init__(f"incomplete encoding: {pending!r} left over")


class EmptyPathError(ValueError):
    def __init__(self):
        super().__init__("path to file is not specified")


class ConfigError(ValueError):
    pass
