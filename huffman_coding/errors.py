"""
Exceptions raised while encoding or decoding with a Huffman code.

Every exception keeps the output that was computed before the problem
was met, in the attribute `partial`, so that a caller can still use the
part of the text that was translated successfully.
"""


class CodingError(ValueError):
    """ Base class for problems met while encoding or decoding. """

    def __init__(self, message, partial=""):
        ValueError.__init__(self, message)
        self.partial = partial


class UnrecognizedSymbol(CodingError):

    def __init__(self, symbol, partial=""):
        message = "Unrecognized symbol: %r" % (symbol,)
        CodingError.__init__(self, message, partial)
        self.symbol = symbol


class EmptyTree(CodingError):

    def __init__(self):
        CodingError.__init__(self, "Cannot decode with an empty tree")


class EmptyInput(CodingError):

    def __init__(self):
        CodingError.__init__(self, "Cannot decode an empty input")


class IllegalCharacter(CodingError):

    def __init__(self, character, partial=""):
        message = "Illegal character in code: %r" % (character,)
        CodingError.__init__(self, message, partial)
        self.character = character


class DecodeFailed(CodingError):

    def __init__(self, partial=""):
        message = "Code walks off the tree after decoding %r" % (partial,)
        CodingError.__init__(self, message, partial)
