"""
HUFFMAN CODER
-------------

A Huffman coder keeps a forest of symbol weights together with a table
of the codewords it implies. Symbols are added one at a time; every
addition rebuilds the tree and the codeword table from scratch, since a
new symbol can change the codeword of every other symbol.

Example:
--------
>>> coder = HuffmanCoder([("a", 1), ("b", 2)])
>>> coder.encode("abba")
'0110'
>>> coder.decode("0110")
'abba'
"""

from collections import OrderedDict

import numpy as np

from huffman_coding.errors import UnrecognizedSymbol
from huffman_coding.forest import Forest


class HuffmanCoder(object):

    def __init__(self, weights=None):
        """ Create a coder, optionally from (symbol, weight) pairs.

        Arguments:
        ----------
        weights : dict or iterable of pairs, optional
            Initial weights in the format {symbol: weight} or as a list
            of (symbol, weight) pairs. They are added in the given order.
        """

        self.forest = Forest()
        self.codebook = OrderedDict()

        if weights is not None:
            pairs = weights.items() if isinstance(weights, dict) else weights
            for symbol, weight in pairs:
                self.append(symbol, weight)

    def __repr__(self):
        return "HuffmanCoder(%r)" % dict(self.codebook)

    @classmethod
    def from_text(cls, text):
        """ Create a coder whose weights are the letter counts of a text. """

        if not text:
            raise ValueError("Cannot count the letters of an empty text")

        # an object array keeps characters like "\0" that numpy strings drop
        letters, counts = np.unique(np.array(list(text), dtype=object),
                                    return_counts=True)

        return cls([(str(letter), int(count))
                    for letter, count in zip(letters, counts)])

    @property
    def weights(self):
        """ The current weights in the format {symbol: weight}. """

        return OrderedDict((leaf.symbol, leaf.weight)
                           for tree in self.forest
                           for leaf in tree.iter_leaves())

    def append(self, symbol, weight):
        """ Add a weighted symbol and recompute every codeword. """

        self.forest.append(symbol, weight)
        self.codebook = self.forest.compile_codebook()

    def encode(self, text):
        """ Translate a text into a concatenation of codewords.

        Raises:
        -------
        UnrecognizedSymbol:
            If the text contains a symbol without a codeword. The codewords
            of the symbols before it are kept in the `partial` attribute.
        """

        bits = ""

        for symbol in text:
            code = self.codebook.get(symbol)
            if code is None:
                raise UnrecognizedSymbol(symbol, bits)
            bits += code

        return bits

    def decode(self, bits):
        """ Translate a concatenation of codewords back into a text. """

        return self.forest.decode(bits)

    def render(self, color=False):
        """ Draw the code tree as an indented text diagram. """

        return self.forest.render(color=color)

    def clear(self):
        """ Forget all symbols and codewords. """

        self.forest.clear()
        self.codebook = OrderedDict()


if __name__ == "__main__":

    from huffman_coding.measures import describe_code

    # the textbook example from Cormen et al., "Introduction to Algorithms":

    coder = HuffmanCoder([("a", 5), ("b", 9), ("c", 12),
                          ("d", 13), ("e", 16), ("f", 45)])

    print(coder.render(color=True))

    for symbol, code in coder.codebook.items():
        print("%r  %3d  %r" % (symbol, coder.weights[symbol], code))
    print()

    for name, value in describe_code(coder).items():
        print("%s = %.3f" % (name, value))
    print()

    text = "fadebcfeed"
    bits = coder.encode(text)
    print("%r --> %r --> %r" % (text, bits, coder.decode(bits)))
