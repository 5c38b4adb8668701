"""
HUFFMAN FOREST
--------------

A forest is a list of Huffman trees, sorted by increasing weight. Before
a build it holds one leaf per symbol; after a build it holds a single
root from which every leaf can be reached.

The tree is built bottom-up by repeatedly joining together the two
lightest trees in the forest, as described by David A. Huffman in "A
Method for the Construction of Minimum-Redundancy Codes" (Proceedings of
the IRE, 1952).

Ties are broken by position: the list is sorted with Python's stable sort,
the two first trees are joined, and the joined tree is put back after any
trees of the same weight. Since every append rebuilds the whole tree from
its leaves (taken in left-to-right order), the code assigned to a given
sequence of appends is fully determined.
"""

import numbers
from collections import OrderedDict

from huffman_coding.errors import (EmptyTree, EmptyInput,
                                   IllegalCharacter, DecodeFailed)
from huffman_coding.node import Node, LEFT, RIGHT
from huffman_coding.render import render_forest


def validate_leaf(symbol, weight):
    """ Complain if the pair cannot be used as a leaf of the tree. """

    if not isinstance(symbol, str) or len(symbol) != 1:
        raise ValueError("Symbols must be single characters, got %r" % (symbol,))
    if isinstance(weight, bool) or not isinstance(weight, numbers.Integral):
        raise ValueError("Weights must be integers, got %r" % (weight,))
    if weight < 0:
        raise ValueError("Weights must be non-negative, got %r" % (weight,))


class Forest(list):
    """
    A list of trees that rebuilds its code whenever symbols are added.

    Symbols enter through `append`, `extend`, `+=` or the constructor, all
    of which rebuild the tree. The other inherited list mutators (`insert`,
    item assignment) place nodes without rebuilding and are only meant for
    the internal bookkeeping of the build.
    """

    def __init__(self, pairs=()):
        list.__init__(self)
        self.extend(pairs)

    def __iadd__(self, pairs):
        self.extend(pairs)
        return self

    @property
    def root(self):
        """ The root of the first tree, or None if the forest is empty. """

        return self[0] if self else None

    @property
    def symbols(self):
        """ The symbols of all leaves in the forest, left to right. """

        return [leaf.symbol for tree in self for leaf in tree.iter_leaves()]

    def append(self, symbol, weight):
        """ Add a new symbol and rebuild the whole code from scratch.

        Arguments:
        ----------
        symbol : str
            A single character that does not already occur in the forest.
        weight : int >= 0
            The frequency or priority of the symbol.
        """

        validate_leaf(symbol, weight)
        if symbol in self.symbols:
            raise ValueError("Symbol %r has already been added" % (symbol,))

        self.reset()
        list.append(self, Node(str(symbol), int(weight)))
        self.sort_by_weight()
        self.build()

    def extend(self, pairs):
        """ Append (symbol, weight) pairs one at a time, in order. """

        for symbol, weight in pairs:
            self.append(symbol, weight)

    def sort_by_weight(self):
        """ Sort the trees by increasing weight, keeping ties in order. """

        self.sort(key=lambda tree: tree.weight)

    def reset(self):
        """ Replace the forest by fresh copies of its leaves. """

        self[:] = [Node(leaf.symbol, leaf.weight)
                   for tree in self for leaf in tree.iter_leaves()]

    def join_lightest(self):
        """ Join the two first trees; return False if there are not two. """

        if len(self) < 2:
            return False

        joined = Node.join(self[0], self[1])
        self[:] = self[2:] + [joined]
        self.sort_by_weight()

        return True

    def build(self):
        """ Join trees until only one is left, then assign the codes. """

        while self.join_lightest():
            pass

        root = self.root
        if root is None:
            return
        if root.is_leaf:
            root.code = LEFT  # a lone symbol still needs one bit
        else:
            root.assign_codes("")

    def compile_codebook(self):
        """ Collect the codes of all leaves in a {symbol: code} table. """

        return OrderedDict((leaf.symbol, leaf.code)
                           for tree in self for leaf in tree.iter_leaves())

    def step(self, node, bit):
        """ Follow one bit from the given node; return None if impossible. """

        if node.is_leaf:
            # only a lone root leaf is ever stepped from
            return node if bit == LEFT else None
        return node.left if bit == LEFT else node.right

    def decode(self, bits):
        """ Translate a string of '0's and '1's back into symbols.

        Arguments:
        ----------
        bits : str
            A concatenation of codewords. Trailing bits that do not make
            up a whole codeword are ignored.

        Returns:
        --------
        text : str
            The decoded symbols.

        Raises:
        -------
        EmptyTree, EmptyInput:
            If there is nothing to decode with or nothing to decode.
        IllegalCharacter, DecodeFailed:
            If the bits cannot be read with this tree. The exception keeps
            the symbols decoded so far in its `partial` attribute.
        """

        if not self:
            raise EmptyTree()
        if not bits:
            raise EmptyInput()

        root = self.root
        cursor = root
        text = ""

        for bit in bits:
            if bit not in (LEFT, RIGHT):
                raise IllegalCharacter(bit, text)
            cursor = self.step(cursor, bit)
            if cursor is None:
                raise DecodeFailed(text)
            if cursor.is_leaf:
                text += cursor.symbol
                cursor = root

        return text

    def render(self, color=False):
        """ Draw the forest as an indented text diagram. """

        return render_forest(self, color=color)
