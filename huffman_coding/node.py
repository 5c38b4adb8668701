"""
Nodes of a Huffman tree.

A node is either a leaf, which carries a symbol and a weight, or an
internal node, which carries no symbol, owns exactly two children, and
weighs as much as its children together. Each node also keeps a weak
reference to its parent; this reference is only used for looking up
ancestors when a tree is drawn.
"""

import weakref


LEFT = "0"
RIGHT = "1"


class Node(object):

    def __init__(self, symbol=None, weight=0, left=None, right=None):
        """ Create a leaf (if `symbol` is given) or an internal node. """

        self.symbol = symbol
        self.weight = weight
        self.left = left
        self.right = right
        self.code = None
        self._parent = None

    def __repr__(self):
        if self.is_leaf:
            return "Node(%r, %r)" % (self.symbol, self.weight)
        return "Node(None, %r, %r, %r)" % (self.weight, self.left, self.right)

    @classmethod
    def join(cls, left, right):
        """ Create an internal node with the two given children. """

        node = cls(weight=left.weight + right.weight, left=left, right=right)
        left.parent = node
        right.parent = node

        return node

    @property
    def parent(self):
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, node):
        self._parent = weakref.ref(node) if node is not None else None

    @property
    def is_leaf(self):
        return self.symbol is not None

    @property
    def is_left_child(self):
        parent = self.parent
        return parent is not None and parent.left is self

    def iter_preorder(self):
        """ Yield this node and then every node below it, left first. """

        yield self
        for child in (self.left, self.right):
            if child is not None:
                for node in child.iter_preorder():
                    yield node

    def iter_leaves(self):
        """ Yield the leaves below this node from left to right. """

        return (node for node in self.iter_preorder() if node.is_leaf)

    def assign_codes(self, path=""):
        """ Label every leaf below this node by its path from here.

        Arguments:
        ----------
        path : str
            The path already walked to reach this node, as a string of
            '0's (left turns) and '1's (right turns).
        """

        if self.is_leaf:
            self.code = path
        if self.left is not None:
            self.left.assign_codes(path + LEFT)
        if self.right is not None:
            self.right.assign_codes(path + RIGHT)
