"""
Drawings of Huffman trees with matplotlib.

The leaves are placed on a vertical line at the right-hand side of the
figure, top to bottom in the order of their codewords, and every internal
node is placed to the left of its children, halfway between them in
proportion to their number of leaves.
"""

import numpy as np
from matplotlib import pyplot as plt


FONTARGS = dict(fontsize=14, family="monospace", fontweight="bold")


def place_internal_nodes(node, locations, leftshift):
    """ Locate every internal node below `node`; return the leaf count. """

    if node.is_leaf:
        return 1

    n1 = place_internal_nodes(node.left, locations, leftshift)
    n2 = place_internal_nodes(node.right, locations, leftshift)
    xy1 = locations[node.left]
    xy2 = locations[node.right]

    xy = (n1*xy1 + n2*xy2) / (n1 + n2)
    xy[0] = min(xy1[0], xy2[0]) - leftshift
    locations[node] = xy

    return n1 + n2


def layout_tree(root, min_y=-1.0, max_y=1.0, max_x=1.0, leftshift=0.3):
    """ Assign an (x, y)-location to every node of a tree.

    Arguments:
    ----------
    root : Node
        The root of the tree to lay out.
    min_y, max_y : float
        The vertical extent of the column of leaves.
    max_x : float
        The horizontal position of the column of leaves.
    leftshift : float
        The horizontal distance between a parent and its nearest child.

    Returns:
    --------
    locations : dict
        A table in the format {node: array([x, y])}.
    """

    leaves = list(root.iter_leaves())
    heights = np.linspace(max_y, min_y, len(leaves))

    locations = {leaf: np.array([max_x, y]) for leaf, y in zip(leaves, heights)}
    place_internal_nodes(root, locations, leftshift)

    return locations


def draw_tree(source, leftshift=0.3):
    """ Draw the tree of a coder or a forest and return the figure. """

    forest = getattr(source, "forest", source)
    if not forest:
        raise ValueError("Cannot draw an empty forest")

    root = forest[0]
    leaves = list(root.iter_leaves())
    locations = layout_tree(root, leftshift=leftshift)

    figure = plt.figure(figsize=(12, 8))

    for node, xy in locations.items():
        for child in (node.left, node.right):
            if child is not None:
                plt.arrow(*xy, *(locations[child] - xy))

    for leaf in leaves:
        x, y = locations[leaf]
        label = " %s: %s" % (leaf.symbol, leaf.code)
        plt.text(x, y, label, ha="left", va="center", **FONTARGS)

    min_x = min(x for x, y in locations.values())
    max_x = max(x for x, y in locations.values())
    treewidth = max(max_x - min_x, leftshift)

    plt.xlim(min_x - 0.1*treewidth,
             max_x + 0.3*treewidth)

    plt.ylim(-1.0 - 0.2,
             +1.0 + 0.3)

    plt.title("Huffman code for %s symbols" % len(leaves))
    plt.axis("off")

    return figure


if __name__ == "__main__":

    from huffman_coding.coder import HuffmanCoder

    text = "abracadabra, the huffman tree grows from its leaves"
    coder = HuffmanCoder.from_text(text)

    figure = draw_tree(coder)
    plt.show()
    plt.close(figure)
