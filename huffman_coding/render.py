"""
Text diagrams of Huffman trees, for inspection and debugging.

Each node is printed on its own line, below its parent and indented one
column further to the right. Vertical bars connect the left child of a
node with the right child that follows further down.
"""

from termcolor import colored


VERTICAL = "┃"
BRANCH = "┣━━"
LAST_BRANCH = "┗━━"
COLUMN_WIDTH = 8
CODE_COLOR = "green"


def format_label(node, color=False):
    """ Describe a node by its weight, and a leaf also by symbol and code. """

    label = "weight:%-4d" % node.weight
    if not node.is_leaf:
        return label

    leafinfo = "symbol:%s code:%s" % (node.symbol, node.code)
    if color:
        leafinfo = colored(leafinfo, CODE_COLOR)

    return label + " " + leafinfo


def indentation(node):
    """ Compute the margin that places a node under its ancestors. """

    margin = ""
    current = node.parent
    ancestor = current.parent if current is not None else None

    while ancestor is not None:
        if ancestor.left is current:
            margin = VERTICAL.ljust(COLUMN_WIDTH) + margin
        else:
            margin = " " * COLUMN_WIDTH + margin
        current = ancestor
        ancestor = current.parent

    return margin


def connector(node):

    parent = node.parent
    if node.is_left_child and parent.right is not None:
        return BRANCH
    else:
        return LAST_BRANCH


def iter_lines(node, visited, depth=0, color=False):
    """ Yield the diagram lines of a tree, marking each node as visited. """

    line = indentation(node)
    if depth > 0:
        line += connector(node)
    line += format_label(node, color=color)
    visited.add(node)

    yield line

    for child in (node.left, node.right):
        if child is not None:
            for line in iter_lines(child, visited, depth + 1, color):
                yield line


def render_tree(root, color=False):
    """ Draw a single tree, followed by an empty line. """

    return render_forest([root], color=color)


def render_forest(trees, color=False):
    """ Draw every tree in a forest, each followed by an empty line.

    Arguments:
    ----------
    trees : iterable of Nodes
        The roots to draw. A root that was already drawn as part of an
        earlier tree is skipped.
    color : bool
        Whether to highlight the symbols and codes of the leaves.

    Returns:
    --------
    diagram : str
        The lines of the diagram, each ending in a newline.
    """

    visited = set()
    diagram = ""

    for root in trees:
        if root in visited:
            continue
        for line in iter_lines(root, visited, color=color):
            diagram += line + "\n"
        diagram += "\n"

    return diagram
