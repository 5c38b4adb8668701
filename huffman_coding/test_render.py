from huffman_coding.coder import HuffmanCoder
from huffman_coding.forest import Forest
from huffman_coding.node import Node
from huffman_coding.render import render_forest, render_tree


def test_that_a_right_heavy_tree_is_drawn_without_bars():

    coder = HuffmanCoder([("a", 1), ("b", 2), ("c", 1)])

    expected = ("weight:4   \n"
                "┣━━weight:2    symbol:b code:0\n"
                "┗━━weight:2   \n"
                "        ┣━━weight:1    symbol:a code:10\n"
                "        ┗━━weight:1    symbol:c code:11\n"
                "\n")

    assert coder.render() == expected


def test_that_left_subtrees_are_connected_by_vertical_bars():

    coder = HuffmanCoder([("a", 1), ("b", 1), ("c", 1), ("d", 1)])

    expected = ("weight:4   \n"
                "┣━━weight:2   \n"
                "┃       ┣━━weight:1    symbol:c code:00\n"
                "┃       ┗━━weight:1    symbol:a code:01\n"
                "┗━━weight:2   \n"
                "        ┣━━weight:1    symbol:b code:10\n"
                "        ┗━━weight:1    symbol:d code:11\n"
                "\n")

    assert coder.render() == expected


def test_that_empty_and_single_leaf_forests_are_drawn():

    assert Forest().render() == ""

    coder = HuffmanCoder([("x", 7)])
    assert coder.render() == "weight:7    symbol:x code:0\n\n"


def test_that_each_tree_of_a_forest_is_drawn_once():

    joined = Node.join(Node("a", 1), Node("b", 1))
    joined.assign_codes("")
    lonely = Node("c", 5)
    lonely.code = "0"

    expected = ("weight:2   \n"
                "┣━━weight:1    symbol:a code:0\n"
                "┗━━weight:1    symbol:b code:1\n"
                "\n"
                "weight:5    symbol:c code:0\n"
                "\n")

    # the leaf `a` was already drawn as part of the first tree:
    assert render_forest([joined, joined.left, lonely]) == expected
    assert render_forest([joined, joined.left, lonely]) == expected
    assert render_tree(lonely) == "weight:5    symbol:c code:0\n\n"


def test_that_colored_diagrams_contain_the_same_labels():

    coder = HuffmanCoder([("a", 1), ("b", 2), ("c", 1)])
    diagram = coder.render(color=True)

    for symbol, code in coder.codebook.items():
        assert ("symbol:%s code:%s" % (symbol, code)) in diagram
