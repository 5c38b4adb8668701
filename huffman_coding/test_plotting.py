import matplotlib
matplotlib.use("Agg")  # draw off-screen

import pytest
from matplotlib import pyplot as plt

from huffman_coding.coder import HuffmanCoder
from huffman_coding.forest import Forest
from huffman_coding.plotting import layout_tree, draw_tree


def test_that_parents_are_placed_left_of_their_children():

    coder = HuffmanCoder.from_text("mississippi river")
    root = coder.forest.root
    locations = layout_tree(root, max_x=1.0)

    assert len(locations) == len(list(root.iter_preorder()))

    for node, (x, y) in locations.items():
        if node.is_leaf:
            assert x == 1.0
        else:
            assert x < locations[node.left][0]
            assert x < locations[node.right][0]


def test_that_leaves_are_stacked_in_code_order():

    coder = HuffmanCoder([("a", 5), ("b", 9), ("c", 12),
                          ("d", 13), ("e", 16), ("f", 45)])
    root = coder.forest.root
    locations = layout_tree(root)

    heights = [locations[leaf][1] for leaf in root.iter_leaves()]
    assert heights == sorted(heights, reverse=True)


def test_that_drawing_labels_every_leaf():

    coder = HuffmanCoder.from_text("abracadabra")
    figure = draw_tree(coder)

    labels = [text.get_text() for text in figure.axes[0].texts]
    assert sorted(labels) == sorted(" %s: %s" % pair
                                    for pair in coder.codebook.items())
    plt.close(figure)

    figure = draw_tree(HuffmanCoder([("x", 1)]).forest)
    assert len(figure.axes[0].texts) == 1
    plt.close(figure)


def test_that_empty_forests_cannot_be_drawn():

    with pytest.raises(ValueError):
        draw_tree(Forest())


def test_that_the_view_leaves_room_for_the_leaf_labels():

    coder = HuffmanCoder.from_text("a long text with many different codewords")
    figure = draw_tree(coder)
    locations = layout_tree(coder.forest.root)

    left, right = figure.axes[0].get_xlim()
    xs = [x for x, y in locations.values()]
    assert left < min(xs)
    assert right > max(xs)
    plt.close(figure)

    figure = draw_tree(HuffmanCoder([("x", 1)]))
    left, right = figure.axes[0].get_xlim()
    assert left < 1.0 < right
    plt.close(figure)
