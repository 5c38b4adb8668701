"""
Information-theoretic measures of a code.

Huffman codes are optimal among prefix codes, so the mean codeword length
of a Huffman code lies between the entropy H of the weight distribution
and H + 1. The Kraft sum of a Huffman code with two or more codewords is
exactly 1, since every internal node of the tree has two children.
"""

import numpy as np
from scipy.special import entr  # elementwise -p*log(p), in nats
from typing import Dict, List


def normalize(weights: List[float]) -> np.ndarray:
    """ Convert a list of non-negative weights into probabilities. """

    weights = np.asarray(weights, dtype=float)
    total = np.sum(weights)

    if total <= 0:
        raise ValueError("Weights must have a positive sum, got %r" % total)

    return weights / total


def compute_entropy(weights: List[float]) -> float:
    """ Compute the binary entropy of the distribution the weights imply. """

    return float(np.sum(entr(normalize(weights))) / np.log(2))


def compute_mean_length(weights: List[float], codewords: List[str]) -> float:
    """ Compute the expected codeword length under the weights. """

    assert len(weights) == len(codewords)

    lengths = np.array([len(word) for word in codewords])

    return float(np.sum(normalize(weights) * lengths))


def compute_kraft_sum(codewords: List[str]) -> float:
    """ Compute the sum of 2**(-length) over the codewords. """

    return float(sum(2.0 ** -len(word) for word in codewords))


def is_prefix_free(codewords: List[str]) -> bool:
    """ Return True iff no codeword is a prefix of another. """

    if len(set(codewords)) < len(codewords):
        return False  # a codeword appears twice

    for w1 in codewords:
        for w2 in codewords:
            if len(w1) < len(w2) and w2.startswith(w1):
                return False  # w1 is a prefix of w2

    return True  # also true for the empty code


def describe_code(coder) -> Dict[str, float]:
    """ Summarize how well a Huffman coder compresses its own source.

    Arguments:
    ----------
    coder : HuffmanCoder
        A coder with at least one symbol of positive weight.

    Returns:
    --------
    description : dict
        The entropy of the weights, the mean codeword length, the
        redundancy (their difference), and the Kraft sum of the code.
    """

    weights = coder.weights
    symbols = list(weights.keys())
    probs = [weights[symbol] for symbol in symbols]
    codewords = [coder.codebook[symbol] for symbol in symbols]

    entropy = compute_entropy(probs)
    mean_length = compute_mean_length(probs, codewords)

    return {
        "entropy": entropy,
        "mean_length": mean_length,
        "redundancy": mean_length - entropy,
        "kraft_sum": compute_kraft_sum(codewords),
    }
