import math
from collections import Counter

import numpy as np

from ...util.errors import InvalidInputError


def class_entropy(y):
    """Shannon entropy (in bits) of the label distribution of y
    """
    y = np.asarray(y)
    if y.size == 0:
        raise InvalidInputError('class entropy is undefined for an empty dataset')
    _, counts = np.unique(y, return_counts=True)
    p = counts / y.size
    return 0.0 - math.fsum(p * np.log2(p))


def partition(X, y, feature_index):
    """Split (X, y) into groups keyed by the values of one feature.
    Only values observed in X are used, in order of first occurrence.

    Returns
    -------
    groups: dict
        feature value -> (X_group, y_group)
    """
    column = X[:, feature_index]
    groups = {}
    for value in dict.fromkeys(column.tolist()):
        mask = np.asarray(column == value, dtype=bool)
        groups[value] = (X[mask], y[mask])
    return groups


def feature_entropy(X, y, feature_index, weighting='group'):
    """Expected class entropy remaining after splitting on feature_index.

    Params
    ------
    weighting: str
        'group' weights each value group by |group| / |data|.
        'reference' accumulates count(class in group) / |data| once per class within
        each group, which sums to the same weight but in a different floating-point order.
    """
    n = y.shape[0]
    terms = []
    for _, y_group in partition(X, y, feature_index).values():
        ent = class_entropy(y_group)
        if weighting == 'group':
            terms.append(y_group.shape[0] / n * ent)
        elif weighting == 'reference':
            _, counts = np.unique(y_group, return_counts=True)
            terms.extend(count / n * ent for count in counts)
        else:
            raise ValueError(f"weighting must be 'group' or 'reference', got {weighting!r}")
    return math.fsum(terms)


def information_gain(X, y, feature_index, weighting='group'):
    return class_entropy(y) - feature_entropy(X, y, feature_index, weighting=weighting)


def best_split_feature(X, y, feature_count, weighting='group'):
    """Index in [0, feature_count) with the highest information gain.
    Ties go to the lowest index.
    """
    base = class_entropy(y)
    feature_index = 0
    best_gain = -np.inf
    for i in range(feature_count):
        gain = base - feature_entropy(X, y, i, weighting=weighting)
        if gain > best_gain:
            best_gain = gain
            feature_index = i
    return feature_index


def is_pure(y):
    return np.all(y == y[0])


def majority_label(y):
    # most_common keeps first-seen order among equal counts
    return Counter(y.tolist()).most_common(1)[0][0]
