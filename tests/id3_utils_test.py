import numpy as np
import pytest

from id3tree import InvalidInputError
from id3tree.tree.id3.id3_utils import class_entropy, feature_entropy, information_gain, \
    best_split_feature, partition, majority_label

X_SEP = np.array([[0, 0], [0, 1], [1, 0], [1, 1]])
Y_SEP = np.array(['A', 'A', 'B', 'B'])


def test_class_entropy():
    assert class_entropy(Y_SEP) == 1.0
    assert class_entropy(np.array(['A', 'A', 'A'])) == 0.0
    assert class_entropy(np.array([1.0, 2.0, 3.0, 4.0])) == pytest.approx(2.0)
    assert class_entropy(np.array([0, 0, 0, 1])) == pytest.approx(0.811278, abs=1e-6)


def test_class_entropy_empty():
    with pytest.raises(InvalidInputError):
        class_entropy(np.array([]))


def test_feature_entropy_and_gain():
    assert feature_entropy(X_SEP, Y_SEP, 0) == 0.0
    assert feature_entropy(X_SEP, Y_SEP, 1) == pytest.approx(1.0)
    assert information_gain(X_SEP, Y_SEP, 0) == pytest.approx(1.0)
    assert information_gain(X_SEP, Y_SEP, 1) == pytest.approx(0.0)
    assert best_split_feature(X_SEP, Y_SEP, 2) == 0


def test_reference_weighting_matches_group_weighting():
    np.random.seed(13)
    X = np.random.randint(0, 3, size=(50, 4))
    y = np.random.randint(0, 3, size=50)
    for i in range(4):
        assert feature_entropy(X, y, i, weighting='reference') == pytest.approx(feature_entropy(X, y, i))
    with pytest.raises(ValueError):
        feature_entropy(X, y, 0, weighting='gini')


def test_tie_break_prefers_lower_index():
    X = np.array([[0, 5, 1], [0, 5, 0], [1, 7, 1], [1, 7, 0]])
    y = np.array(['A', 'A', 'B', 'B'])
    assert information_gain(X, y, 0) == information_gain(X, y, 1)
    assert best_split_feature(X, y, 3) == 0

    # the later feature wins only when strictly better
    X = np.array([[0, 0], [1, 0], [0, 1], [1, 1]])
    assert best_split_feature(X, y, 2) == 1


def test_gain_non_negative_on_random_datasets():
    np.random.seed(13)
    for _ in range(200):
        n = np.random.randint(2, 30)
        p = np.random.randint(1, 5)
        X = np.random.randint(0, 3, size=(n, p))
        y = np.random.randint(0, 3, size=n)
        for i in range(p):
            assert information_gain(X, y, i) >= -1e-12


def test_best_split_is_deterministic():
    np.random.seed(0)
    X = np.random.randint(0, 4, size=(60, 5))
    y = np.random.randint(0, 2, size=60)
    picks = {best_split_feature(X, y, 5) for _ in range(10)}
    assert len(picks) == 1


def test_partition_covers_every_record():
    np.random.seed(1)
    X = np.random.randint(0, 4, size=(40, 3))
    y = np.random.randint(0, 2, size=40)
    groups = partition(X, y, 2)
    assert list(groups) == list(dict.fromkeys(X[:, 2].tolist()))
    assert sum(y_g.shape[0] for _, y_g in groups.values()) == 40
    for value, (X_g, y_g) in groups.items():
        assert np.all(X_g[:, 2] == value)
        assert X_g.shape[0] == y_g.shape[0]


def test_majority_label():
    assert majority_label(np.array(['B', 'A', 'A', 'B'])) == 'B'
    assert majority_label(np.array([2.0, 1.0, 1.0])) == 1.0
