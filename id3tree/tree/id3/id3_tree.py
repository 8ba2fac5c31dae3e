"""ID3 decision tree over discretized features.

References
----------
.. [1] Quinlan, J. R. (1986). Induction of decision trees. Machine Learning, 1(1), 81-106.
.. [2] https://en.wikipedia.org/wiki/ID3_algorithm
"""
import logging
import warnings

import numpy as np
import pandas as pd
from sklearn.base import BaseEstimator, ClassifierMixin
from sklearn.utils.validation import check_is_fitted

from .id3_utils import best_split_feature, is_pure, majority_label, partition
from .node import Node, Tree, Unmatched
from ...util.arguments import check_fit_arguments, check_fit_X
from ...util.errors import InvalidInputError
from ...util.evaluate import score_predictions

logger = logging.getLogger(__name__)


def _check_dataset(X, y, feature_count):
    if feature_count < 1:
        raise InvalidInputError(f'feature_count must be at least 1, got {feature_count}')
    if not hasattr(X, 'shape'):
        lengths = sorted({len(row) for row in X if hasattr(row, '__len__')})
        if len(lengths) > 1:
            raise InvalidInputError(
                f'every record needs {feature_count} features, found lengths {lengths}')
    X = np.asarray(X)
    y = np.asarray(y)
    if X.ndim != 2:
        if X.size == 0:
            raise InvalidInputError('cannot build a tree from an empty dataset')
        raise InvalidInputError(f'X should be 2-dimensional, got shape {X.shape}')
    if y.ndim != 1:
        raise InvalidInputError(f'y should be 1-dimensional, got shape {y.shape}')
    if X.shape[0] == 0 or y.shape[0] == 0:
        raise InvalidInputError('cannot build a tree from an empty dataset')
    if X.shape[0] != y.shape[0]:
        raise InvalidInputError(f'X has {X.shape[0]} records but y has {y.shape[0]} labels')
    if X.shape[1] != feature_count:
        raise InvalidInputError(
            f'every record needs {feature_count} features, found {X.shape[1]}')
    # NaN never equals itself, so it could not be matched to a branch
    if np.any(pd.isnull(X)):
        raise InvalidInputError('X contains missing values (NaN or None), discretize them first')
    return X, y


def induce(X, y, feature_count, weighting='group', branch_value=None):
    """Recursively grow the subtree for (X, y).

    Returns
    -------
    Node
        a leaf when y is pure or the chosen split does not divide the data, else an internal node
    """
    n = y.shape[0]
    if is_pure(y):
        return Node.leaf(y[:1].tolist()[0], n, branch_value=branch_value)

    idx = best_split_feature(X, y, feature_count, weighting=weighting)
    groups = partition(X, y, idx)

    if len(groups) == 1:
        label = majority_label(y)
        logger.warning('degenerate partition: feature %d does not divide %d impure records, '
                       'using majority label %r', idx, n, label)
        return Node.leaf(label, n, branch_value=branch_value, degenerate=True)

    children = {}
    for value, (X_group, y_group) in groups.items():
        if is_pure(y_group):
            children[value] = Node.leaf(y_group[:1].tolist()[0], y_group.shape[0], branch_value=value)
        else:
            children[value] = induce(X_group, y_group, feature_count,
                                     weighting=weighting, branch_value=value)
    return Node(split_feature=idx, children=children, branch_value=branch_value, num_samples=n)


def build(X, y, feature_count, weighting='group'):
    """Build an ID3 tree from discretized records X (n_records x feature_count) and labels y.
    """
    X, y = _check_dataset(X, y, feature_count)
    return Tree(induce(X, y, feature_count, weighting=weighting), feature_count)


def predict(tree, feature_vector):
    """Predicted class for one feature vector, or Unmatched
    """
    return tree.predict(feature_vector)


class ID3TreeClassifier(BaseEstimator, ClassifierMixin):
    """An ID3 tree classifier for discretized features.
    Features are treated as categorical: each split branches on every value observed in the data.
    Samples whose value was never seen at some split are left unmatched.

    Parameters
    ----------
    weighting : str, optional (default='group')
        How feature entropy is accumulated, 'group' or 'reference'
    unmatched_label : optional (default=None)
        Value returned by predict for samples the tree cannot classify
    """

    def __init__(self, weighting: str = 'group', unmatched_label=None):
        super().__init__()
        self.weighting = weighting
        self.unmatched_label = unmatched_label

    def fit(self, X, y, feature_names=None):
        X, y, feature_names = check_fit_arguments(self, X, y, feature_names)
        if self.unmatched_label is not None and self.unmatched_label in set(self.classes_.tolist()):
            warnings.warn(f'unmatched_label={self.unmatched_label!r} is also a class label, '
                          'unmatched predictions will be indistinguishable in predict')
        self.tree_ = build(X, y, self.n_features_in_, weighting=self.weighting)
        self.complexity_ = self.tree_.n_splits
        self.n_degenerate_ = self.tree_.n_degenerate
        return self

    def raw_preds(self, X):
        """
        Returns
        ---
        list holding the predicted class or Unmatched for each sample
        """
        check_is_fitted(self, ['tree_'])
        X = check_fit_X(X)
        return [self.tree_.predict(X[i]) for i in range(X.shape[0])]

    def predict(self, X):
        raw_preds = self.raw_preds(X)
        if any(p is Unmatched for p in raw_preds):
            # object dtype keeps labels and unmatched_label from being coerced to a common type
            return np.array([self.unmatched_label if p is Unmatched else p for p in raw_preds], dtype=object)
        return np.array(raw_preds)

    def score(self, X, y, sample_weight=None):
        """Accuracy, with unmatched samples counted as misses
        """
        if sample_weight is not None:
            hits = [p is not Unmatched and p == label for p, label in zip(self.raw_preds(X), y)]
            return float(np.average(hits, weights=sample_weight))
        return self.score_report(X, y).accuracy

    def predict_matched(self, X):
        """Boolean mask of the samples the tree was able to classify
        """
        return np.array([p is not Unmatched for p in self.raw_preds(X)])

    def score_report(self, X, y):
        return score_predictions(y, self.raw_preds(X))

    def __str__(self):
        if not hasattr(self, 'tree_'):
            return self.__class__.__name__ + '()'
        return '> ------------------------------\n> ID3 Tree\n> ------------------------------\n' + \
            self.tree_.to_str(self.feature_names_)
