import numpy as np
import pandas as pd
from sklearn.base import BaseEstimator, TransformerMixin
from sklearn.utils.validation import check_array, check_is_fitted

from ..util.errors import InvalidInputError


class ModuloDiscretizer(BaseEstimator, TransformerMixin):
    """Hash continuous features into a fixed number of buckets.

    Each value x of feature k becomes floor(x * scale_k) mod bin_count, so every
    feature takes one of bin_count non-negative integer values.

    Params
    ------
    bin_count: int
        Number of buckets per feature
    feature_count: int, optional
        Expected number of features, checked in fit and transform
    scaled_features: dict, optional
        feature index -> multiplier applied before flooring, for features
        whose values are concentrated in a small range such as [0, 1]
    """

    def __init__(self, bin_count: int = 45, feature_count: int = None, scaled_features: dict = None):
        self.bin_count = bin_count
        self.feature_count = feature_count
        self.scaled_features = scaled_features

    def _validate(self, X):
        if isinstance(X, pd.DataFrame):
            X = X.values
        X = check_array(X, dtype=float)
        n_features = self.feature_count if self.feature_count is not None else X.shape[1]
        if X.shape[1] != n_features:
            raise InvalidInputError(f'expected {n_features} features, got {X.shape[1]}')
        return X

    def fit(self, X, y=None):
        if self.bin_count < 1:
            raise InvalidInputError(f'bin_count must be at least 1, got {self.bin_count}')
        X = self._validate(X)
        self.n_features_in_ = X.shape[1]
        self.scales_ = np.ones(self.n_features_in_)
        for k, scale in (self.scaled_features or {}).items():
            if not 0 <= k < self.n_features_in_:
                raise InvalidInputError(f'scaled feature {k} is out of range for {self.n_features_in_} features')
            self.scales_[k] = scale
        return self

    def transform(self, X):
        check_is_fitted(self, ['scales_'])
        X = self._validate(X)
        if X.shape[1] != self.n_features_in_:
            raise InvalidInputError(f'expected {self.n_features_in_} features, got {X.shape[1]}')
        return np.mod(np.floor(X * self.scales_), self.bin_count).astype(int)
