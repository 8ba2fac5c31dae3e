'''Rosenblatt perceptron for binary classification.
Features are scaled to roughly [-0.5, 0.5] by (x - mean) / (max - min) before training.
'''
import numpy as np
from sklearn.base import BaseEstimator, ClassifierMixin
from sklearn.utils import check_random_state
from sklearn.utils.validation import check_is_fitted
from tqdm import tqdm

from ..util.arguments import check_fit_arguments, check_fit_X
from ..util.errors import InvalidInputError
from ..util.evaluate import score_predictions

_MIN_ERROR = 1e-4


class PerceptronClassifier(BaseEstimator, ClassifierMixin):
    def __init__(self, learning_rate: float = 0.1, n_iter: int = 1000, theta: float = 0.0,
                 random_state=None, verbose: bool = False):
        '''
        Params
        ------
        learning_rate
            Step size applied to every weight update
        n_iter
            Number of passes over the training data
        theta
            Activation threshold
        random_state
            Seeds the initial bias, drawn uniformly from [0, 1)
        '''
        self.learning_rate = learning_rate
        self.n_iter = n_iter
        self.theta = theta
        self.random_state = random_state
        self.verbose = verbose

    def _normalize(self, X):
        return (X - self.mean_) / self.range_

    def fit(self, X, y, feature_names=None):
        X, y, feature_names = check_fit_arguments(self, X, y, feature_names)
        if self.classes_.size > 2:
            raise InvalidInputError(f'perceptron needs binary labels, got {self.classes_.size} classes')
        X = X.astype(float)
        target = (y == self.classes_[-1]).astype(float)

        self.mean_ = X.mean(axis=0)
        ranges = X.max(axis=0) - X.min(axis=0)
        self.range_ = np.where(ranges == 0, 1.0, ranges)
        X = self._normalize(X)

        rng = check_random_state(self.random_state)
        self.intercept_ = rng.uniform(0.0, 1.0)
        self.coef_ = np.full(X.shape[1], _MIN_ERROR)

        for _ in tqdm(range(self.n_iter), disable=not self.verbose):
            for x_i, t_i in zip(X, target):
                error = t_i - self._activation(x_i)
                # a zero error still nudges the weights
                error = _MIN_ERROR if error == 0 else error
                self.intercept_ += self.learning_rate * error
                self.coef_ = self.coef_ + self.learning_rate * error * x_i
        return self

    def _activation(self, x):
        return 1 if x @ self.coef_ + self.intercept_ >= self.theta else 0

    def decision_function(self, X):
        check_is_fitted(self, ['coef_', 'intercept_'])
        X = self._normalize(check_fit_X(X).astype(float))
        return X @ self.coef_ + self.intercept_ - self.theta

    def predict(self, X):
        activations = (self.decision_function(X) >= 0).astype(int)
        if self.classes_.size == 1:
            return np.full(activations.shape[0], self.classes_[0])
        return self.classes_[activations]

    def score_report(self, X, y):
        return score_predictions(y, self.predict(X))
