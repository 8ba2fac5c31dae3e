from collections import namedtuple

from ..tree.id3.node import Unmatched


class PredictionReport(namedtuple('PredictionReport', ['correct', 'wrong', 'unmatched'])):
    """Counts of correct, wrong and unmatched predictions.
    Unmatched predictions are never counted as wrong.
    """
    __slots__ = ()

    @property
    def total(self):
        return self.correct + self.wrong + self.unmatched

    @property
    def accuracy(self):
        return self.correct / self.total if self.total else 0.0

    def __str__(self):
        return f'CORRECT: {self.correct}\nWRONG: {self.wrong}\nUnable to predict: {self.unmatched}'


def score_predictions(y_true, y_pred):
    """Compare labels to predictions, where a prediction may be Unmatched
    """
    y_true = list(y_true)
    y_pred = list(y_pred)
    if len(y_true) != len(y_pred):
        raise ValueError(f'y_true has {len(y_true)} labels but y_pred has {len(y_pred)} predictions')
    correct = wrong = unmatched = 0
    for label, pred in zip(y_true, y_pred):
        if pred is Unmatched:
            unmatched += 1
        elif pred == label:
            correct += 1
        else:
            wrong += 1
    return PredictionReport(correct, wrong, unmatched)
