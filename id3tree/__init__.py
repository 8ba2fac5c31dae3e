"""
.. include:: ../readme.md
"""
# Python `id3tree` package: ID3 decision trees over discretized features, compatible with scikit-learn.

from .algebraic.perceptron import PerceptronClassifier
from .discretization.modulo import ModuloDiscretizer
from .tree.id3.id3_tree import ID3TreeClassifier, build, induce, predict
from .tree.id3.id3_utils import class_entropy, feature_entropy, information_gain, best_split_feature
from .tree.id3.node import Node, Tree, Unmatched
from .util.data_util import load_labeled_csv, get_votes_dataset
from .util.errors import InvalidInputError
from .util.evaluate import PredictionReport, score_predictions
from .util.experiment import run_votes_experiment

CLASSIFIERS = [ID3TreeClassifier, PerceptronClassifier]
DISCRETIZERS = [ModuloDiscretizer]
