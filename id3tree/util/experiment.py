'''Train the ID3 tree and the perceptron on the votes data and report test counts.
'''
import logging
import sys

import numpy as np

from ..algebraic.perceptron import PerceptronClassifier
from ..discretization.modulo import ModuloDiscretizer
from ..tree.id3.id3_tree import ID3TreeClassifier
from .data_util import get_votes_dataset

logger = logging.getLogger(__name__)

# features 3 and 4 mostly lie in [0, 1]
VOTES_SCALED_FEATURES = {3: 40, 4: 40}


def run_votes_experiment(data_dir: str = '.', bin_count: int = 45, scaled_features: dict = None,
                         random_state=None):
    """
    Returns
    -------
    reports: dict
        model name -> PredictionReport on the test split
    """
    if scaled_features is None:
        scaled_features = VOTES_SCALED_FEATURES
    X_train, y_train = get_votes_dataset(data_dir, 'train')
    X_test, y_test = get_votes_dataset(data_dir, 'test')
    logger.info('loaded %d train and %d test records with %d features',
                X_train.shape[0], X_test.shape[0], X_train.shape[1])

    reports = {}
    disc = ModuloDiscretizer(bin_count=bin_count, feature_count=X_train.shape[1],
                             scaled_features=scaled_features)
    id3 = ID3TreeClassifier().fit(disc.fit_transform(X_train), y_train)
    reports['id3'] = id3.score_report(disc.transform(X_test), y_test)
    logger.info('id3 (%d splits, %d degenerate leaves)\n%s',
                id3.complexity_, id3.n_degenerate_, reports['id3'])

    if np.unique(y_train).size == 2:
        perceptron = PerceptronClassifier(random_state=random_state).fit(X_train, y_train)
        reports['perceptron'] = perceptron.score_report(X_test, y_test)
        logger.info('perceptron\n%s', reports['perceptron'])
    else:
        logger.info('skipping perceptron, labels are not binary')
    return reports


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    run_votes_experiment(sys.argv[1] if len(sys.argv) > 1 else '.')
