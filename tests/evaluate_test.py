import logging

import numpy as np
import pytest

from id3tree import PredictionReport, Unmatched, score_predictions, load_labeled_csv, get_votes_dataset, \
    run_votes_experiment


def test_score_predictions():
    report = score_predictions([1.0, 2.0, 1.0, 2.0], [1.0, Unmatched, 2.0, 2.0])
    assert report == PredictionReport(correct=2, wrong=1, unmatched=1)
    assert report.total == 4
    assert report.accuracy == 0.5
    assert 'Unable to predict: 1' in str(report)


def test_score_predictions_empty_and_mismatch():
    assert score_predictions([], []).accuracy == 0.0
    with pytest.raises(ValueError):
        score_predictions([1], [])


def test_load_labeled_csv(tmp_path):
    path = tmp_path / 'data.csv'
    path.write_text('1,0.5,2\n\n2,1.5,3\n')
    X, y = load_labeled_csv(str(path))
    assert X.tolist() == [[0.5, 2.0], [1.5, 3.0]]
    assert y.tolist() == [1.0, 2.0]


def test_missing_votes_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_votes_dataset(str(tmp_path), 'train')


def test_run_votes_experiment(tmp_path, caplog):
    (tmp_path / 'votes-train.csv').write_text(
        '0,1.2,5,7,0.1,0.2\n'
        '0,1.7,6,7,0.1,0.3\n'
        '1,20.5,5,8,0.9,0.8\n'
        '1,21.0,6,8,0.9,0.7\n')
    (tmp_path / 'votes-test.csv').write_text(
        '0,1.5,5,7,0.1,0.2\n'
        '1,30.0,6,8,0.9,0.7\n')
    with caplog.at_level(logging.INFO):
        reports = run_votes_experiment(str(tmp_path), random_state=0)
    assert reports['id3'] == PredictionReport(correct=1, wrong=0, unmatched=1)
    assert reports['perceptron'].total == 2
    assert reports['perceptron'].unmatched == 0
    assert 'CORRECT: 1' in caplog.text
