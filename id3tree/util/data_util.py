import os.path
from os.path import join as oj
from typing import Tuple

import numpy as np
import pandas as pd


def load_labeled_csv(path: str) -> Tuple[np.ndarray, np.ndarray]:
    """Read a header-less csv whose first column is the class label.

    Returns
    -------
    X: np.ndarray
        float features, one row per record
    y: np.ndarray
        float-encoded class labels
    """
    df = pd.read_csv(path, header=None, skip_blank_lines=True)
    df = df.dropna(how='all')
    y = df.iloc[:, 0].to_numpy(dtype=float)
    X = df.iloc[:, 1:].to_numpy(dtype=float)
    return X, y


def get_votes_dataset(data_dir: str = '.', split: str = 'train') -> Tuple[np.ndarray, np.ndarray]:
    """Load votes-{split}.csv from data_dir
    """
    path = oj(data_dir, f'votes-{split}.csv')
    if not os.path.exists(path):
        raise FileNotFoundError(f'{path} not found, place the votes csv files in {os.path.abspath(data_dir)}')
    return load_labeled_csv(path)
