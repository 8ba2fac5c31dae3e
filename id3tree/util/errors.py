class InvalidInputError(ValueError):
    """Raised when a dataset or feature vector cannot be used for training or prediction,
    e.g. an empty dataset, feature_count < 1, or rows whose length disagrees with feature_count.
    """
