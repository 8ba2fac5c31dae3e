from ...util.errors import InvalidInputError


class _Unmatched:
    """Prediction outcome when no branch of the tree matches a feature value.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return 'Unmatched'

    def __reduce__(self):
        return (_Unmatched, ())


Unmatched = _Unmatched()


class Node:
    """A node of an ID3 tree, either internal (split_feature set, non-empty children)
    or a leaf (predicted_class set, no children).
    """

    def __init__(self, split_feature=None, children=None, predicted_class=None,
                 branch_value=None, num_samples=0, degenerate=False):
        self.split_feature = split_feature
        self.children = children if children is not None else {}
        self.predicted_class = predicted_class
        self.branch_value = branch_value
        self.num_samples = num_samples
        self.degenerate = degenerate

    @classmethod
    def leaf(cls, predicted_class, num_samples, branch_value=None, degenerate=False):
        return cls(predicted_class=predicted_class, branch_value=branch_value,
                   num_samples=num_samples, degenerate=degenerate)

    @property
    def is_leaf(self):
        return len(self.children) == 0

    def child_for(self, feature_vector):
        """Child whose branch_value equals the vector's value on split_feature, or None
        """
        return self.children.get(feature_vector[self.split_feature])

    def iter_nodes(self):
        yield self
        for child in self.children.values():
            yield from child.iter_nodes()

    def __repr__(self):
        if self.is_leaf:
            return f'Node(predicted_class={self.predicted_class!r}, num_samples={self.num_samples})'
        return f'Node(split_feature={self.split_feature}, children={list(self.children)!r})'


class Tree:
    """Fitted ID3 tree. Read-only once constructed.
    """

    def __init__(self, root: Node, feature_count: int):
        self._root = root
        self._feature_count = feature_count

    @property
    def root(self):
        return self._root

    @property
    def feature_count(self):
        return self._feature_count

    def predict(self, feature_vector):
        """Walk the tree for one feature vector.

        Returns
        -------
        the predicted class, or Unmatched when a feature value has no branch
        """
        if len(feature_vector) != self._feature_count:
            raise InvalidInputError(
                f'feature vector has length {len(feature_vector)}, tree was built with {self._feature_count}')
        node = self._root
        while not node.is_leaf:
            node = node.child_for(feature_vector)
            if node is None:
                return Unmatched
        return node.predicted_class

    @property
    def depth(self):
        def _depth(node):
            if node.is_leaf:
                return 0
            return 1 + max(_depth(c) for c in node.children.values())

        return _depth(self._root)

    @property
    def n_leaves(self):
        return sum(node.is_leaf for node in self._root.iter_nodes())

    @property
    def n_splits(self):
        return sum(not node.is_leaf for node in self._root.iter_nodes())

    @property
    def n_degenerate(self):
        return sum(node.degenerate for node in self._root.iter_nodes())

    def to_str(self, feature_names=None):
        if feature_names is None:
            feature_names = [f'X{i}' for i in range(self._feature_count)]
        if self._root.is_leaf:
            return f'{self._root.predicted_class} ({self._root.num_samples} pts)\n'

        lines = []

        def _print(node, indent):
            name = feature_names[node.split_feature]
            for value, child in node.children.items():
                prefix = '|   ' * indent + f'{name} == {value}'
                if child.is_leaf:
                    flag = ' (degenerate)' if child.degenerate else ''
                    lines.append(f'{prefix} -> {child.predicted_class} ({child.num_samples} pts){flag}')
                else:
                    lines.append(prefix)
                    _print(child, indent + 1)

        _print(self._root, 0)
        return '\n'.join(lines) + '\n'

    def __str__(self):
        return self.to_str()
