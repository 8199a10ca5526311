"""Errors raised when a lazy value cannot be produced."""


class ProductionFailed(LookupError):
    """A producer could not supply a value."""


class NodeNotFound(ProductionFailed):
    """A named node lookup found no matching node."""
    def __init__(self, path, owner=None):
        self.path = path
        self.owner = owner
        where = f" under {owner!r}" if owner else ""
        super().__init__(f"node not found: {path!r}{where}")


class NodeTypeError(ProductionFailed, TypeError):
    """A node was found but is not of the expected type."""
    def __init__(self, path, expected, actual):
        self.path = path
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"node {path!r} is {actual.__name__}, expected {expected.__name__}"
        )
