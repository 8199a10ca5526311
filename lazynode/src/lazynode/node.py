"""Minimal named node tree used as the lookup target for lazy fields."""

from .errors import NodeNotFound, NodeTypeError


class Node:
    """A named node with ordered, uniquely named children."""
    def __init__(self, name):
        if not name or "/" in name or name == "..":
            raise ValueError(f"invalid node name: {name!r}")
        self.name = name
        self.parent = None
        self._children = {}
        self._is_ready = False

    @property
    def children(self):
        """Return the children in insertion order."""
        return list(self._children.values())

    def add_child(self, node):
        """Attach ``node`` as a child and return it."""
        if node.parent is not None:
            raise ValueError(f"node {node.name!r} already has a parent")
        if node.name in self._children:
            raise ValueError(f"duplicate child name {node.name!r} under {self.name!r}")
        self._children[node.name] = node
        node.parent = self
        return node

    def get_root(self):
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def get_path(self):
        """Return the absolute path of this node."""
        parts = []
        node = self
        while node is not None:
            parts.append(node.name)
            node = node.parent
        return "/" + "/".join(reversed(parts))

    def find_node(self, path):
        """Resolve ``path`` relative to this node, or return None."""
        if path.startswith("/"):
            root = self.get_root()
            parts = [p for p in path.split("/") if p]
            if not parts or parts[0] != root.name:
                return None
            node, parts = root, parts[1:]
        else:
            node, parts = self, [p for p in path.split("/") if p]
        if not parts and not path.startswith("/"):
            return None
        for part in parts:
            if part == "..":
                node = node.parent
            else:
                node = node._children.get(part)  # pylint: disable=protected-access
            if node is None:
                return None
        return node

    def get_node(self, path, expected=None):
        """Resolve ``path`` or raise NodeNotFound / NodeTypeError."""
        node = self.find_node(path)
        if node is None:
            raise NodeNotFound(path, owner=self.name)
        if expected is not None and not isinstance(node, expected):
            raise NodeTypeError(path, expected, type(node))
        return node

    def ready(self):
        """Run the ready hook on children first, then on this node.

        A node counts as ready once its hook returns; a hook that raises
        runs again on the next call.
        """
        for child in self.children:
            child.ready()
        if self._is_ready:
            return
        self._ready()
        self._is_ready = True

    def is_ready(self):
        return self._is_ready

    def _ready(self):
        """Hook run once after the subtree is assembled."""

    def __repr__(self):
        return f"<{type(self).__name__} {self.get_path()}>"


class Label(Node):
    """A node carrying display text."""
    def __init__(self, name, text=""):
        super().__init__(name)
        self.text = text
