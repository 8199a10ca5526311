from .lazy import LazyValue, LazyProxy, lazy_cell, lazy_property
from .errors import ProductionFailed, NodeNotFound, NodeTypeError
from .node import Node, Label
from .settings import LazyNodeSettings
from .core import DiagnosticLog

__all__ = [
    "LazyValue",
    "LazyProxy",
    "lazy_cell",
    "lazy_property",
    "ProductionFailed",
    "NodeNotFound",
    "NodeTypeError",
    "Node",
    "Label",
    "LazyNodeSettings",
    "DiagnosticLog",
]
