"""Lazily initialized values, properties and proxies."""

import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

_UNSET = object()


class LazyValue(Generic[T]):
    """Cell that runs its producer on first read and caches the result."""
    def __init__(self, producer: Callable[[], T]):
        self._producer = producer
        self._lock = threading.Lock()
        self._value = _UNSET
        self._producing = None

    def get(self) -> T:
        """Return the cached value, producing it on first read."""
        value = self._value
        if value is not _UNSET:
            return value
        if self._producing == threading.get_ident():
            raise RuntimeError("lazy value read while its producer is running")
        with self._lock:
            if self._value is _UNSET:
                self._producing = threading.get_ident()
                try:
                    self._value = self._producer()
                finally:
                    self._producing = None
            return self._value

    def set(self, value: T):
        """Store a value directly, skipping the producer."""
        if self._producing == threading.get_ident():
            raise RuntimeError("lazy value set while its producer is running")
        with self._lock:
            self._value = value

    def is_initialized(self) -> bool:
        """Return True once a value is held."""
        return self._value is not _UNSET

    def __repr__(self):
        return f"<LazyValue initialized={self.is_initialized()}>"


class lazy_property:  # pylint: disable=invalid-name
    """Descriptor backed by one LazyValue per owner instance.

    The producer receives the owner instance. Assignment is rejected
    unless ``settable`` is true, in which case it stores the value in
    the backing cell without running the producer.
    """
    def __init__(self, producer, settable=False):
        self._producer = producer
        self._settable = settable
        self._name = None
        self._attr = None
        self.__doc__ = getattr(producer, "__doc__", None)

    def __set_name__(self, owner, name):
        self._name = name
        self._attr = f"_lazy_{name}"

    def cell(self, instance):
        """Return the backing cell for an instance, creating it if needed."""
        try:
            return instance.__dict__[self._attr]
        except KeyError:
            producer = self._producer
            cell = LazyValue(lambda: producer(instance))
            return instance.__dict__.setdefault(self._attr, cell)

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return self.cell(instance).get()

    def __set__(self, instance, value):
        if not self._settable:
            raise AttributeError(f"{self._name} is read-only")
        self.cell(instance).set(value)


def lazy_cell(instance, name) -> LazyValue:
    """Return the backing cell of the lazy property ``name`` on ``instance``."""
    prop = getattr(type(instance), name, None)
    if not isinstance(prop, lazy_property):
        raise AttributeError(f"{type(instance).__name__}.{name} is not a lazy property")
    return prop.cell(instance)


class LazyProxy:
    """Proxy that builds its target on first use."""
    def __init__(self, factory):
        self._cell = LazyValue(factory)

    def __getattr__(self, name):
        """Proxy attribute access to the real object."""
        return getattr(self._cell.get(), name)

    def __repr__(self):
        return f"<LazyProxy initialized={self._cell.is_initialized()}>"
