"""Lazy initialization of node properties.

A property backed by a lazy cell starts out empty. The first read runs
the lookup (here: fetching a child label by name), stores the result in
the backing cell and returns it. Every later read returns the stored
label without looking it up again.

Initialization order still matters: the property can only be read once
the lookup can succeed, i.e. after the label has been added as a child.
"""

from .lazy import LazyValue, lazy_cell, lazy_property
from .node import Label, Node
from .settings import LazyNodeSettings


def _find_label(owner):
    return owner.get_node(owner.settings.label_name, Label)


class LazyInitialization(Node):
    """Node showing three equivalent ways to declare a lazy property."""

    # Getter only.
    my_property_for_lazy_value1 = lazy_property(_find_label)

    # Getter and setter.
    my_property_for_lazy_value2 = lazy_property(_find_label, settable=True)

    def __init__(self, name="LazyInitialization", settings=None, log=None):
        super().__init__(name)
        self.settings = settings if settings is not None else LazyNodeSettings()
        if log is None:
            from .logger import log  # pylint: disable=import-outside-toplevel
        self.log = log
        self._backing_field_for_lazy_value3 = LazyValue(lambda: _find_label(self))

    # Getter and setter, spelled out with explicit accessors.
    def _get_lazy_value3(self):
        return self._backing_field_for_lazy_value3.get()

    def _set_lazy_value3(self, value):
        self._backing_field_for_lazy_value3.set(value)

    my_property_for_lazy_value3 = property(_get_lazy_value3, _set_lazy_value3)

    def _emit(self, lines, message, error=False):
        if error:
            self.log.error(message)
        else:
            self.log.info(message)
        lines.append(message)

    def do_something(self):
        """Read property 2 and report the state of its backing cell around the read."""
        lines = []
        backing = lazy_cell(self, "my_property_for_lazy_value2")

        if not backing.is_initialized():
            self._emit(lines, "1) The backing field of my_property_for_lazy_value2 is empty "
                              "before accessing the property.")
        else:
            self._emit(lines, "1) ERROR: The backing field of my_property_for_lazy_value2 is NOT "
                              "empty before accessing the property!", error=True)

        # First read: the label is looked up and cached.
        text = self.my_property_for_lazy_value2.text
        self._emit(lines, f'2) my_property_for_lazy_value2.text contains the text: "{text}"')

        if backing.is_initialized():
            self._emit(lines, "3) The backing field of my_property_for_lazy_value2 is NOT empty "
                              "after accessing the property.")
        else:
            self._emit(lines, "3) ERROR: The backing field of my_property_for_lazy_value2 is empty "
                              "after accessing the property!", error=True)
        return lines

    def _ready(self):
        self.log.info("")
        self.log.info("-----")
        self.log.info("LazyInitialization example running...")
        self.do_something()
        self.log.info("-----")


def build_example_tree(settings=None, log=None):
    """Build the example node with its label child and return it."""
    settings = settings if settings is not None else LazyNodeSettings()
    owner = LazyInitialization(settings=settings, log=log)
    owner.add_child(Label(settings.label_name, text=settings.label_text))
    return owner


def run_example(settings=None, log=None):
    """Build the example tree, run its ready hook and flush the output."""
    if settings is None:
        settings = LazyNodeSettings.from_env()
    if log is None:
        from .bootstrap import build_log  # pylint: disable=import-outside-toplevel
        log = build_log(settings)
    owner = build_example_tree(settings, log=log)
    owner.ready()
    log.flush()
    return owner
