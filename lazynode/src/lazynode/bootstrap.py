"""Helpers for building configured diagnostic logs."""

from .core import DiagnosticLog
from . import lifecycle


def build_log(settings, sink=None, stream=None):
    """Create a diagnostic log and register lifecycle hooks."""
    instance = DiagnosticLog(settings=settings, sink=sink, stream=stream)
    lifecycle.register_exit_hooks(instance, enable_atexit=settings.enable_atexit)
    return instance
