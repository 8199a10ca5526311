"""Process lifecycle hooks for flushing diagnostic output."""

import atexit


def register_exit_hooks(log, enable_atexit=True):
    """Register a process-exit flush for a diagnostic log."""
    def _cleanup():
        try:
            log.close()
        except Exception:  # pylint: disable=broad-exception-caught
            pass

    if enable_atexit:
        atexit.register(_cleanup)
    return _cleanup
