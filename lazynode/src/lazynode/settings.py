"""Settings and environment parsing for lazynode."""

import os

MODES = ("console", "file", "callback")


def _parse_bool(value):
    """Parse a boolean from environment-like values."""
    if isinstance(value, bool):
        return value
    if value is None:
        raise ValueError("bool value is None")
    text = str(value).strip().lower()
    if text in ("1", "true", "yes", "on"):
        return True
    if text in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"invalid boolean value: {value!r}")


def _parse_mode(value):
    """Parse the diagnostic sink mode."""
    text = str(value).strip().lower()
    if text in MODES:
        return text
    raise ValueError(f"invalid mode: {value!r}")


def _parse_positive_int(value):
    number = int(value)
    if number < 1:
        raise ValueError(f"expected a positive integer, got {value!r}")
    return number


class LazyNodeSettings:  # pylint: disable=too-many-instance-attributes
    """Configuration container for lazynode."""
    def __init__(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        label_name="ExampleLabel",
        label_text="Hello from a lazily initialized label!",
        name="lazynode",
        mode="console",
        logfile="lazynode.jsonl",
        max_buffer=1,
        enable_atexit=True,
    ):
        self.label_name = label_name
        self.label_text = label_text
        self.name = name
        self.mode = mode
        self.logfile = logfile
        self.max_buffer = max_buffer
        self.enable_atexit = enable_atexit

    @classmethod
    def from_env(cls):
        """Load settings from environment variables."""
        return cls.from_env_with_defaults()

    @classmethod
    def from_env_with_defaults(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        label_name="ExampleLabel",
        label_text="Hello from a lazily initialized label!",
        name="lazynode",
        mode="console",
        logfile="lazynode.jsonl",
        max_buffer=1,
        enable_atexit=True,
        strict=False,
    ):
        """Load settings from env, falling back to supplied defaults."""
        strict_env = os.getenv("LAZYNODE_STRICT_ENV")
        if strict_env is not None and strict_env != "":
            try:
                strict = strict or _parse_bool(strict_env)
            except ValueError:
                if strict:
                    raise
                strict = False

        def _get(var, cast, default):
            val = os.getenv(var)
            if val is None or val == "":
                return default
            try:
                return cast(val)
            except Exception as exc:  # pylint: disable=broad-exception-caught
                if strict:
                    raise ValueError(f"invalid value for {var}: {val!r}") from exc
                return default

        return cls(
            label_name=_get("LAZYNODE_LABEL_NAME", str, label_name),
            label_text=_get("LAZYNODE_LABEL_TEXT", str, label_text),
            name=_get("LAZYNODE_NAME", str, name),
            mode=_get("LAZYNODE_MODE", _parse_mode, mode),
            logfile=_get("LAZYNODE_LOGFILE", str, logfile),
            max_buffer=_get("LAZYNODE_MAX_BUFFER", _parse_positive_int, max_buffer),
            enable_atexit=_get("LAZYNODE_ENABLE_ATEXIT", _parse_bool, enable_atexit),
        )
