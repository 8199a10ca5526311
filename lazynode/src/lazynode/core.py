"""Diagnostic log used by the examples, with pluggable output writers."""

import datetime
import json
import sys
import threading
import traceback


class DiagnosticLog:  # pylint: disable=too-many-instance-attributes
    """Buffered structured log that writes batches through a writer."""
    def __init__(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        name="lazynode",
        mode="console",
        stream=None,
        logfile="lazynode.jsonl",
        sink=None,
        max_buffer=1,
        settings=None,
    ):
        if settings is not None:
            name = settings.name
            mode = settings.mode
            logfile = settings.logfile
            max_buffer = settings.max_buffer
        self._buffer = []
        self._lock = threading.Lock()
        self._name = name
        self._mode = mode
        self._max_buffer = max_buffer
        self._writer = self._init_writer(mode, stream, logfile, sink)
        self._closed = False

    def _init_writer(self, mode, stream, logfile, sink):
        """Create the writer backend for the configured mode."""
        if mode == "console":
            return _StreamWriter(stream)
        if mode == "file":
            return _FileWriter(logfile)
        if mode == "callback":
            if sink is None:
                raise ValueError("sink is required when mode='callback'")
            return _CallbackWriter(sink)
        raise ValueError(f"unsupported mode: {mode!r}")

    @property
    def name(self):
        return self._name

    def _now(self):
        """Return the current UTC timestamp string."""
        now = datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None)
        return now.isoformat(timespec="milliseconds") + "Z"

    def _log(self, level, message, **kwargs):
        """Build a record and append it to the buffer."""
        if self._closed:
            raise RuntimeError(f"log {self._name!r} is closed")
        record = {
            "ts": self._now(),
            "level": level,
            "message": message,
            "logger": self._name,
        }

        exc = kwargs.pop("exc", None)
        if exc is not None:
            record["exception"] = "".join(
                traceback.format_exception(type(exc), exc, exc.__traceback__)
            )

        if kwargs:
            record["extra"] = kwargs

        with self._lock:
            self._buffer.append(record)
            should_flush = self._max_buffer and len(self._buffer) >= self._max_buffer

        if should_flush:
            self.flush()

    def info(self, message="", **kwargs):
        """Log an INFO record."""
        self._log("INFO", message, **kwargs)

    def warning(self, message="", **kwargs):
        """Log a WARNING record."""
        self._log("WARNING", message, **kwargs)

    def error(self, message="", **kwargs):
        """Log an ERROR record."""
        self._log("ERROR", message, **kwargs)

    def flush(self):
        """Flush buffered records via the writer."""
        with self._lock:
            if not self._buffer:
                return
            batch = self._buffer
            self._buffer = []

        self._writer.write(batch)

    def close(self):
        """Flush remaining records and refuse further logging."""
        if self._closed:
            return
        self._closed = True
        self.flush()


class _StreamWriter:  # pylint: disable=too-few-public-methods
    """Write record messages as plain lines to a text stream."""
    def __init__(self, stream):
        self._stream = stream

    def write(self, records):
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write("".join(r["message"] + "\n" for r in records))
        stream.flush()


class _FileWriter:  # pylint: disable=too-few-public-methods
    """Write records to a JSONL file."""
    def __init__(self, logfile):
        self._logfile = logfile

    def write(self, records):
        """Write a batch of records to disk."""
        dumps = json.dumps
        lines = [dumps(r, ensure_ascii=False, separators=(",", ":")) + "\n" for r in records]
        with open(self._logfile, "a", encoding="utf-8") as f:
            f.write("".join(lines))


class _CallbackWriter:  # pylint: disable=too-few-public-methods
    """Hand each batch to a user-supplied callable."""
    def __init__(self, sink):
        self._sink = sink

    def write(self, records):
        self._sink(records)
