from .bootstrap import build_log
from .lazy import LazyProxy
from .settings import LazyNodeSettings


def _build_log():
    return build_log(LazyNodeSettings.from_env())


log = LazyProxy(_build_log)
