"""In-process derivation counters. Names only, never inputs or outputs."""

from collections import Counter
from threading import Lock
from typing import Dict

_COUNTERS = Counter()
_LOCK = Lock()

DERIVATIONS_COMPLETED = "derivations_completed"
DERIVATIONS_FAILED = "derivations_failed"


def increment_counter(name: str, value: int = 1) -> None:
    with _LOCK:
        _COUNTERS[name] += value


def record_failure(error_code: str) -> None:
    increment_counter(f"{DERIVATIONS_FAILED}.{error_code}")


def get_counters_snapshot() -> Dict[str, int]:
    with _LOCK:
        return dict(_COUNTERS)


def reset_counters() -> None:
    with _LOCK:
        _COUNTERS.clear()
