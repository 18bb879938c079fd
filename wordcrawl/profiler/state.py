from __future__ import annotations

import threading
from typing import Dict, TextIO, Tuple


def format_duration(seconds: float) -> str:
    total_ms = int(round(seconds * 1000))
    minutes, rest = divmod(total_ms, 60_000)
    secs, millis = divmod(rest, 1000)
    return f"{minutes}m {secs}s {millis}ms"


class ProfilingState:
    """Thread-safe running totals of time spent in profiled methods.

    Keyed by (declaring class, method name); repeated calls accumulate.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._totals: Dict[Tuple[type, str], float] = {}

    @staticmethod
    def key_name(declaring_type: type, method_name: str) -> str:
        return f"{declaring_type.__module__}.{declaring_type.__qualname__}#{method_name}"

    def record(self, declaring_type: type, method_name: str, elapsed_seconds: float) -> None:
        if elapsed_seconds < 0:
            raise ValueError("elapsed time cannot be negative")
        key = (declaring_type, method_name)
        with self._lock:
            self._totals[key] = self._totals.get(key, 0.0) + elapsed_seconds

    def totals(self) -> Dict[str, float]:
        with self._lock:
            return {self.key_name(t, m): d for (t, m), d in self._totals.items()}

    def write(self, stream: TextIO) -> None:
        """Write one `<class>#<method> took XmYsZms` line per profiled method."""
        for name, elapsed in sorted(self.totals().items()):
            stream.write(f"{name} took {format_duration(elapsed)}\n")
