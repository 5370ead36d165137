import threading
from datetime import timedelta
from typing import Dict, TextIO


class ProfilingState:
    """Thread-safe running totals of time spent in each profiled method."""

    def __init__(self):
        self._lock = threading.Lock()
        self._data: Dict[str, timedelta] = {}

    @staticmethod
    def format_key(klass: type, method_name: str) -> str:
        return f"{klass.__name__}#{method_name}"

    def record(self, klass: type, method_name: str, elapsed: timedelta) -> None:
        # a timer that steps backwards must not fail the profiled call
        elapsed = max(elapsed, timedelta(0))
        key = self.format_key(klass, method_name)
        with self._lock:
            self._data[key] = self._data.get(key, timedelta(0)) + elapsed

    def totals(self) -> Dict[str, timedelta]:
        with self._lock:
            return dict(self._data)

    def write(self, writer: TextIO) -> None:
        for key, elapsed in sorted(self.totals().items()):
            writer.write(self._format_line(key, elapsed))
            writer.write("\n")

    @staticmethod
    def _format_line(key: str, elapsed: timedelta) -> str:
        total_ms = elapsed // timedelta(milliseconds=1)
        minutes, rest_ms = divmod(total_ms, 60_000)
        seconds, millis = divmod(rest_ms, 1000)
        return f"{key} took {minutes}m {seconds}s {millis}ms"
