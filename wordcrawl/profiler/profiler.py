import functools
import logging
import time
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from typing import Callable, Optional, TextIO

from .marker import is_profiled
from .profiling_state import ProfilingState

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class _ProfilingProxy:
    """Forwards attribute access to `delegate`, timing calls to profiled methods."""

    def __init__(self, delegate, timer: Callable[[], float], state: ProfilingState):
        self._delegate = delegate
        self._timer = timer
        self._state = state

    def __getattr__(self, name):
        attr = getattr(self._delegate, name)
        if not is_profiled(attr):
            return attr

        @functools.wraps(attr)
        def timed(*args, **kwargs):
            start = self._timer()
            try:
                return attr(*args, **kwargs)
            finally:
                elapsed = timedelta(seconds=self._timer() - start)
                self._state.record(type(self._delegate), name, elapsed)

        return timed

    def __repr__(self):
        return f"<profiled {self._delegate!r}>"


class Profiler:
    """Measures elapsed time of methods marked with `@profiled`.

    Durations come from `timer` (monotonic seconds, `time.perf_counter` by
    default); `clock` only supplies the wall-clock "Run at" header. The
    wrapped object behaves like the delegate; the delegate itself is left
    untouched and can still be called directly.
    """

    def __init__(
        self,
        clock: Optional[Callable[[], datetime]] = None,
        timer: Optional[Callable[[], float]] = None,
    ):
        self._clock = clock or _utc_now
        self._timer = timer or time.perf_counter
        self._state = ProfilingState()
        self._start_time = self._clock()

    @property
    def state(self) -> ProfilingState:
        return self._state

    def wrap(self, delegate):
        klass = type(delegate)
        if not any(is_profiled(getattr(klass, name, None)) for name in dir(klass)):
            raise ValueError(f"{klass.__name__} has no methods marked with @profiled")
        return _ProfilingProxy(delegate, self._timer, self._state)

    def write_data(self, path: str) -> None:
        """Append profiling data to the file at `path`, creating it if needed."""
        with open(path, "a", encoding="utf-8") as f:
            self.write_data_to(f)
        logger.info("Wrote profile data to %s", path)

    def write_data_to(self, writer: TextIO) -> None:
        start = self._start_time.astimezone(timezone.utc)
        writer.write(f"Run at {format_datetime(start, usegmt=True)}")
        writer.write("\n")
        self._state.write(writer)
        writer.write("\n")
