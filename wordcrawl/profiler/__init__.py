from .marker import profiled
from .profiler import Profiler
from .profiling_state import ProfilingState

__all__ = ["profiled", "Profiler", "ProfilingState"]
