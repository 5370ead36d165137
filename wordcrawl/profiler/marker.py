PROFILED_ATTR = "__wordcrawl_profiled__"


def profiled(method):
    """Mark a method so that `Profiler.wrap` records how long its calls take."""
    setattr(method, PROFILED_ATTR, True)
    return method


def is_profiled(attr) -> bool:
    return callable(attr) and getattr(attr, PROFILED_ATTR, False) is True
