from .profiler import ProfiledProxy, Profiler, profiled
from .state import ProfilingState

__all__ = ["ProfiledProxy", "Profiler", "ProfilingState", "profiled"]
