from __future__ import annotations

import functools
import logging
import time
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Callable, Dict, Iterable, Optional, TextIO

from wordcrawl.exceptions import NoProfiledMethodsError
from wordcrawl.profiler.state import ProfilingState

logger = logging.getLogger(__name__)

_PROFILED_ATTR = "__wordcrawl_profiled__"


def profiled(func: Callable) -> Callable:
    """Mark a method as a profiled operation. The function itself is returned unchanged."""
    setattr(func, _PROFILED_ATTR, True)
    return func


def _is_marked(attr) -> bool:
    target = getattr(attr, "__func__", attr)
    return bool(getattr(target, _PROFILED_ATTR, False))


def _declaring_type(klass: type, name: str) -> Optional[type]:
    for base in klass.__mro__:
        if name in vars(base):
            return base
    return None


def profiled_methods_of(klass: type) -> Dict[str, type]:
    """Return {method name: declaring class} for every `@profiled` method of `klass`."""
    found: Dict[str, type] = {}
    for base in reversed(klass.__mro__):
        for name, attr in vars(base).items():
            if _is_marked(attr):
                found[name] = base
            elif name in found:
                # overridden without the marker
                del found[name]
    return found


class ProfiledProxy:
    """Stands in for a delegate, timing calls to its profiled methods.

    Every other attribute is read straight from the delegate.
    """

    def __init__(self, delegate, methods: Dict[str, type], clock: Callable[[], float], state: ProfilingState):
        self._delegate = delegate
        self._methods = dict(methods)
        self._clock = clock
        self._state = state

    def __getattr__(self, name):
        attr = getattr(self._delegate, name)
        declaring = self._methods.get(name)
        if declaring is None or not callable(attr):
            return attr

        @functools.wraps(attr)
        def timed(*args, **kwargs):
            start = self._clock()
            try:
                return attr(*args, **kwargs)
            finally:
                self._state.record(declaring, name, self._clock() - start)

        return timed

    def __repr__(self):
        return f"<ProfiledProxy of {self._delegate!r}>"


class Profiler:
    """Wraps objects so their profiled methods report wall-clock durations.

    One instance is shared by the whole process; every wrapped object records
    into the same `ProfilingState`.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None, now: Optional[Callable[[], datetime]] = None):
        self._clock = clock or time.perf_counter
        self._state = ProfilingState()
        self._start_time = (now or (lambda: datetime.now(timezone.utc)))()

    @property
    def state(self) -> ProfilingState:
        return self._state

    def wrap(self, delegate, methods: Optional[Iterable[str]] = None) -> ProfiledProxy:
        """Return a proxy for `delegate` that times its profiled methods.

        `methods` lists the method names to profile; when omitted the methods
        marked with `@profiled` on the delegate's class are used.
        """
        if delegate is None:
            raise ValueError("delegate is required")
        klass = type(delegate)
        if methods is None:
            selected = profiled_methods_of(klass)
        else:
            selected = {}
            for name in methods:
                if not callable(getattr(delegate, name, None)):
                    raise ValueError(f"{klass.__qualname__} has no method {name!r}")
                selected[name] = _declaring_type(klass, name) or klass
        if not selected:
            raise NoProfiledMethodsError(klass.__qualname__)
        logger.debug("Profiling %s methods: %s", klass.__qualname__, sorted(selected))
        return ProfiledProxy(delegate, selected, self._clock, self._state)

    def write_data(self, stream: TextIO) -> None:
        stream.write(f"Run at {format_datetime(self._start_time, usegmt=True)}\n")
        self._state.write(stream)
        stream.write("\n")

    def write_data_path(self, path: str) -> None:
        """Append profile data to `path`, creating the file if needed."""
        with open(path, "a", encoding="utf-8") as f:
            self.write_data(f)
