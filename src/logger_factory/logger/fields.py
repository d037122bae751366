import os
import resource
import sys
import time
import tracemalloc

from dataclasses import dataclass
from datetime import datetime
from functools import cached_property
from pathlib import Path

_STARTED_AT = time.monotonic()
_STATM = Path("/proc/self/statm")
_STAT = Path("/proc/self/stat")
_SYSTEM_UPTIME = Path("/proc/uptime")

KB = 1024
MB = 1024 * KB
GB = 1024 * MB


@dataclass(frozen=True)
class MemoryUsage:
    rss: int | None
    heap_total: int | None
    heap_used: int | None
    external: int | None = None

    def summary(self) -> str:
        return " ".join(
            f"{name}={_number(value)}"
            for name, value in (
                ("rss", self.rss),
                ("heap_total", self.heap_total),
                ("heap_used", self.heap_used),
                ("external", self.external),
            )
        )


def uptime() -> float:
    try:
        # starttime is field 22; the command name before it may contain spaces
        fields = _STAT.read_text().rsplit(")", 1)[1].split()
        started = int(fields[19]) / os.sysconf("SC_CLK_TCK")
        return max(float(_SYSTEM_UPTIME.read_text().split()[0]) - started, 0.0)
    except (OSError, ValueError, IndexError):
        return time.monotonic() - _STARTED_AT


def local_time(now: datetime) -> str:
    hour = now.hour % 12 or 12
    return f"{now.month}/{now.day}/{now.year}, {hour}:{now:%M:%S %p}"


def resident_set_size() -> int | None:
    try:
        pages = int(_STATM.read_text().split()[1])
        return pages * os.sysconf("SC_PAGE_SIZE")
    except (OSError, ValueError, IndexError):
        pass
    peak = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    if peak <= 0:
        return None
    # ru_maxrss is kilobytes on Linux and bytes on macOS
    return peak if sys.platform == "darwin" else peak * KB


def memory_usage() -> MemoryUsage:
    heap_total = heap_used = None
    if tracemalloc.is_tracing():
        heap_used, heap_total = tracemalloc.get_traced_memory()
    return MemoryUsage(rss=resident_set_size(), heap_total=heap_total, heap_used=heap_used)


def display_error(error: object | None) -> str:
    if error is None:
        return ""
    if isinstance(error, BaseException):
        text = str(error)
        return f"{type(error).__name__}: {text}" if text else type(error).__name__
    return str(error)


def _number(value: int | float | None) -> str:
    return "" if value is None else str(value)


def _scaled(value: int | None, unit: int) -> str:
    return "" if value is None else str(value / unit)


class RuntimeFields:
    """Values for every placeholder token, computed on first use and cached for one render."""

    def __init__(self, message: str, error: object | None = None, caller: str = "", now: datetime | None = None):
        self.message = message
        self.error = error
        self.caller = caller
        self.now = now or datetime.now().astimezone()

    @cached_property
    def memory(self) -> MemoryUsage:
        return memory_usage()

    def resolve(self, token: str) -> str | None:
        getter = _TOKENS.get(token)
        if getter is None:
            return None
        return getter(self)


_TOKENS = {
    "message": lambda f: f.message,
    "month": lambda f: str(f.now.month),
    "day": lambda f: str(f.now.day),
    "year": lambda f: str(f.now.year),
    "hour": lambda f: str(f.now.hour),
    "minute": lambda f: str(f.now.minute),
    "second": lambda f: str(f.now.second),
    "ms": lambda f: str(f.now.microsecond // 1000),
    "caller": lambda f: f.caller,
    "err": lambda f: display_error(f.error),
    "pid": lambda f: str(os.getpid()),
    "ppid": lambda f: str(os.getppid()),
    "time": lambda f: local_time(f.now),
    "timezone": lambda f: f.now.tzname() or "",
    "uptime": lambda f: str(uptime()),
    "memory": lambda f: f.memory.summary(),
    "memory-rss": lambda f: _number(f.memory.rss),
    "memory-heap-total": lambda f: _number(f.memory.heap_total),
    "memory-heap-used": lambda f: _number(f.memory.heap_used),
    "memory-external": lambda f: _number(f.memory.external),
    "memory-b": lambda f: _number(f.memory.rss),
    "memory-kb": lambda f: _scaled(f.memory.rss, KB),
    "memory-mb": lambda f: _scaled(f.memory.rss, MB),
    "memory-gb": lambda f: _scaled(f.memory.rss, GB),
}

TOKENS: frozenset[str] = frozenset(_TOKENS)
