"""Memory usage of the running process."""

from __future__ import annotations

import os
from pathlib import Path

try:
    import resource
except ImportError:  # pragma: no cover - platform dependent
    resource = None  # type: ignore[assignment]

_STAT_PATH = Path("/proc/self/stat")


def peak_memory_mb() -> int:
    """Return the peak resident set size of this process in megabytes."""
    if resource is None:
        raise OSError("resource usage is not available on this platform")
    return int(resource.getrusage(resource.RUSAGE_SELF).ru_maxrss / 1024.0)


def process_mem_usage() -> tuple[float, float]:
    """Return (virtual size, resident set size) in kilobytes, or (0.0, 0.0) on failure."""
    try:
        text = _STAT_PATH.read_text()
    except OSError:
        return 0.0, 0.0
    _, _, rest = text.rpartition(")")
    fields = rest.split()
    try:
        vsize = int(fields[20])
        rss = int(fields[21])
    except (IndexError, ValueError):
        return 0.0, 0.0
    page_size_kb = os.sysconf("SC_PAGE_SIZE") // 1024
    return vsize / 1024.0, float(rss * page_size_kb)


def disp_mem_usage() -> float:
    """Print physical and virtual memory in megabytes; return the physical figure."""
    vm, rss = process_mem_usage()
    vm /= 1024
    rss /= 1024
    print(f"PhysicalMem(MB) {rss:g}")
    print(f"VirtualMem(MB) {vm:g}")
    return rss