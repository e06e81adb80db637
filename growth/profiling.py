"""
Timing utilities for the simulation phases.

Disabled by default. An engine built with GrowthConfig(profile=True) records
while its steps run and a summary table is printed when the interpreter exits.
"""

import time
from functools import wraps
from collections import defaultdict
from typing import Dict, List, Tuple
import atexit


class Profiler:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return
        self._initialized = True
        self.stats: Dict[str, Dict] = defaultdict(lambda: {
            'calls': 0,
            'total_time': 0.0,
        })
        self.enabled = False
        self._report_registered = False

    def enable(self, report_at_exit: bool = True):
        self.enabled = True
        if report_at_exit and not self._report_registered:
            atexit.register(self.print_stats)
            self._report_registered = True

    def disable(self):
        self.enabled = False

    def record(self, name: str, elapsed: float):
        if not self.enabled:
            return
        self.stats[name]['calls'] += 1
        self.stats[name]['total_time'] += elapsed

    def summary(self) -> List[Tuple[str, int, float, float]]:
        """Rows of (name, calls, total seconds, average ms), slowest first."""
        rows = []
        for name, data in self.stats.items():
            calls = data['calls']
            total = data['total_time']
            avg_ms = (total / calls * 1000) if calls > 0 else 0.0
            rows.append((name, calls, total, avg_ms))
        return sorted(rows, key=lambda row: row[2], reverse=True)

    def print_stats(self):
        rows = self.summary()
        if not rows:
            return

        print("\n" + "=" * 70)
        print("GROWTH PROFILING RESULTS")
        print("=" * 70)
        print(f"{'Phase':<35} {'Calls':>10} {'Total(s)':>10} {'Avg(ms)':>10}")
        print("-" * 70)
        for name, calls, total, avg_ms in rows:
            print(f"{name:<35} {calls:>10} {total:>10.3f} {avg_ms:>10.3f}")
        print("=" * 70)

    def reset(self):
        self.stats.clear()


profiler = Profiler()


def profile(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        if not profiler.enabled:
            return func(*args, **kwargs)
        start = time.perf_counter()
        result = func(*args, **kwargs)
        profiler.record(func.__qualname__, time.perf_counter() - start)
        return result
    return wrapper


class profile_block:
    def __init__(self, name: str):
        self.name = name
        self.start = None

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args):
        profiler.record(self.name, time.perf_counter() - self.start)


class profiling_session:
    """Record inside the block when `active`; the previous on/off state is restored on exit."""

    def __init__(self, active: bool = True):
        self.active = active
        self._was_enabled = False

    def __enter__(self):
        self._was_enabled = profiler.enabled
        if self.active:
            profiler.enable()
        return self

    def __exit__(self, *args):
        profiler.enabled = self._was_enabled
