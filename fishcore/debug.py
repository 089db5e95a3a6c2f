"""Run-time statistics collectors used while tuning and debugging the engine."""

from __future__ import annotations

import math
import threading
from typing import List

MAX_DEBUG_SLOTS = 32

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def _fmt(x: float) -> str:
    return f"{x:g}"


def _sqrt(x: float) -> float:
    return math.sqrt(x) if x >= 0 else math.nan


def _divide(num: float, den: float) -> float:
    if den:
        return num / den
    if num == 0 or math.isnan(num):
        return math.nan
    return math.copysign(math.inf, num)


class DebugStats:
    """Thread-safe counters for hits, means, deviations, extremes and correlations.

    Each kind of statistic has ``MAX_DEBUG_SLOTS`` independent slots.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.clear()

    def clear(self) -> None:
        """Reset every slot of every statistic."""
        with self._lock:
            self._hit: List[List[int]] = [[0, 0] for _ in range(MAX_DEBUG_SLOTS)]
            self._mean: List[List[int]] = [[0, 0] for _ in range(MAX_DEBUG_SLOTS)]
            self._stdev: List[List[int]] = [[0, 0, 0] for _ in range(MAX_DEBUG_SLOTS)]
            self._correl: List[List[int]] = [[0] * 6 for _ in range(MAX_DEBUG_SLOTS)]
            self._extremes: List[List[int]] = [
                [0, _INT64_MIN, _INT64_MAX] for _ in range(MAX_DEBUG_SLOTS)
            ]

    @staticmethod
    def _check(slot: int) -> int:
        if not 0 <= slot < MAX_DEBUG_SLOTS:
            raise IndexError(f"debug slot {slot} out of range")
        return slot

    def hit_on(self, cond: bool, slot: int = 0) -> None:
        """Count one event in ``slot`` and whether ``cond`` held for it."""
        entry = self._hit[self._check(slot)]
        with self._lock:
            entry[0] += 1
            if cond:
                entry[1] += 1

    def mean_of(self, value: int, slot: int = 0) -> None:
        """Accumulate ``value`` for a running mean."""
        entry = self._mean[self._check(slot)]
        with self._lock:
            entry[0] += 1
            entry[1] += value

    def stdev_of(self, value: int, slot: int = 0) -> None:
        """Accumulate ``value`` for a running standard deviation."""
        entry = self._stdev[self._check(slot)]
        with self._lock:
            entry[0] += 1
            entry[1] += value
            entry[2] += value * value

    def extremes_of(self, value: int, slot: int = 0) -> None:
        """Track the minimum and maximum of the values seen."""
        entry = self._extremes[self._check(slot)]
        with self._lock:
            entry[0] += 1
            entry[1] = max(entry[1], value)
            entry[2] = min(entry[2], value)

    def correl_of(self, value1: int, value2: int, slot: int = 0) -> None:
        """Accumulate a pair of values for a correlation coefficient."""
        entry = self._correl[self._check(slot)]
        with self._lock:
            entry[0] += 1
            entry[1] += value1
            entry[2] += value1 * value1
            entry[3] += value2
            entry[4] += value2 * value2
            entry[5] += value1 * value2

    def report(self) -> str:
        """Return one line per non-empty slot, statistic kind by kind."""
        lines: List[str] = []
        with self._lock:
            for i, (n, hits) in enumerate(self._hit):
                if n:
                    lines.append(
                        f"Hit #{i}: Total {n} Hits {hits} Hit Rate (%) {_fmt(100.0 * hits / n)}"
                    )
            for i, (n, total) in enumerate(self._mean):
                if n:
                    lines.append(f"Mean #{i}: Total {n} Mean {_fmt(total / n)}")
            for i, (n, s1, s2) in enumerate(self._stdev):
                if n:
                    r = _sqrt(s2 / n - (s1 / n) ** 2)
                    lines.append(f"Stdev #{i}: Total {n} Stdev {_fmt(r)}")
            for i, (n, hi, lo) in enumerate(self._extremes):
                if n:
                    lines.append(f"Extremity #{i}: Total {n} Min {lo} Max {hi}")
            for i, (n, sx, sxx, sy, syy, sxy) in enumerate(self._correl):
                if n:
                    num = sxy / n - (sx / n) * (sy / n)
                    den = _sqrt(sxx / n - (sx / n) ** 2) * _sqrt(syy / n - (sy / n) ** 2)
                    r = _divide(num, den)
                    lines.append(f"Correl. #{i}: Total {n} Coefficient {_fmt(r)}")
        return "".join(line + "\n" for line in lines)