"""
Module: generator.timing

Purpose:
    Timing instrumentation for a generation run, to see which phase
    (planning, slicing, markup) dominates.

Key Classes:
    - TimingLog: Collects per-phase durations

Key Functions:
    - timed_phase: Context manager for timing code blocks

Used By:
    - generator.pipeline: Main generation orchestrator
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Generator


@dataclass
class TimingLog:
    """
    Timing metrics for a generation run.

    Attributes:
        phase_timings: Dict of phase_name -> duration_seconds, in the
            order phases were recorded

    Example:
        >>> log = TimingLog()
        >>> log.log_phase("plan", 0.002)
        >>> log.total
        0.002
    """
    phase_timings: Dict[str, float] = field(default_factory=dict)

    def log_phase(self, phase: str, duration: float) -> None:
        """Log a phase duration, accumulating if the phase repeats."""
        self.phase_timings[phase] = self.phase_timings.get(phase, 0.0) + duration

    @property
    def total(self) -> float:
        return sum(self.phase_timings.values())

    def summary(self) -> str:
        """Generate human-readable timing summary."""
        lines = ["=== Generation Timing Summary ==="]
        for phase, duration in self.phase_timings.items():
            lines.append(f"  {phase:12s} {duration:.3f}s")
        lines.append(f"  {'total':12s} {self.total:.3f}s")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, float]:
        return dict(self.phase_timings)


@contextmanager
def timed_phase(log: TimingLog, phase: str) -> Generator[None, None, None]:
    """
    Context manager for timing a code phase.

    The duration is recorded even if the block raises.

    Example:
        >>> log = TimingLog()
        >>> with timed_phase(log, "plan"):
        ...     regions = plan_crops(layout, width)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        log.log_phase(phase, time.perf_counter() - start)
