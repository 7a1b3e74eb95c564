"""
Process table entries for the simulator.

ProcessSpec is what the caller describes (who arrives when, and how many
cycles of CPU they need). ProcessRecord is the simulator's mutable view of
that process while a run is in progress.

The scheduling policy never sees either of these: it only stores and
compares pids. Keeping the table here means policies stay independent of
how the simulator tracks service time.
"""

from dataclasses import dataclass
from typing import Optional

from models.enums import ProcessState


@dataclass(frozen=True)
class ProcessSpec:
    """Immutable description of one simulated process."""
    pid: int
    arrival_time: int   # cycle at which the process becomes ready
    service_time: int   # CPU cycles needed to finish

    def __post_init__(self) -> None:
        if self.pid < 0:
            raise ValueError(f"pid must be non-negative, got {self.pid}")
        if self.arrival_time < 0:
            raise ValueError(f"arrival_time cannot be negative (pid {self.pid})")
        if self.service_time <= 0:
            raise ValueError(f"service_time must be strictly positive (pid {self.pid})")


@dataclass
class ProcessRecord:
    spec: ProcessSpec
    state: ProcessState = ProcessState.READY
    used_cycles: int = 0
    start_cycle: Optional[int] = None   # first cycle it held the CPU
    end_cycle: Optional[int] = None     # cycle in which it finished

    @property
    def pid(self) -> int:
        return self.spec.pid

    @property
    def remaining(self) -> int:
        return self.spec.service_time - self.used_cycles

    def is_done(self) -> bool:
        return self.used_cycles >= self.spec.service_time
