"""
Round Robin scheduling policy.

Each process gets a fixed time quantum (e.g., 4 cycles). If it finishes
within the quantum, great. If not, it gets moved to the back of the ready
queue and the next process runs.

Data structure: deque
- new_process: append to right → O(1)
- dispatch:    pop from left   → O(1)
- preempt:     append to right → O(1)  ← the re-enqueue is what makes it RR

The quantum clock counts down once per simulated cycle. The cycle in which
a process is dispatched already counts against its quantum, so dispatch()
sets the clock to quantum - 1. With quantum=3:

    dispatch()  → pid   (clock 2)
    preempt()   → False (clock 1)
    preempt()   → False (clock 0)
    preempt()   → True  (pid back at the tail)

Fairness: with n ready processes nobody waits longer than (n - 1) * quantum
cycles between turns. No starvation.

Tradeoff: the quantum controls context switching vs. responsiveness:
- Small quantum (1): very fair, a switch every cycle
- Large quantum: fewer switches, approaches FCFS behavior
"""

import logging
from collections import deque
from typing import Optional

from scheduler.base import IDLE, AbstractSchedulingPolicy, Pid
from scheduler.exceptions import InvalidConfiguration, PolicyMisuse

logger = logging.getLogger(__name__)


class RoundRobinPolicy(AbstractSchedulingPolicy):

    def __init__(self, quantum: int, system: Optional[object] = None):
        super().__init__(system)
        # bool is an int subclass; quantum=True is a bug, not a quantum of 1
        if isinstance(quantum, bool) or not isinstance(quantum, int) or quantum <= 0:
            raise InvalidConfiguration(
                f"Round Robin quantum must be a positive integer, got {quantum!r}"
            )
        self._quantum = quantum
        self._ready: deque[Pid] = deque()
        self._queued: set[Pid] = set()   # same pids as _ready, for O(1) membership
        self._running: Pid = IDLE
        self._quantum_clock: int = quantum

    def new_process(self, pid: Pid) -> None:
        if isinstance(pid, bool) or not isinstance(pid, int) or pid < 0:
            raise PolicyMisuse(f"Process ids must be non-negative integers, got {pid!r}")
        if pid == self._running:
            raise PolicyMisuse(f"Process {pid} is already running")
        if pid in self._queued:
            raise PolicyMisuse(f"Process {pid} is already in the ready queue")
        self._ready.append(pid)
        self._queued.add(pid)

    def dispatch(self) -> Pid:
        """
        Hand the CPU to the process that has waited longest.

        Only valid while the CPU is idle. An empty ready queue is not an
        error: the CPU just stays idle this cycle and nothing changes.
        """
        if self._running != IDLE:
            raise PolicyMisuse(
                f"dispatch() called while process {self._running} is still running"
            )
        if not self._ready:
            return IDLE

        self._running = self._ready.popleft()
        self._queued.discard(self._running)
        # the dispatch cycle is the first cycle of the quantum
        self._quantum_clock = self._quantum - 1
        logger.debug(f"Dispatched process {self._running} (quantum {self._quantum})")
        return self._running

    def preempt(self) -> bool:
        """
        Count down one cycle of the running process's quantum.

        Returns True once the quantum is used up: the process goes to the
        back of the ready queue and the CPU is idle again. Completion is
        not checked here; the simulator calls finished() for that instead.
        """
        if self._running == IDLE:
            raise PolicyMisuse("preempt() called while no process is running")

        if self._quantum_clock == 0:
            pid = self._running
            self._ready.append(pid)
            self._queued.add(pid)
            self._running = IDLE
            logger.debug(f"Quantum expired for process {pid}, re-queued at position {len(self._ready)}")
            return True

        self._quantum_clock -= 1
        return False

    def finished(self, pid: Pid) -> None:
        if pid != self._running:
            raise PolicyMisuse(
                f"finished({pid}) called but the running process is {self._running}"
            )
        self._running = IDLE

    def reset_policy(self) -> None:
        """Empty the ready queue and restore the full quantum. The quantum length itself never changes."""
        self._ready.clear()
        self._queued.clear()
        self._running = IDLE
        self._quantum_clock = self._quantum

    def peek(self) -> Pid:
        """Next process dispatch() would pick, without removing it. IDLE if empty."""
        return self._ready[0] if self._ready else IDLE

    def size(self) -> int:
        return len(self._ready)

    @property
    def ready_queue(self) -> tuple[Pid, ...]:
        """Snapshot of the ready queue, head first."""
        return tuple(self._ready)

    @property
    def running_pid(self) -> Pid:
        return self._running

    @property
    def quantum(self) -> int:
        return self._quantum

    @property
    def quantum_clock(self) -> int:
        return self._quantum_clock

    @property
    def policy_name(self) -> str:
        return "round_robin"
