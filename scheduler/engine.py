"""
Simulation Engine — the cycle-by-cycle driver around a scheduling policy.

The engine owns the clock and the process table. The policy owns the ready
queue. Every cycle the engine executes this sequence:

    1. Admit arrivals: processes whose arrival_time is now → policy.new_process()
    2. If the CPU is idle → policy.dispatch()
    3. Run one CPU cycle for whoever holds the CPU (or record IDLE)
    4. If that process is done → policy.finished(), CPU goes idle
       otherwise → policy.preempt(), CPU goes idle if it says so
    5. Advance the clock

The run ends when every process is FINISHED.

          workload               policy                   trace
    ┌──────────────┐       ┌──────────────────┐      ┌────────────┐
    │ ProcessSpecs │──────>│ ready queue +    │─────>│ timeline,  │
    │ (arrivals)   │ admit │ quantum clock    │ pick │ slices     │
    └──────────────┘       └──────────────────┘      └────────────┘

The engine doesn't decide anything. It only asks the policy and records
what happened. Averages, waiting times and other statistics are left to
whoever consumes the trace.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Optional

from config.settings import settings
from models.enums import ProcessState
from models.process import ProcessRecord, ProcessSpec
from scheduler.base import IDLE, AbstractSchedulingPolicy, Pid
from scheduler.exceptions import SimulationError

logger = logging.getLogger(__name__)


@dataclass
class SimulationTrace:
    """
    What happened during one run.

    - timeline: the pid that held the CPU in each cycle (IDLE if none)
    - slices: one (pid, first_cycle, last_cycle) entry per dispatch, inclusive
    - end_cycles: pid → cycle in which the process finished
    """
    policy_name: str
    timeline: list[Pid] = field(default_factory=list)
    slices: list[tuple[Pid, int, int]] = field(default_factory=list)
    end_cycles: dict[Pid, int] = field(default_factory=dict)

    @property
    def total_cycles(self) -> int:
        return len(self.timeline)

    @property
    def dispatch_order(self) -> list[Pid]:
        return [pid for pid, _, _ in self.slices]


class SimulationEngine:
    """
    Runs workloads through a scheduling policy on a single simulated CPU.

    One engine (and its policy) can run any number of independent
    simulations: run() resets the policy and the process table first.
    """

    def __init__(self, policy: AbstractSchedulingPolicy, max_cycles: Optional[int] = None):
        self._policy = policy
        self._max_cycles = max_cycles if max_cycles is not None else settings.MAX_SIMULATION_CYCLES
        self._table: dict[Pid, ProcessRecord] = {}
        self._cpu: Pid = IDLE
        self._clock: int = 0
        self._slice_start: int = 0
        self._unfinished: int = 0

        # policies that need simulator state can query it through this handle;
        # a handle passed in at policy construction is left alone
        if policy.system is None:
            policy.system = self

    @property
    def policy(self) -> AbstractSchedulingPolicy:
        return self._policy

    @property
    def system_time(self) -> int:
        return self._clock

    @property
    def running_pid(self) -> Pid:
        return self._cpu

    def process_state(self, pid: Pid) -> ProcessState:
        """Look up a process in the table. Raises KeyError for unknown pids."""
        return self._table[pid].state

    def run(self, processes: Iterable[ProcessSpec]) -> SimulationTrace:
        """
        Simulate the workload to completion and return the trace.

        Raises:
            ValueError: two processes share a pid
            SimulationError: the run did not finish within max_cycles
        """
        specs = sorted(processes, key=lambda p: (p.arrival_time, p.pid))
        pids = [spec.pid for spec in specs]
        if len(set(pids)) != len(pids):
            raise ValueError(f"Duplicate pids in workload: {sorted(pids)}")

        self._reset(specs)
        trace = SimulationTrace(policy_name=self._policy.policy_name)
        arrivals = deque(specs)
        logger.info(
            f"Starting simulation: {len(specs)} processes, policy={self._policy.policy_name}"
        )

        while self._unfinished:
            if self._clock >= self._max_cycles:
                raise SimulationError(
                    f"Simulation exceeded {self._max_cycles} cycles "
                    f"({self._unfinished} unfinished)"
                )

            while arrivals and arrivals[0].arrival_time <= self._clock:
                self._policy.new_process(arrivals.popleft().pid)

            if self._cpu == IDLE:
                self._dispatch()

            self._simulate_cycle(trace)

            if self._cpu != IDLE:
                self._check_finished_or_preempted(trace)

            self._clock += 1

        logger.info(f"Simulation finished after {trace.total_cycles} cycles")
        return trace

    def _reset(self, specs: list[ProcessSpec]) -> None:
        self._policy.reset_policy()
        self._table = {spec.pid: ProcessRecord(spec=spec) for spec in specs}
        self._cpu = IDLE
        self._clock = 0
        self._slice_start = 0
        self._unfinished = len(self._table)

    def _dispatch(self) -> None:
        pid = self._policy.dispatch()
        if pid == IDLE:
            return

        record = self._table.get(pid)
        if record is None or record.state != ProcessState.READY:
            raise SimulationError(f"Policy dispatched process {pid}, which is not ready")

        record.state = ProcessState.RUNNING
        if record.start_cycle is None:
            record.start_cycle = self._clock
        self._cpu = pid
        self._slice_start = self._clock

    def _simulate_cycle(self, trace: SimulationTrace) -> None:
        trace.timeline.append(self._cpu)
        if self._cpu == IDLE:
            return
        self._table[self._cpu].used_cycles += 1
        self._policy.run_cpu_cycle(self._cpu)

    def _check_finished_or_preempted(self, trace: SimulationTrace) -> None:
        """
        A finished process is reported via finished() and never preempted.
        Otherwise preempt() gets its once-per-cycle call.
        """
        record = self._table[self._cpu]

        if record.is_done():
            record.state = ProcessState.FINISHED
            self._unfinished -= 1
            record.end_cycle = self._clock
            trace.end_cycles[record.pid] = self._clock
            self._policy.finished(record.pid)
            self._close_slice(trace)
            logger.debug(f"Process {record.pid} finished at cycle {self._clock}")
            return

        if self._policy.preempt():
            record.state = ProcessState.READY
            self._close_slice(trace)

    def _close_slice(self, trace: SimulationTrace) -> None:
        trace.slices.append((self._cpu, self._slice_start, self._clock))
        self._cpu = IDLE
