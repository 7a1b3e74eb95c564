"""
Abstract base class for all scheduling policies (Strategy pattern).

The Strategy pattern lets you swap algorithms without changing the code
that uses them. The SimulationEngine only knows about AbstractSchedulingPolicy:
it calls new_process(), dispatch(), preempt() and finished() without caring
whether the concrete policy is Round Robin or something else.

To add a new scheduling policy:
1. Create a new class that inherits AbstractSchedulingPolicy
2. Implement the abstract methods
3. Register it in scheduler/registry.py

That's it. The engine, the API and the CLI don't change.

Policies only ever see process ids (Pid). They never hold the process table,
so they can be tested without running a simulation at all.
"""

from abc import ABC, abstractmethod
from typing import Optional

# Process identifiers are plain ints in this simulator.
Pid = int

# Sentinel returned by dispatch() when there is nothing to run.
IDLE: Pid = -1


class AbstractSchedulingPolicy(ABC):
    """
    Interface that all scheduling policies implement.

    The simulator drives the policy with three notifications and one question:
    - new_process: a process became ready
    - run_cpu_cycle: the running process just executed one cycle
    - finished: the running process completed its work
    - dispatch: "the CPU is idle, who runs next?"

    plus preempt(), called once per cycle while a process runs, which answers
    "should the running process give up the CPU now?".
    """

    def __init__(self, system: Optional[object] = None):
        # Handle to the owning simulator, for policies that need to query it.
        self.system = system

    @abstractmethod
    def new_process(self, pid: Pid) -> None:
        """Record that `pid` has become ready to run."""
        ...

    @abstractmethod
    def dispatch(self) -> Pid:
        """Select the next process to run, or return IDLE if none is ready."""
        ...

    @abstractmethod
    def preempt(self) -> bool:
        """Called once per cycle while running. True means: take the CPU away now."""
        ...

    @abstractmethod
    def finished(self, pid: Pid) -> None:
        """The running process completed. Forget it without re-queueing."""
        ...

    @abstractmethod
    def reset_policy(self) -> None:
        """Return to the initial state so a new simulation can start."""
        ...

    def run_cpu_cycle(self, pid: Pid) -> None:
        """Hook invoked after `pid` executes one cycle. Most policies ignore it."""

    @property
    @abstractmethod
    def policy_name(self) -> str:
        """Unique name for this policy (e.g., 'round_robin')."""
        ...
