"""
Errors raised by scheduling policies and the simulation engine.

None of these are transient: policies do no I/O, so nothing here is ever
retried. They surface straight to whoever made the bad call.
"""


class SchedulingError(Exception):
    """Base class for every scheduling-related error."""


class InvalidConfiguration(SchedulingError, ValueError):
    """A policy was built with settings it cannot run with (e.g. quantum <= 0)."""


class PolicyMisuse(SchedulingError, RuntimeError):
    """
    The caller broke the policy's call-ordering contract.

    Examples: dispatching while a process is already running, preempting
    while idle, admitting a pid that is already queued or running.
    The policy's state is left untouched when this is raised.
    """


class SimulationError(SchedulingError):
    """The simulation engine could not complete a run."""
