"""
Policy factory — maps policy names to policy classes.

This is the Factory pattern: instead of writing if/elif chains everywhere,
there is ONE place that knows how to create scheduling policies.
The engine, the API and the CLI all go through create_policy().

Adding a policy: create the class, add one line to _REGISTRY.
"""

from typing import Optional

from config.settings import settings
from models.enums import SchedulingPolicy
from scheduler.base import AbstractSchedulingPolicy
from scheduler.exceptions import InvalidConfiguration
from scheduler.round_robin import RoundRobinPolicy


_REGISTRY: dict[SchedulingPolicy, type[AbstractSchedulingPolicy]] = {
    SchedulingPolicy.ROUND_ROBIN: RoundRobinPolicy,
}


def create_policy(
    policy: SchedulingPolicy | str,
    quantum: Optional[int] = None,
    system: Optional[object] = None,
) -> AbstractSchedulingPolicy:
    """
    Create a policy instance for the given policy name.

    For Round Robin, quantum falls back to settings.ROUND_ROBIN_TIME_QUANTUM:
        create_policy(SchedulingPolicy.ROUND_ROBIN, quantum=3)
    """
    try:
        policy = SchedulingPolicy(policy)
    except ValueError:
        raise InvalidConfiguration(
            f"Unknown scheduling policy: '{policy}'. "
            f"Available: {[p.value for p in _REGISTRY]}"
        ) from None

    cls = _REGISTRY.get(policy)
    if cls is None:
        raise InvalidConfiguration(f"No policy registered for {policy.value}")

    if quantum is None:
        quantum = settings.ROUND_ROBIN_TIME_QUANTUM
    return cls(quantum, system=system)
