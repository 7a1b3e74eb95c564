"""
Tests for the SimulationEngine.

These drive a real RoundRobinPolicy cycle by cycle and check the trace:
which pid held the CPU each cycle, where each time slice started and
ended, and when every process finished.
"""

import pytest

from models.enums import ProcessState
from models.process import ProcessSpec
from scheduler.base import IDLE
from scheduler.engine import SimulationEngine
from scheduler.exceptions import SimulationError
from scheduler.round_robin import RoundRobinPolicy


def _make_engine(quantum: int, **kwargs) -> SimulationEngine:
    return SimulationEngine(RoundRobinPolicy(quantum), **kwargs)


def _proc(pid: int, arrival: int, service: int) -> ProcessSpec:
    return ProcessSpec(pid=pid, arrival_time=arrival, service_time=service)


def test_single_process_is_sliced_by_quantum():
    trace = _make_engine(2).run([_proc(1, 0, 5)])

    assert trace.timeline == [1, 1, 1, 1, 1]
    assert trace.slices == [(1, 0, 1), (1, 2, 3), (1, 4, 4)]
    assert trace.end_cycles == {1: 4}
    assert trace.total_cycles == 5


def test_two_processes_alternate():
    trace = _make_engine(3).run([_proc(1, 0, 5), _proc(2, 0, 2)])

    assert trace.timeline == [1, 1, 1, 2, 2, 1, 1]
    assert trace.slices == [(1, 0, 2), (2, 3, 4), (1, 5, 6)]
    assert trace.end_cycles == {1: 6, 2: 4}
    assert trace.dispatch_order == [1, 2, 1]


def test_process_finishing_early_gives_up_rest_of_quantum():
    trace = _make_engine(10).run([_proc(1, 0, 2), _proc(2, 0, 1)])

    assert trace.timeline == [1, 1, 2]
    assert trace.end_cycles == {1: 1, 2: 2}


def test_cpu_idles_until_first_arrival():
    trace = _make_engine(3).run([_proc(1, 2, 1)])

    assert trace.timeline == [IDLE, IDLE, 1]
    assert trace.slices == [(1, 2, 2)]
    assert trace.end_cycles == {1: 2}


def test_idle_gap_between_processes():
    trace = _make_engine(3).run([_proc(1, 0, 1), _proc(2, 3, 1)])

    assert trace.timeline == [1, IDLE, IDLE, 2]


def test_preempted_process_queues_ahead_of_next_arrival():
    """Preemption happens at the end of a cycle, arrivals at the start of the next."""
    trace = _make_engine(1).run([_proc(1, 0, 2), _proc(2, 1, 1)])

    assert trace.timeline == [1, 1, 2]
    assert trace.slices == [(1, 0, 0), (1, 1, 1), (2, 2, 2)]


def test_same_arrival_admitted_in_pid_order():
    trace = _make_engine(1).run([_proc(5, 0, 1), _proc(3, 0, 1), _proc(4, 0, 1)])
    assert trace.dispatch_order == [3, 4, 5]


def test_every_process_gets_a_turn_within_bound():
    """With n ready processes, nobody waits more than (n - 1) * quantum cycles."""
    quantum, n = 2, 4
    trace = _make_engine(quantum).run([_proc(pid, 0, 7) for pid in range(n)])

    last_end = {}
    for pid, start, end in trace.slices:
        if pid in last_end:
            assert start - last_end[pid] - 1 <= (n - 1) * quantum
        last_end[pid] = end


def test_engine_can_be_reused():
    engine = _make_engine(2)
    workload = [_proc(1, 0, 3), _proc(2, 1, 2)]

    first = engine.run(workload)
    second = engine.run(workload)

    assert first.timeline == second.timeline
    assert first.slices == second.slices


def test_engine_attaches_itself_to_policy():
    policy = RoundRobinPolicy(2)
    engine = SimulationEngine(policy)
    assert policy.system is engine


def test_process_table_after_run():
    engine = _make_engine(2)
    engine.run([_proc(1, 0, 3)])

    assert engine.process_state(1) == ProcessState.FINISHED
    assert engine.running_pid == IDLE
    assert engine.system_time == 3


def test_empty_workload():
    trace = _make_engine(2).run([])
    assert trace.timeline == []
    assert trace.total_cycles == 0


def test_duplicate_pids_rejected():
    with pytest.raises(ValueError, match="Duplicate pids"):
        _make_engine(2).run([_proc(1, 0, 1), _proc(1, 3, 1)])


def test_cycle_limit_aborts_run():
    engine = _make_engine(2, max_cycles=3)
    with pytest.raises(SimulationError, match="exceeded 3 cycles"):
        engine.run([_proc(1, 0, 10)])


@pytest.mark.parametrize(
    "pid, arrival, service",
    [(-1, 0, 1), (1, -1, 1), (1, 0, 0)],
)
def test_process_spec_validation(pid, arrival, service):
    with pytest.raises(ValueError):
        ProcessSpec(pid=pid, arrival_time=arrival, service_time=service)


def test_engine_keeps_existing_system_handle():
    marker = object()
    policy = RoundRobinPolicy(2, system=marker)
    SimulationEngine(policy)
    assert policy.system is marker


def test_large_workload_finishes():
    """Thousands of processes run in a single pass over the cycles."""
    n = 5_000
    trace = _make_engine(1).run([_proc(pid, 0, 1) for pid in range(n)])

    assert trace.total_cycles == n
    assert trace.dispatch_order == list(range(n))
    assert len(trace.end_cycles) == n
