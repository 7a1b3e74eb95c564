"""
CLI entry point for running a single simulation.

Usage:
    python -m runner.main --process 1:0:5 --process 2:1:3             # default quantum
    python -m runner.main --quantum 2 --process 1:0:5 --process 2:0:5
    python -m runner.main --policy round_robin --quantum 3 --process 7:0:4

Each --process is PID:ARRIVAL:SERVICE, all in CPU cycles.
"""

import argparse
import json
import logging
import sys

from config.settings import settings
from models.enums import SchedulingPolicy
from models.process import ProcessSpec
from scheduler.base import IDLE
from scheduler.engine import SimulationEngine, SimulationTrace
from scheduler.exceptions import SchedulingError
from scheduler.registry import create_policy

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def parse_process(raw: str) -> ProcessSpec:
    """Parse 'PID:ARRIVAL:SERVICE' into a ProcessSpec (argparse type= callable)."""
    parts = raw.split(":")
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(
            f"process must be PID:ARRIVAL:SERVICE, got '{raw}'"
        )
    try:
        pid, arrival, service = (int(p) for p in parts)
        return ProcessSpec(pid=pid, arrival_time=arrival, service_time=service)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid process '{raw}': {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CPU Scheduling Simulator")
    parser.add_argument(
        "--policy", type=str, default=settings.DEFAULT_SCHEDULING_POLICY,
        choices=[p.value for p in SchedulingPolicy],
        help=f"Scheduling policy (default: {settings.DEFAULT_SCHEDULING_POLICY})",
    )
    parser.add_argument(
        "--quantum", type=int, default=settings.ROUND_ROBIN_TIME_QUANTUM,
        help=f"Round Robin time slice in cycles (default: {settings.ROUND_ROBIN_TIME_QUANTUM})",
    )
    parser.add_argument(
        "--process", dest="processes", type=parse_process, action="append", required=True,
        metavar="PID:ARRIVAL:SERVICE",
        help="A process of the workload; repeat for each process",
    )
    return parser


def format_slices(trace: SimulationTrace) -> str:
    lines = ["{:<8} {:>8} {:>8}".format("Pid", "Start", "End"), "-" * 26]
    for pid, start, end in trace.slices:
        lines.append("{:<8} {:>8} {:>8}".format(pid, start, end))
    return "\n".join(lines)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        policy = create_policy(args.policy, quantum=args.quantum)
        trace = SimulationEngine(policy).run(args.processes)
    except (SchedulingError, ValueError) as e:
        logger.error(f"Simulation failed: {e}")
        return 1

    print(f"=== {trace.policy_name} (quantum={args.quantum}) ===")
    print(json.dumps({
        "total_cycles": trace.total_cycles,
        "timeline": ["-" if pid == IDLE else pid for pid in trace.timeline],
        "end_cycles": trace.end_cycles,
    }, indent=2))
    print()
    print(format_slices(trace))
    return 0


if __name__ == "__main__":
    sys.exit(main())
