"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They serialize to JSON automatically ("READY", not "ProcessState.READY")
- They work as FastAPI request fields and query parameters
- Typos become immediate errors instead of silent bugs
"""

import enum


class ProcessState(str, enum.Enum):
    READY = "READY"            # waiting in the policy's ready queue
    RUNNING = "RUNNING"        # currently holding the CPU
    FINISHED = "FINISHED"      # received all of its service time, no longer tracked


class SchedulingPolicy(str, enum.Enum):
    ROUND_ROBIN = "round_robin"  # FIFO ready queue + time quantum preemption
