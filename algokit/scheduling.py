"""CPU scheduling simulations: first come first served, priority and round robin."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

__all__ = [
    "ProcessStats",
    "ScheduleReport",
    "fcfs",
    "priority_schedule",
    "round_robin",
]


@dataclass(frozen=True)
class ProcessStats:
    """Timing of one process once the schedule has run it to completion."""

    process_id: int
    arrival: int
    burst: int
    completion: int
    priority: Optional[int] = None

    @property
    def turnaround(self) -> int:
        """Time from arrival to completion."""
        return self.completion - self.arrival

    @property
    def waiting(self) -> int:
        """Time spent ready but not running."""
        return self.turnaround - self.burst


@dataclass(frozen=True)
class ScheduleReport:
    """Per-process results in the order the schedule lists them, with averages."""

    processes: tuple[ProcessStats, ...]
    average_turnaround: float
    average_waiting: float


def _check_lengths(**columns: Sequence[int]) -> int:
    lengths = {len(column) for column in columns.values()}
    if len(lengths) != 1:
        names = ", ".join(columns)
        raise ValueError(f"{names} must all have the same length")
    count = lengths.pop()
    if count == 0:
        raise ValueError("at least one process is required")
    return count


def _mean(values: Sequence[int]) -> float:
    return sum(values) / len(values)


def fcfs(
    process_ids: Sequence[int],
    arrival_times: Sequence[int],
    burst_times: Sequence[int],
) -> ScheduleReport:
    """Run processes in order of arrival, idling the CPU between gaps."""
    _check_lengths(
        process_ids=process_ids,
        arrival_times=arrival_times,
        burst_times=burst_times,
    )
    jobs = sorted(
        zip(process_ids, arrival_times, burst_times), key=lambda job: job[1]
    )
    stats: list[ProcessStats] = []
    clock: Optional[int] = None
    for pid, arrival, burst in jobs:
        start = arrival if clock is None else max(clock, arrival)
        clock = start + burst
        stats.append(ProcessStats(pid, arrival, burst, clock))
    return ScheduleReport(
        tuple(stats),
        _mean([p.turnaround for p in stats]),
        _mean([p.waiting for p in stats]),
    )


def priority_schedule(
    burst_times: Sequence[int], priorities: Sequence[int]
) -> ScheduleReport:
    """Run processes (numbered from 1) lowest priority value first.

    Ordering is by selection sort, so processes of equal priority may change
    places. Averages are truncated to whole numbers.
    """
    count = _check_lengths(burst_times=burst_times, priorities=priorities)
    jobs = [(pid, burst, prio) for pid, (burst, prio) in
            enumerate(zip(burst_times, priorities), start=1)]
    for start in range(count):
        best = start
        for candidate in range(start + 1, count):
            if jobs[candidate][2] < jobs[best][2]:
                best = candidate
        jobs[start], jobs[best] = jobs[best], jobs[start]

    stats: list[ProcessStats] = []
    clock = 0
    for pid, burst, prio in jobs:
        clock += burst
        stats.append(ProcessStats(pid, 0, burst, clock, prio))
    return ScheduleReport(
        tuple(stats),
        float(sum(p.turnaround for p in stats) // count),
        float(sum(p.waiting for p in stats) // count),
    )


def round_robin(
    arrival_times: Sequence[int], burst_times: Sequence[int], quantum: int
) -> ScheduleReport:
    """Time-slice processes (numbered from 1); results are in completion order.

    Raises ValueError when the schedule could never finish: a non-positive
    quantum or burst, or a later process that arrives while nothing that has
    arrived is left to run.
    """
    count = _check_lengths(arrival_times=arrival_times, burst_times=burst_times)
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    if any(burst <= 0 for burst in burst_times):
        raise ValueError("burst times must be positive")

    remaining = list(burst_times)
    left = count
    clock = 0
    index = 0
    idle_steps = 0
    finished: list[ProcessStats] = []
    while left:
        before = clock
        if 0 < remaining[index] <= quantum:
            clock += remaining[index]
            remaining[index] = 0
            left -= 1
            finished.append(
                ProcessStats(
                    index + 1, arrival_times[index], burst_times[index], clock
                )
            )
        elif remaining[index] > 0:
            remaining[index] -= quantum
            clock += quantum

        if clock == before:
            idle_steps += 1
            if idle_steps > count:
                raise ValueError(
                    f"no arrived process can run at time {clock}; "
                    "the schedule would never finish"
                )
        else:
            idle_steps = 0

        if index == count - 1:
            index = 0
        elif arrival_times[index + 1] <= clock:
            index += 1
        else:
            index = 0

    return ScheduleReport(
        tuple(finished),
        _mean([p.turnaround for p in finished]),
        _mean([p.waiting for p in finished]),
    )