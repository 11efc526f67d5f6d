"""CPU load metrics collector."""

import os
import logging

from config import NAMESPACE
from errors import MalformedData
from metric import gauge

from .procfs import read_proc_lines

logger = logging.getLogger(__name__)


def logical_cpu_count() -> int:
    """Number of logical CPUs this process may run on."""
    if hasattr(os, 'sched_getaffinity'):
        return len(os.sched_getaffinity(0))
    return os.cpu_count() or 0


def normalize_load(load: float, cpus: int) -> float:
    """Scale a load average to a per-CPU figure. ``cpus`` must be positive."""
    if cpus <= 0:
        raise ValueError(f'CPU count must be positive, got {cpus}')
    return load / cpus


def collect_cpu_metrics() -> str:
    """Render the 1-minute load average divided by the logical CPU count."""
    lines = read_proc_lines('loadavg')
    parts = lines[0].split() if lines else []
    if len(parts) < 3:
        logger.error(f"Unexpected loadavg contents: {lines!r}")
        raise MalformedData('loadavg', 'expected at least 3 fields')

    # 5 and 15 minute averages are not exported
    try:
        load_1min = float(parts[0])
    except ValueError:
        raise MalformedData('loadavg', f'non-numeric load average: {parts[0]!r}')

    load = normalize_load(load_1min, logical_cpu_count())
    logger.debug(f"Collected load average {load_1min} -> {load:.3f}")
    return gauge(f'{NAMESPACE}_load_avg_1m').add(f'{load:.3f}').render()
