"""Memory usage metrics collector."""

import logging

from config import NAMESPACE
from errors import MalformedData
from metric import gauge

from .procfs import read_proc_lines

logger = logging.getLogger(__name__)

# meminfo key -> metric suffix, in output order
MEMINFO_FIELDS = (
    ('MemTotal', 'mem_total'),
    ('MemFree', 'mem_free'),
    ('MemAvailable', 'mem_available'),
)


def parse_meminfo(lines: list) -> dict:
    """Map meminfo keys to their value token (kilobytes)."""
    meminfo = {}
    for line in lines:
        key, sep, rest = line.partition(':')
        parts = rest.split()
        if sep and parts:
            meminfo[key.strip()] = parts[0]
    return meminfo


def collect_memory_metrics() -> str:
    """Render total, free and available memory from /proc/meminfo, in kB."""
    meminfo = parse_meminfo(read_proc_lines('meminfo'))

    text = []
    for key, suffix in MEMINFO_FIELDS:
        if key not in meminfo:
            logger.error(f"meminfo has no {key} field")
            raise MalformedData('meminfo', f'missing field {key}')
        try:
            value = int(meminfo[key])
        except ValueError:
            raise MalformedData('meminfo', f'non-numeric {key}: {meminfo[key]!r}')
        text.append(gauge(f'{NAMESPACE}_{suffix}').add(str(value)).render())

    logger.debug("Collected memory metrics")
    return ''.join(text)
