"""Host metric collectors, one per OS source."""

from .cpu import collect_cpu_metrics
from .memory import collect_memory_metrics
from .disk import collect_disk_metrics
from .network import collect_network_metrics

__all__ = [
    'collect_cpu_metrics',
    'collect_memory_metrics',
    'collect_disk_metrics',
    'collect_network_metrics',
]
