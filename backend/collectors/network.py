"""Network interface byte counter collector."""

import logging

from config import NAMESPACE
from errors import MalformedData
from metric import counter

from .procfs import read_proc_lines

logger = logging.getLogger(__name__)

# /proc/net/dev header lines are the only ones containing this token
HEADER_SEPARATOR = '|'

# Counter columns after the interface name: rx bytes first, tx bytes ninth
RX_BYTES = 0
TX_BYTES = 8
MIN_COLUMNS = TX_BYTES + 1


def strip_interface_name(token: str) -> str:
    """Drop the trailing colon from an interface name token."""
    return token.rstrip(':')


def parse_net_dev(lines: list) -> list:
    """Return (interface, rx_bytes, tx_bytes) tuples from /proc/net/dev lines."""
    stats = []
    seen = set()
    for line in lines:
        if HEADER_SEPARATOR in line or not line.strip():
            continue
        # Older kernels print large counters right after the colon
        name, sep, rest = line.partition(':')
        iface = strip_interface_name(name.strip())
        columns = rest.split()
        if not sep or not iface or len(columns) < MIN_COLUMNS:
            logger.error(f"Malformed /proc/net/dev line: {line!r}")
            raise MalformedData('net/dev', f'expected {MIN_COLUMNS} counters in line {line.strip()!r}')
        if iface in seen:
            raise MalformedData('net/dev', f'interface {iface} listed twice')
        seen.add(iface)
        try:
            stats.append((iface, int(columns[RX_BYTES]), int(columns[TX_BYTES])))
        except ValueError:
            raise MalformedData('net/dev', f'non-numeric counter for {iface}')
    return stats


def collect_network_metrics() -> str:
    """Render cumulative received and sent bytes per interface."""
    received = counter(f'{NAMESPACE}_network_bytes_received')
    sent = counter(f'{NAMESPACE}_network_bytes_sent')

    for iface, rx_bytes, tx_bytes in parse_net_dev(read_proc_lines('net/dev')):
        labels = {'device': iface}
        received.add(str(rx_bytes), labels)
        sent.add(str(tx_bytes), labels)

    logger.debug(f"Collected network counters for {len(received.samples)} interfaces")
    return received.render() + sent.render()
