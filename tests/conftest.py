"""Shared fixtures: a synthetic /proc tree and fake filesystem stats."""

import os
from types import SimpleNamespace

import pytest

import collectors.cpu
import collectors.procfs

MEMINFO = """\
MemTotal:           1000 kB
MemFree:             400 kB
MemAvailable:        700 kB
Buffers:              50 kB
Cached:              120 kB
SwapTotal:          2048 kB
SwapFree:           2048 kB
"""

LOADAVG = "2.00 1.50 1.00 1/123 4567\n"

NET_DEV = """\
Inter-|   Receive                                                |  Transmit
 face |bytes    packets errs drop fifo frame compressed multicast|bytes    packets errs drop fifo colls carrier compressed
    lo:  123456     100    0    0    0     0          0         0   123456     100    0    0    0     0       0          0
  eth0: 9876543    5000    0    0    0     0          0         0  1234567    4000    0    0    0     0       0          0
"""

FILESYSTEMS = {
    '/': (4096, 100, 50),
    '/home': (4096, 200, 150),
}


@pytest.fixture
def proc_dir(tmp_path, monkeypatch):
    """Point the collectors at a temporary /proc populated with sample tables."""
    (tmp_path / 'net').mkdir()
    (tmp_path / 'meminfo').write_text(MEMINFO)
    (tmp_path / 'loadavg').write_text(LOADAVG)
    (tmp_path / 'net' / 'dev').write_text(NET_DEV)
    monkeypatch.setattr(collectors.procfs, 'PROC_BASE', str(tmp_path))
    return tmp_path


@pytest.fixture
def cpu_count(monkeypatch):
    """Pin the logical CPU count to 2."""
    monkeypatch.setattr(collectors.cpu, 'logical_cpu_count', lambda: 2)
    return 2


@pytest.fixture
def filesystems(monkeypatch):
    """Replace os.statvfs with a lookup into a table of (block size, blocks, available)."""
    table = dict(FILESYSTEMS)

    def fake_statvfs(path):
        if path not in table:
            raise FileNotFoundError(2, 'No such file or directory', path)
        frsize, blocks, bavail = table[path]
        return SimpleNamespace(f_bsize=frsize, f_frsize=frsize, f_blocks=blocks, f_bavail=bavail)

    monkeypatch.setattr(os, 'statvfs', fake_statvfs)
    return table
