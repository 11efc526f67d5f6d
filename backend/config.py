"""Configuration settings for the metrics exporter."""

import os
from dataclasses import dataclass
from typing import Tuple

DEFAULT_MOUNTS = '/'

# Metric name prefix shared by every series this exporter emits
NAMESPACE = 'squo'


class Config:
    """Application configuration."""

    # Web server settings
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', 9100))
    DEBUG = os.environ.get('DEBUG', 'false').lower() == 'true'

    # Whitespace-separated mount points reported by the disk collector
    MOUNTS = os.environ.get('MOUNTS', DEFAULT_MOUNTS)

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'WARNING')


@dataclass(frozen=True)
class ScrapeContext:
    """Per-request settings for one collection run."""

    mounts: Tuple[str, ...] = (DEFAULT_MOUNTS,)

    @classmethod
    def parse(cls, mounts: str) -> 'ScrapeContext':
        """Build a context from a whitespace-separated mount list.

        Blank input falls back to the root filesystem. Repeated paths are
        dropped after their first occurrence.
        """
        paths = tuple(dict.fromkeys((mounts or '').split()))
        if not paths:
            return cls()
        return cls(mounts=paths)
