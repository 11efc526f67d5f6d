"""Read primitive shared by the /proc based collectors."""

import os
import logging
from typing import List

from errors import SourceUnavailable

logger = logging.getLogger(__name__)

# Support both native and Docker-mounted paths
PROC_BASE = '/host/proc' if os.path.exists('/host/proc') else '/proc'


def read_proc_lines(name: str) -> List[str]:
    """Return the lines of a /proc table, raising SourceUnavailable on failure."""
    path = f'{PROC_BASE}/{name}'
    try:
        with open(path, 'r') as f:
            return f.read().splitlines()
    except OSError as e:
        logger.error(f"Error reading {path}: {e}")
        raise SourceUnavailable(name, f'cannot read {path}: {e.strerror or e}') from e
