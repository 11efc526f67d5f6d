"""Disk capacity metrics collector."""

import os
import logging
from typing import Iterable

from config import NAMESPACE
from errors import InvalidParameter, SourceUnavailable
from metric import gauge

logger = logging.getLogger(__name__)


def collect_disk_metrics(mounts: Iterable[str]) -> str:
    """Render total and free bytes for each mount point.

    A single mount point that cannot be statted fails the whole collection.
    """
    disk_total = gauge(f'{NAMESPACE}_disk_total')
    disk_free = gauge(f'{NAMESPACE}_disk_free')

    for mount_point in mounts:
        try:
            st = os.statvfs(mount_point)
        except FileNotFoundError as e:
            logger.error(f"Mount point {mount_point} does not exist")
            raise InvalidParameter(f'disk:{mount_point}', 'no such mount point') from e
        except OSError as e:
            logger.error(f"statvfs failed for {mount_point}: {e}")
            raise SourceUnavailable(f'disk:{mount_point}', f'statvfs failed: {e.strerror or e}') from e

        # f_blocks and f_bavail are counted in fragment-size units
        total_bytes = st.f_frsize * st.f_blocks
        free_bytes = st.f_frsize * st.f_bavail

        labels = {'path': mount_point}
        disk_total.add(str(total_bytes), labels)
        disk_free.add(str(free_bytes), labels)

    logger.debug(f"Collected disk metrics for {len(disk_total.samples)} mount points")
    return disk_total.render() + disk_free.render()
