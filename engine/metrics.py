"""Metric label parameters derived from a disk.

Operation metrics are labelled with the disk's type and with whether
confidential compute and storage pools are enabled. Label values are always
strings, and fixed defaults are used when no disk resource exists (for
example when creation failed before the disk was ever returned).
"""

from __future__ import annotations

from typing import Optional

from models.cloud_disk import CloudDisk

DEFAULT_DISK_TYPE_FOR_METRIC = "unknownDiskType"
DEFAULT_ENABLE_CONFIDENTIAL_COMPUTE = "false"
DEFAULT_ENABLE_STORAGE_POOLS = "false"

DISK_TYPE_LABEL = "disk_type"
ENABLE_CONFIDENTIAL_STORAGE_LABEL = "enable_confidential_storage"
ENABLE_STORAGE_POOLS_LABEL = "enable_storage_pools"


def format_bool(value: bool) -> str:
    """Render a flag as the "true"/"false" string used in metric labels."""
    return "true" if value else "false"


def get_metric_parameters(disk: Optional[CloudDisk]) -> tuple[str, str, str]:
    """Return the metric label values for a disk.

    Args:
        disk: The disk the operation acted on, or None if there is none.

    Returns:
        Tuple of (disk_type, enable_confidential_compute, enable_storage_pools).
    """
    if disk is None:
        return (
            DEFAULT_DISK_TYPE_FOR_METRIC,
            DEFAULT_ENABLE_CONFIDENTIAL_COMPUTE,
            DEFAULT_ENABLE_STORAGE_POOLS,
        )
    return (
        disk.pd_type,
        format_bool(disk.enable_confidential_compute),
        format_bool(disk.enable_storage_pools),
    )


def metric_labels(disk: Optional[CloudDisk]) -> dict[str, str]:
    """Return the metric parameters keyed by label name."""
    disk_type, confidential_compute, storage_pools = get_metric_parameters(disk)
    return {
        DISK_TYPE_LABEL: disk_type,
        ENABLE_CONFIDENTIAL_STORAGE_LABEL: confidential_compute,
        ENABLE_STORAGE_POOLS_LABEL: storage_pools,
    }
