"""Tabular summary of persistent disks for display and export."""

from __future__ import annotations

import logging

import pandas as pd

from engine.metrics import format_bool, get_metric_parameters
from models.cloud_disk import CloudDisk

logger = logging.getLogger(__name__)

INVENTORY_COLUMNS: list[str] = [
    "Name",
    "Revision",
    "Location",
    "Zone",
    "Region",
    "Type",
    "Size (GB)",
    "Status",
    "Users",
    "KMS Key",
    "Multi Writer",
    "Confidential Compute",
    "Storage Pools",
]


def disks_to_dataframe(disks: list[CloudDisk]) -> pd.DataFrame:
    """Convert disks to a DataFrame, one row per disk.

    Flags use the same "true"/"false" strings as the metric labels so the
    table can be joined against exported metrics.
    """
    rows = []
    for d in disks:
        disk_type, confidential_compute, storage_pools = get_metric_parameters(d)
        rows.append(
            {
                "Name": d.name,
                "Revision": d.revision.value if d.revision is not None else "",
                "Location": d.location_type.value,
                "Zone": d.zone,
                "Region": d.region,
                "Type": disk_type,
                "Size (GB)": d.size_gb,
                "Status": d.status,
                "Users": ", ".join(d.users),
                "KMS Key": d.kms_key_name,
                "Multi Writer": format_bool(d.multi_writer),
                "Confidential Compute": confidential_compute,
                "Storage Pools": storage_pools,
            }
        )
    logger.debug("Built inventory table for %d disks", len(rows))
    return pd.DataFrame(rows, columns=INVENTORY_COLUMNS)
