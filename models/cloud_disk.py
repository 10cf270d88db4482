"""Revision-independent view over a persistent disk resource.

A ``CloudDisk`` wraps exactly one revision record (v1, beta or alpha) or
nothing at all. Every accessor is total: fields a revision does not define,
and every field of an empty view, read as documented defaults instead of
raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from models.disk import DiskAlpha, DiskBeta, DiskRecord, DiskV1

UNKNOWN_STATUS = "Unknown"
UNKNOWN_SIZE_GB = -1


class DiskRevision(str, Enum):
    """Compute API revision a disk record was read from."""

    V1 = "v1"
    BETA = "beta"
    ALPHA = "alpha"

    def __str__(self) -> str:
        return self.value


class LocationType(str, Enum):
    """Scope of a disk resource."""

    ZONAL = "zonal"
    REGIONAL = "regional"
    GLOBAL = "global"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CloudDisk:
    """A disk resource from any API revision behind one read-only surface.

    Build instances with :meth:`from_v1`, :meth:`from_beta` or
    :meth:`from_alpha`. ``CloudDisk()`` is the empty view.
    """

    disk: Optional[DiskRecord] = None

    @classmethod
    def from_v1(cls, disk: DiskV1) -> CloudDisk:
        return cls(disk=disk)

    @classmethod
    def from_beta(cls, disk: DiskBeta) -> CloudDisk:
        return cls(disk=disk)

    @classmethod
    def from_alpha(cls, disk: DiskAlpha) -> CloudDisk:
        return cls(disk=disk)

    @property
    def revision(self) -> Optional[DiskRevision]:
        if isinstance(self.disk, DiskV1):
            return DiskRevision.V1
        if isinstance(self.disk, DiskBeta):
            return DiskRevision.BETA
        if isinstance(self.disk, DiskAlpha):
            return DiskRevision.ALPHA
        return None

    @property
    def location_type(self) -> LocationType:
        """Classify the disk as zonal, regional or global.

        Zone wins over region; a disk with neither (or an empty view) is
        global.
        """
        if self.zone:
            return LocationType.ZONAL
        if self.region:
            return LocationType.REGIONAL
        return LocationType.GLOBAL

    @property
    def users(self) -> list[str]:
        if self.disk is None:
            return []
        return list(self.disk.users)

    @property
    def name(self) -> str:
        if self.disk is None:
            return ""
        return self.disk.name

    @property
    def kind(self) -> str:
        if self.disk is None:
            return ""
        return self.disk.kind

    @property
    def status(self) -> str:
        """Lifecycle status, or "Unknown" when there is no disk at all."""
        if self.disk is None:
            return UNKNOWN_STATUS
        return self.disk.status

    @property
    def pd_type(self) -> str:
        """Disk type name taken from the last segment of the type URL.

        projects/p/zones/z/diskTypes/pd-standard -> pd-standard. The result
        is passed through from the API without validation.
        """
        if self.disk is None:
            return ""
        return self.disk.type.split("/")[-1].strip()

    @property
    def self_link(self) -> str:
        if self.disk is None:
            return ""
        return self.disk.self_link

    @property
    def size_gb(self) -> int:
        """Size in GB, or -1 when there is no disk to size."""
        if self.disk is None:
            return UNKNOWN_SIZE_GB
        return self.disk.size_gb

    @property
    def zone(self) -> str:
        if self.disk is None:
            return ""
        return self.disk.zone

    @property
    def region(self) -> str:
        if self.disk is None:
            return ""
        return self.disk.region

    @property
    def snapshot_id(self) -> str:
        if self.disk is None:
            return ""
        return self.disk.source_snapshot_id

    @property
    def source_disk_id(self) -> str:
        if self.disk is None:
            return ""
        return self.disk.source_disk_id

    @property
    def image_id(self) -> str:
        if self.disk is None:
            return ""
        return self.disk.source_image_id

    @property
    def kms_key_name(self) -> str:
        if self.disk is None or self.disk.disk_encryption_key is None:
            return ""
        return self.disk.disk_encryption_key.kms_key_name

    @property
    def multi_writer(self) -> bool:
        """Multi-writer flag; v1 disks have no such field."""
        if isinstance(self.disk, DiskV1):
            return False
        if isinstance(self.disk, (DiskBeta, DiskAlpha)):
            return self.disk.multi_writer
        return False

    @property
    def enable_confidential_compute(self) -> bool:
        """Confidential compute flag; v1 disks have no such field."""
        if isinstance(self.disk, DiskV1):
            return False
        if isinstance(self.disk, (DiskBeta, DiskAlpha)):
            return self.disk.enable_confidential_compute
        return False

    @property
    def enable_storage_pools(self) -> bool:
        """True when an alpha disk references a storage pool."""
        if isinstance(self.disk, (DiskV1, DiskBeta)):
            return False
        if isinstance(self.disk, DiskAlpha):
            return self.disk.storage_pool != ""
        return False
