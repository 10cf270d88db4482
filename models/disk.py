"""Revision-specific persistent disk records as returned by the Compute API.

Each record mirrors one API revision of the ``Disk`` resource. Fields a
revision does not define are simply absent from its record type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass
class CustomerEncryptionKey:
    """Customer-supplied or KMS-managed encryption key reference."""

    kms_key_name: str = ""


@dataclass
class _DiskFields:
    """Fields shared by every revision of the Disk resource.

    Attributes:
        name: Resource name.
        kind: Resource kind label (e.g. compute#disk).
        status: Lifecycle status (CREATING, READY, FAILED, ...).
        self_link: Fully-qualified URL of the resource.
        size_gb: Size in whole gigabytes.
        zone: Zone URL for zonal disks, empty otherwise.
        region: Region URL for regional disks, empty otherwise.
        users: Links to the instances the disk is attached to.
        type: Disk type URL, e.g. projects/p/zones/z/diskTypes/pd-standard.
        disk_encryption_key: Encryption key reference, if any.
        source_snapshot_id: ID of the snapshot the disk was created from.
        source_disk_id: ID of the disk the disk was cloned from.
        source_image_id: ID of the image the disk was created from.
    """

    name: str = ""
    kind: str = ""
    status: str = ""
    self_link: str = ""
    size_gb: int = 0
    zone: str = ""
    region: str = ""
    users: list[str] = field(default_factory=list)
    type: str = ""
    disk_encryption_key: Optional[CustomerEncryptionKey] = None
    source_snapshot_id: str = ""
    source_disk_id: str = ""
    source_image_id: str = ""


@dataclass
class DiskV1(_DiskFields):
    """Disk as described by the stable (v1) API."""


@dataclass
class DiskBeta(_DiskFields):
    """Disk as described by the beta API."""

    multi_writer: bool = False
    enable_confidential_compute: bool = False


@dataclass
class DiskAlpha(_DiskFields):
    """Disk as described by the alpha API.

    Attributes:
        storage_pool: Storage pool URL the disk belongs to, empty if none.
    """

    multi_writer: bool = False
    enable_confidential_compute: bool = False
    storage_pool: str = ""


DiskRecord = Union[DiskV1, DiskBeta, DiskAlpha]
