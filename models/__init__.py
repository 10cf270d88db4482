"""Data models for persistent disk resources."""

from models.cloud_disk import CloudDisk, DiskRevision, LocationType
from models.disk import CustomerEncryptionKey, DiskAlpha, DiskBeta, DiskV1

__all__ = [
    "CloudDisk",
    "DiskRevision",
    "LocationType",
    "CustomerEncryptionKey",
    "DiskV1",
    "DiskBeta",
    "DiskAlpha",
]
