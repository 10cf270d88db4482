"""Configuration for the persistent disk view."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from models.cloud_disk import DiskRevision

logger = logging.getLogger(__name__)

# Compute API revisions a Disk payload may be read from
COMPUTE_API_VERSIONS: list[str] = [revision.value for revision in DiskRevision]

# Revision assumed for payloads that do not say which API produced them
DEFAULT_COMPUTE_API_VERSION: str = DiskRevision.V1.value

# Environment variable selecting the default revision
COMPUTE_API_VERSION_ENV: str = "GCE_COMPUTE_API_VERSION"


@dataclass
class AppConfig:
    """Runtime configuration, resolved from environment variables and defaults."""

    api_version: DiskRevision = DiskRevision.V1

    @classmethod
    def from_env(cls) -> AppConfig:
        """Build configuration from environment variables."""
        raw = os.environ.get(COMPUTE_API_VERSION_ENV, DEFAULT_COMPUTE_API_VERSION)
        value = raw.strip().lower()
        if value not in COMPUTE_API_VERSIONS:
            logger.warning(
                "Ignoring %s=%r, expected one of %s; using %s",
                COMPUTE_API_VERSION_ENV,
                raw,
                ", ".join(COMPUTE_API_VERSIONS),
                DEFAULT_COMPUTE_API_VERSION,
            )
            value = DEFAULT_COMPUTE_API_VERSION
        return cls(api_version=DiskRevision(value))
