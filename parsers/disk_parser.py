"""Parser for Compute API Disk payloads.

Turns the JSON representation of a ``Disk`` (as returned by ``disks.get``,
``disks.list``, ``disks.aggregatedList`` or ``gcloud compute disks list
--format=json``) into :class:`CloudDisk` views. Keys are camelCase as on the
wire; ``sizeGb`` is an int64 and therefore arrives as a JSON string.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from app.config import AppConfig
from models.cloud_disk import CloudDisk, DiskRevision
from models.disk import CustomerEncryptionKey, DiskAlpha, DiskBeta, DiskV1

logger = logging.getLogger(__name__)

# Keys that only exist on newer revisions, mapped to record field names
_BETA_FIELDS: dict[str, str] = {
    "multiWriter": "multi_writer",
    "enableConfidentialCompute": "enable_confidential_compute",
}
_ALPHA_FIELDS: dict[str, str] = {
    **_BETA_FIELDS,
    "storagePool": "storage_pool",
}
_REVISION_FIELDS: dict[DiskRevision, dict[str, str]] = {
    DiskRevision.V1: {},
    DiskRevision.BETA: _BETA_FIELDS,
    DiskRevision.ALPHA: _ALPHA_FIELDS,
}


class DiskParseError(Exception):
    """Raised when a Disk payload cannot be parsed."""


def _resolve_revision(revision: Union[DiskRevision, str, None]) -> DiskRevision:
    """Return the revision to parse with, falling back to configuration."""
    if revision is None:
        return AppConfig.from_env().api_version
    if isinstance(revision, DiskRevision):
        return revision
    try:
        return DiskRevision(revision.strip().lower())
    except ValueError as exc:
        raise DiskParseError(
            f"Unknown Compute API revision '{revision}'. "
            f"Expected one of: {', '.join(r.value for r in DiskRevision)}."
        ) from exc


def _parse_size_gb(raw: Any) -> int:
    if raw is None or raw == "":
        return 0
    if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
        raise DiskParseError(f"Invalid sizeGb value: {raw!r}")
    try:
        return int(raw)
    except (TypeError, ValueError, OverflowError) as exc:
        raise DiskParseError(f"Invalid sizeGb value: {raw!r}") from exc


def _get_str(raw: dict[str, Any], key: str) -> str:
    """Read a string field; absent and null both read as empty."""
    value = raw.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DiskParseError(f"Invalid {key} value: {value!r}")
    return value


def _get_bool(raw: dict[str, Any], key: str) -> bool:
    value = raw.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise DiskParseError(f"Invalid {key} value: {value!r}")
    return value


def _get_str_list(raw: dict[str, Any], key: str) -> list[str]:
    value = raw.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise DiskParseError(f"Invalid {key} value: {value!r}")
    return list(value)


def _parse_encryption_key(raw: Any) -> Optional[CustomerEncryptionKey]:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise DiskParseError(f"Invalid diskEncryptionKey value: {raw!r}")
    return CustomerEncryptionKey(kms_key_name=_get_str(raw, "kmsKeyName"))


def parse_disk(
    raw: dict[str, Any],
    revision: Union[DiskRevision, str, None] = None,
) -> CloudDisk:
    """Parse a single Disk payload into a CloudDisk.

    Args:
        raw: Decoded JSON object describing one disk.
        revision: API revision that produced the payload. Defaults to the
            revision configured through ``GCE_COMPUTE_API_VERSION``.

    Returns:
        A CloudDisk wrapping the record for that revision.

    Raises:
        DiskParseError: If the payload or revision is invalid.
    """
    if not isinstance(raw, dict):
        raise DiskParseError(
            f"Expected a Disk object, got {type(raw).__name__}."
        )
    resolved = _resolve_revision(revision)

    common: dict[str, Any] = dict(
        name=_get_str(raw, "name"),
        kind=_get_str(raw, "kind"),
        status=_get_str(raw, "status"),
        self_link=_get_str(raw, "selfLink"),
        size_gb=_parse_size_gb(raw.get("sizeGb")),
        zone=_get_str(raw, "zone"),
        region=_get_str(raw, "region"),
        users=_get_str_list(raw, "users"),
        type=_get_str(raw, "type"),
        disk_encryption_key=_parse_encryption_key(raw.get("diskEncryptionKey")),
        source_snapshot_id=_get_str(raw, "sourceSnapshotId"),
        source_disk_id=_get_str(raw, "sourceDiskId"),
        source_image_id=_get_str(raw, "sourceImageId"),
    )

    supported = _REVISION_FIELDS[resolved]
    for key in _ALPHA_FIELDS:
        if key not in raw:
            continue
        if key not in supported:
            logger.debug(
                "Dropping '%s' from disk %s: not defined in the %s API",
                key, common["name"], resolved,
            )
        elif key == "storagePool":
            common[supported[key]] = _get_str(raw, key)
        else:
            common[supported[key]] = _get_bool(raw, key)

    if resolved == DiskRevision.ALPHA:
        return CloudDisk.from_alpha(DiskAlpha(**common))
    if resolved == DiskRevision.BETA:
        return CloudDisk.from_beta(DiskBeta(**common))
    return CloudDisk.from_v1(DiskV1(**common))


def _iter_disk_payloads(raw: Any) -> list[dict[str, Any]]:
    """Flatten list, disks.list and aggregatedList shapes into Disk objects."""
    if isinstance(raw, list):
        return raw
    if not isinstance(raw, dict):
        raise DiskParseError(
            f"Expected a list of disks or a list response, got {type(raw).__name__}."
        )
    items = raw.get("items")
    if items is None:
        return []
    if isinstance(items, list):
        return items
    if isinstance(items, dict):
        # aggregatedList: {"zones/us-central1-a": {"disks": [...]}, ...}
        disks: list[dict[str, Any]] = []
        for scope_name, scope in items.items():
            if not isinstance(scope, dict):
                raise DiskParseError(
                    f"Unexpected value of type {type(scope).__name__} for scope '{scope_name}'."
                )
            scoped = scope.get("disks")
            if scoped is None:
                continue
            if not isinstance(scoped, list):
                raise DiskParseError(
                    f"Unexpected 'disks' value of type {type(scoped).__name__} "
                    f"for scope '{scope_name}'."
                )
            disks.extend(scoped)
        return disks
    raise DiskParseError(f"Unexpected 'items' value of type {type(items).__name__}.")


def parse_disk_list(
    raw: Any,
    revision: Union[DiskRevision, str, None] = None,
) -> list[CloudDisk]:
    """Parse a collection of Disk payloads.

    Args:
        raw: A JSON list of disks, a ``disks.list`` response or a
            ``disks.aggregatedList`` response.
        revision: API revision that produced the payloads.

    Returns:
        One CloudDisk per disk, in payload order.

    Raises:
        DiskParseError: If the collection or any disk in it is invalid.
    """
    resolved = _resolve_revision(revision)
    disks = [parse_disk(item, resolved) for item in _iter_disk_payloads(raw)]
    logger.info("Parsed %d disks from %s API payload", len(disks), resolved)
    return disks


def parse_file(
    source: Union[str, Path],
    revision: Union[DiskRevision, str, None] = None,
) -> list[CloudDisk]:
    """Parse a JSON file holding one or more Disk payloads.

    Raises:
        DiskParseError: If the file cannot be read or decoded.
    """
    path = Path(source)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise DiskParseError(f"Failed to read disk file '{path}': {exc}") from exc

    if isinstance(raw, dict) and not _is_list_response(raw):
        return [parse_disk(raw, revision)]
    return parse_disk_list(raw, revision)


def _is_list_response(raw: dict[str, Any]) -> bool:
    """True for list responses, which omit 'items' when nothing matched."""
    kind = raw.get("kind")
    if isinstance(kind, str) and kind.endswith("List"):
        return True
    return "items" in raw
