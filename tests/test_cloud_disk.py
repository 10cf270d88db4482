"""Tests for the revision-independent CloudDisk view."""

import pytest

from models.cloud_disk import CloudDisk, DiskRevision, LocationType
from models.disk import CustomerEncryptionKey, DiskAlpha, DiskBeta, DiskV1

DISK_TYPE_URL = "projects/my-project/zones/us-central1-a/diskTypes/pd-standard"


def _fields():
    return dict(
        name="pvc-1234",
        kind="compute#disk",
        status="READY",
        self_link="https://www.googleapis.com/compute/v1/projects/my-project/zones/us-central1-a/disks/pvc-1234",
        size_gb=100,
        zone="us-central1-a",
        region="",
        users=["projects/my-project/zones/us-central1-a/instances/node-1"],
        type=DISK_TYPE_URL,
        source_snapshot_id="1111",
        source_disk_id="2222",
        source_image_id="3333",
    )


def _views():
    return [
        CloudDisk.from_v1(DiskV1(**_fields())),
        CloudDisk.from_beta(DiskBeta(**_fields())),
        CloudDisk.from_alpha(DiskAlpha(**_fields())),
    ]


@pytest.mark.parametrize("disk", _views(), ids=["v1", "beta", "alpha"])
def test_passthrough_accessors(disk):
    expected = _fields()
    assert disk.name == expected["name"]
    assert disk.kind == expected["kind"]
    assert disk.status == expected["status"]
    assert disk.self_link == expected["self_link"]
    assert disk.size_gb == expected["size_gb"]
    assert disk.zone == expected["zone"]
    assert disk.region == ""
    assert disk.users == expected["users"]
    assert disk.snapshot_id == "1111"
    assert disk.source_disk_id == "2222"
    assert disk.image_id == "3333"
    assert disk.pd_type == "pd-standard"
    assert disk.location_type == LocationType.ZONAL


def test_revision_reports_wrapped_record():
    v1, beta, alpha = _views()
    assert v1.revision == DiskRevision.V1
    assert beta.revision == DiskRevision.BETA
    assert alpha.revision == DiskRevision.ALPHA
    assert CloudDisk().revision is None


@pytest.mark.parametrize(
    "type_url,expected",
    [
        ("projects/p/zones/z/diskTypes/pd-ssd", "pd-ssd"),
        ("https://www.googleapis.com/compute/beta/projects/p/regions/r/diskTypes/pd-balanced", "pd-balanced"),
        ("projects/p/zones/z/diskTypes/hyperdisk-balanced ", "hyperdisk-balanced"),
        ("pd-extreme", "pd-extreme"),
        ("", ""),
    ],
)
def test_pd_type_uses_last_path_segment(type_url, expected):
    for factory, record in (
        (CloudDisk.from_v1, DiskV1),
        (CloudDisk.from_beta, DiskBeta),
        (CloudDisk.from_alpha, DiskAlpha),
    ):
        assert factory(record(type=type_url)).pd_type == expected


def test_pd_type_is_not_validated():
    disk = CloudDisk.from_v1(DiskV1(type="projects/p/zones/z/diskTypes/not-a-real-type"))
    assert disk.pd_type == "not-a-real-type"


@pytest.mark.parametrize(
    "zone,region,expected",
    [
        ("us-central1-a", "", LocationType.ZONAL),
        ("us-central1-a", "us-central1", LocationType.ZONAL),
        ("", "us-central1", LocationType.REGIONAL),
        ("", "", LocationType.GLOBAL),
    ],
)
def test_location_type(zone, region, expected):
    assert CloudDisk.from_beta(DiskBeta(zone=zone, region=region)).location_type == expected


def test_empty_view_defaults():
    disk = CloudDisk()
    assert disk.location_type == LocationType.GLOBAL
    assert disk.users == []
    assert disk.name == ""
    assert disk.kind == ""
    assert disk.status == "Unknown"
    assert disk.pd_type == ""
    assert disk.self_link == ""
    assert disk.size_gb == -1
    assert disk.zone == ""
    assert disk.region == ""
    assert disk.snapshot_id == ""
    assert disk.source_disk_id == ""
    assert disk.image_id == ""
    assert disk.kms_key_name == ""
    assert disk.multi_writer is False
    assert disk.enable_confidential_compute is False
    assert disk.enable_storage_pools is False


def test_empty_status_is_not_unknown():
    assert CloudDisk.from_v1(DiskV1(status="")).status == ""


def test_zero_size_is_not_unknown():
    assert CloudDisk.from_v1(DiskV1(size_gb=0)).size_gb == 0


def test_kms_key_name():
    key = CustomerEncryptionKey(kms_key_name="projects/p/locations/l/keyRings/r/cryptoKeys/k")
    assert CloudDisk.from_v1(DiskV1(disk_encryption_key=key)).kms_key_name == key.kms_key_name
    assert CloudDisk.from_alpha(DiskAlpha(disk_encryption_key=key)).kms_key_name == key.kms_key_name
    assert CloudDisk.from_beta(DiskBeta()).kms_key_name == ""


def test_v1_never_reports_newer_flags():
    disk = CloudDisk.from_v1(DiskV1(**_fields()))
    assert disk.multi_writer is False
    assert disk.enable_confidential_compute is False
    assert disk.enable_storage_pools is False


def test_beta_flags_pass_through():
    disk = CloudDisk.from_beta(DiskBeta(multi_writer=True, enable_confidential_compute=True))
    assert disk.multi_writer is True
    assert disk.enable_confidential_compute is True
    assert disk.enable_storage_pools is False


def test_alpha_flags_pass_through():
    disk = CloudDisk.from_alpha(DiskAlpha(multi_writer=True, enable_confidential_compute=True))
    assert disk.multi_writer is True
    assert disk.enable_confidential_compute is True


@pytest.mark.parametrize(
    "storage_pool,expected",
    [
        ("projects/my-project/zone/us-central1-a/storagePools/sp1", True),
        ("", False),
    ],
)
def test_alpha_storage_pools(storage_pool, expected):
    assert CloudDisk.from_alpha(DiskAlpha(storage_pool=storage_pool)).enable_storage_pools is expected


def test_record_types_only_declare_their_revision_fields():
    assert not hasattr(DiskV1(), "multi_writer")
    assert not hasattr(DiskV1(), "enable_confidential_compute")
    assert not hasattr(DiskBeta(), "storage_pool")
    assert not isinstance(DiskAlpha(), DiskBeta)


def test_view_is_immutable():
    disk = CloudDisk.from_v1(DiskV1(size_gb=10))
    with pytest.raises(AttributeError):
        disk.disk = DiskV1(size_gb=20)


def test_fixture_can_resize_wrapped_record():
    disk = CloudDisk.from_beta(DiskBeta(size_gb=10))
    disk.disk.size_gb = 20
    assert disk.size_gb == 20


def test_users_cannot_modify_view():
    disk = CloudDisk.from_alpha(DiskAlpha(users=["node-1"]))
    disk.users.append("node-2")
    assert disk.users == ["node-1"]
