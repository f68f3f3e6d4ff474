"""Post-creation overlays applied to the cache cluster resource"""
from typing import Any, Callable, Optional, Tuple

from aws_cdk import aws_elasticache as elasticache

from elasticache_cdk.config import BackupConfig, CacheClusterConfig, EncryptionConfig


def apply_encryption(
    cluster: elasticache.CfnCacheCluster,
    encryption: Optional[EncryptionConfig]
) -> None:
    """
    Write encryption flags onto the cluster.

    CfnCacheCluster only models transit encryption, so at-rest encryption and
    the KMS key are written as raw property overrides. CloudFormation decides
    whether the combination is valid for the engine.

    Args:
        cluster: Cache cluster resource
        encryption: Encryption settings, or None to leave encryption unset
    """
    if encryption is None:
        return

    cluster.transit_encryption_enabled = encryption.in_transit
    cluster.add_property_override("AtRestEncryptionEnabled", encryption.at_rest)
    if encryption.kms_key is not None:
        cluster.add_property_override("KmsKeyId", encryption.kms_key.key_id)


def apply_backups(
    cluster: elasticache.CfnCacheCluster,
    backups: Optional[BackupConfig]
) -> None:
    """
    Write snapshot retention and window onto the cluster.

    Args:
        cluster: Cache cluster resource
        backups: Backup settings, or None to keep the base values
    """
    if backups is None:
        return

    cluster.snapshot_retention_limit = backups.retention.to_days()
    if backups.preferred_window:
        cluster.snapshot_window = backups.preferred_window


Overlay = Callable[[elasticache.CfnCacheCluster, Any], None]

# Applied first to last; each overlay overwrites values from the base properties.
OVERLAY_ORDER: Tuple[Tuple[str, Overlay], ...] = (
    ("encryption", apply_encryption),
    ("backups", apply_backups),
)


def apply_overlays(
    cluster: elasticache.CfnCacheCluster,
    config: CacheClusterConfig
) -> None:
    """Apply every overlay in OVERLAY_ORDER using the matching config field"""
    for field_name, overlay in OVERLAY_ORDER:
        overlay(cluster, getattr(config, field_name))
