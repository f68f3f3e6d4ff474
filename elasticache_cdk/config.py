"""Configuration management for ElastiCache CDK infrastructure"""
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from aws_cdk import (
    aws_ec2 as ec2,
    aws_elasticache as elasticache,
    aws_kms as kms,
    Duration,
    RemovalPolicy
)


class CacheEngine(Enum):
    """Cache engines supported by the cluster construct"""
    REDIS = "redis"
    MEMCACHED = "memcached"


class CacheClusterStatus(Enum):
    """Lifecycle states reported by ElastiCache for a cache cluster"""
    AVAILABLE = "available"
    CREATING = "creating"
    DELETED = "deleted"
    DELETING = "deleting"
    INCOMPATIBLE_NETWORK = "incompatible-network"
    MODIFYING = "modifying"
    REBOOTING_CLUSTER_NODES = "rebooting-cluster-nodes"
    RESTORE_FAILED = "restore-failed"
    SNAPSHOTTING = "snapshotting"


DEFAULT_PORTS: Dict[CacheEngine, int] = {
    CacheEngine.REDIS: 6379,
    CacheEngine.MEMCACHED: 11211,
}


@dataclass
class VpcConfig:
    """VPC and networking configuration for the cache cluster"""
    max_azs: int = 2
    nat_gateways: int = 1
    public_subnet_cidr_mask: int = 24
    private_subnet_cidr_mask: int = 24
    public_subnet_name: str = "Public"
    private_subnet_name: str = "Cache"
    vpc_name: str = "elasticache-vpc"


@dataclass(frozen=True)
class EncryptionConfig:
    """Encryption settings written onto the cache cluster after creation"""
    at_rest: bool
    in_transit: bool
    kms_key: Optional[kms.IKey] = None


@dataclass(frozen=True)
class BackupConfig:
    """Automatic snapshot settings; retention is rounded to whole days"""
    retention: Duration
    preferred_window: Optional[str] = None


@dataclass(frozen=True)
class CacheClusterConfig:
    """
    Cache cluster configuration.

    Optional fields left as None are not rendered, so CloudFormation applies
    its own defaults for them.
    """
    engine: CacheEngine
    cache_node_type: str
    num_cache_nodes: int
    cluster_name: Optional[str] = None
    engine_version: Optional[str] = None
    port: Optional[int] = None
    subnet_group: Optional[elasticache.CfnSubnetGroup] = None
    security_groups: Optional[List[ec2.ISecurityGroup]] = None
    cache_parameter_group_name: Optional[str] = None
    auto_minor_version_upgrade: Optional[bool] = None
    az_mode: Optional[str] = None
    preferred_availability_zone: Optional[str] = None
    preferred_availability_zones: Optional[List[str]] = None
    preferred_maintenance_window: Optional[str] = None
    notification_topic_arn: Optional[str] = None
    snapshot_arns: Optional[List[str]] = None
    snapshot_name: Optional[str] = None
    snapshot_retention_limit: Optional[int] = None
    snapshot_window: Optional[str] = None
    tags: Mapping[str, str] = field(default_factory=dict)
    encryption: Optional[EncryptionConfig] = None
    backups: Optional[BackupConfig] = None
    removal_policy: Optional[RemovalPolicy] = None

    def __post_init__(self):
        object.__setattr__(self, "tags", MappingProxyType(dict(self.tags)))

    @property
    def resolved_port(self) -> int:
        """Explicit port if set, otherwise the engine's default port"""
        if self.port is not None:
            return self.port
        return DEFAULT_PORTS[self.engine]


@dataclass
class ElastiCacheStackConfig:
    """Main configuration for the ElastiCache stack"""
    vpc: VpcConfig
    cluster: CacheClusterConfig

    @classmethod
    def default(cls) -> "ElastiCacheStackConfig":
        """Create default configuration: a single-node Redis cluster in a new VPC"""
        return cls(
            vpc=VpcConfig(),
            cluster=CacheClusterConfig(
                engine=CacheEngine.REDIS,
                cache_node_type="cache.t3.micro",
                num_cache_nodes=1,
                tags={
                    "Project": "elasticache-cdk"
                }
            )
        )
