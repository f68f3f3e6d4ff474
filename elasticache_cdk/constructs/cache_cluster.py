"""Cache cluster construct for ElastiCache and its supporting network resources"""
from typing import Any, Dict, Optional

import jsii
from aws_cdk import (
    aws_ec2 as ec2,
    aws_elasticache as elasticache,
    Annotations,
    Tags,
    Token
)
from constructs import Construct

from elasticache_cdk.config import CacheClusterConfig
from elasticache_cdk.constructs.attributes import AttributeValue, attribute_value
from elasticache_cdk.constructs.overlays import apply_overlays
from elasticache_cdk.constructs.references import (
    resolve_security_group,
    resolve_subnet_group,
    security_group_source,
    subnet_group_source
)


def build_cluster_props(
    config: CacheClusterConfig,
    port: int,
    subnet_group_name: str,
    security_group_id: str
) -> Dict[str, Any]:
    """
    Map the configuration onto CfnCacheCluster keyword arguments.

    Args:
        config: Cache cluster configuration
        port: Resolved port
        subnet_group_name: Reference to the resolved subnet group
        security_group_id: Identifier of the resolved security group

    Returns:
        Keyword arguments for CfnCacheCluster
    """
    return {
        "cluster_name": config.cluster_name,
        "engine": config.engine.value,
        "engine_version": config.engine_version,
        "cache_node_type": config.cache_node_type,
        "num_cache_nodes": config.num_cache_nodes,
        "port": port,
        "cache_subnet_group_name": subnet_group_name,
        "vpc_security_group_ids": [security_group_id],
        "cache_parameter_group_name": config.cache_parameter_group_name,
        "auto_minor_version_upgrade": config.auto_minor_version_upgrade,
        "az_mode": config.az_mode,
        "preferred_availability_zone": config.preferred_availability_zone,
        "preferred_availability_zones": config.preferred_availability_zones,
        "preferred_maintenance_window": config.preferred_maintenance_window,
        "notification_topic_arn": config.notification_topic_arn,
        "snapshot_arns": config.snapshot_arns,
        "snapshot_name": config.snapshot_name,
        "snapshot_retention_limit": config.snapshot_retention_limit,
        "snapshot_window": config.snapshot_window,
    }


@jsii.implements(ec2.IConnectable)
class CacheClusterConstruct(Construct):
    """
    Construct for creating an ElastiCache cache cluster.

    Creates the cache cluster together with a security group and a subnet group
    built from the VPC's private subnets, unless existing ones are supplied.
    Encryption, backup and tag settings are layered on after the cluster is
    created and always win over the base properties.
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        vpc: ec2.IVpc,
        config: CacheClusterConfig
    ) -> None:
        """
        Initialize the cache cluster construct.

        Args:
            scope: Parent construct
            construct_id: Unique identifier for this construct
            vpc: VPC where the cache cluster will be deployed
            config: Cache cluster configuration settings
        """
        super().__init__(scope, construct_id)

        self._port = config.resolved_port

        if config.security_groups and len(config.security_groups) > 1:
            Annotations.of(self).add_warning_v2(
                "elasticache-cdk:extraSecurityGroupsIgnored",
                f"{len(config.security_groups)} security groups were supplied; "
                "only the first one is attached to the cache cluster"
            )

        self._security_group = resolve_security_group(
            self, vpc, security_group_source(config.security_groups)
        )
        self._subnet_group = resolve_subnet_group(
            self, vpc, subnet_group_source(config.subnet_group)
        )

        self._cluster = elasticache.CfnCacheCluster(
            self, "Resource",
            **build_cluster_props(
                config,
                port=self._port,
                subnet_group_name=self.subnet_group.ref,
                security_group_id=self.security_group.security_group_id
            )
        )

        apply_overlays(self._cluster, config)

        for key, value in config.tags.items():
            Tags.of(self).add(key, value)

        if config.removal_policy is not None:
            self._cluster.apply_removal_policy(config.removal_policy)

        self._connections = ec2.Connections(
            security_groups=[self.security_group],
            default_port=ec2.Port.tcp(self._port)
        )

    def allow_connections_from(
        self,
        other: ec2.IConnectable,
        port: Optional[ec2.Port] = None
    ) -> None:
        """
        Allow another connectable to reach the cache cluster.

        Args:
            other: Security group, service or construct that needs access
            port: Port to open; defaults to the cluster port
        """
        if port is None:
            port = self.connections.default_port
        other.connections.allow_to(self.connections, port)

    def add_read_replica(
        self,
        replica_id: str,
        num_cache_nodes: Optional[int] = None,
        region: Optional[str] = None
    ) -> None:
        """
        Read replicas are not supported for standalone cache clusters.

        Raises:
            NotImplementedError: Always; no resources are created
        """
        raise NotImplementedError(
            f"Cannot add read replica '{replica_id}': read replicas require an "
            "ElastiCache replication group, which this construct does not manage"
        )

    @property
    def cluster(self) -> elasticache.CfnCacheCluster:
        """Get the cache cluster resource"""
        return self._cluster

    @property
    def security_group(self) -> ec2.ISecurityGroup:
        """Get the security group attached to the cache cluster"""
        return self._security_group.resource

    @property
    def owns_security_group(self) -> bool:
        """Whether the security group was created by this construct"""
        return self._security_group.owned

    @property
    def subnet_group(self) -> elasticache.CfnSubnetGroup:
        """Get the subnet group the cache cluster is placed into"""
        return self._subnet_group.resource

    @property
    def owns_subnet_group(self) -> bool:
        """Whether the subnet group was created by this construct"""
        return self._subnet_group.owned

    @property
    def port(self) -> int:
        """Get the port the cache cluster accepts connections on"""
        return self._port

    @property
    def connections(self) -> ec2.Connections:
        """Get the network connections of the cache cluster"""
        return self._connections

    @property
    def cluster_status(self) -> AttributeValue:
        """Get the cache cluster status"""
        return attribute_value(Token.as_string(self._cluster.get_att("CacheClusterStatus")))

    @property
    def configuration_endpoint(self) -> AttributeValue:
        """Get the configuration endpoint address (Memcached)"""
        return attribute_value(self._cluster.attr_configuration_endpoint_address)

    @property
    def redis_endpoint(self) -> AttributeValue:
        """Get the Redis endpoint address"""
        return attribute_value(self._cluster.attr_redis_endpoint_address)

    @property
    def redis_port(self) -> AttributeValue:
        """Get the Redis endpoint port"""
        return attribute_value(self._cluster.attr_redis_endpoint_port)
