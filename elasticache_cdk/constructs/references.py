"""Reference-or-create resolution for the cluster's security group and subnet group"""
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from aws_cdk import (
    aws_ec2 as ec2,
    aws_elasticache as elasticache
)
from constructs import Construct

SECURITY_GROUP_DESCRIPTION = "Security group for ElastiCache cluster"
SUBNET_GROUP_DESCRIPTION = "Subnet group for ElastiCache cluster"


@dataclass(frozen=True)
class SuppliedResource:
    """A resource the caller already owns; it is used as-is"""
    resource: Any


@dataclass(frozen=True)
class ResourceToCreate:
    """Parameters for a resource the construct creates and owns"""
    description: str


ResourceSource = Union[SuppliedResource, ResourceToCreate]


@dataclass(frozen=True)
class ResourceHandle:
    """A resolved resource and whether the construct created it"""
    resource: Any
    owned: bool


def security_group_source(
    security_groups: Optional[Sequence[ec2.ISecurityGroup]]
) -> ResourceSource:
    """Only the first supplied security group is used."""
    if security_groups:
        return SuppliedResource(security_groups[0])
    return ResourceToCreate(SECURITY_GROUP_DESCRIPTION)


def subnet_group_source(
    subnet_group: Optional[elasticache.CfnSubnetGroup]
) -> ResourceSource:
    if subnet_group is not None:
        return SuppliedResource(subnet_group)
    return ResourceToCreate(SUBNET_GROUP_DESCRIPTION)


def resolve_security_group(
    scope: Construct,
    vpc: ec2.IVpc,
    source: ResourceSource
) -> ResourceHandle:
    """
    Resolve the working security group.

    A created group allows all outbound traffic and has no inbound rules;
    inbound access is granted through the cluster's connections.

    Args:
        scope: Construct that owns a created group
        vpc: VPC the created group belongs to
        source: Supplied group or creation parameters

    Returns:
        Handle to the security group
    """
    if isinstance(source, SuppliedResource):
        return ResourceHandle(resource=source.resource, owned=False)

    security_group = ec2.SecurityGroup(
        scope, "SecurityGroup",
        vpc=vpc,
        description=source.description,
        allow_all_outbound=True
    )
    return ResourceHandle(resource=security_group, owned=True)


def resolve_subnet_group(
    scope: Construct,
    vpc: ec2.IVpc,
    source: ResourceSource
) -> ResourceHandle:
    """
    Resolve the subnet group the cluster is placed into.

    A created group spans every private-with-egress subnet of the VPC. Errors
    from subnet selection propagate to the caller.

    Args:
        scope: Construct that owns a created group
        vpc: VPC to select subnets from
        source: Supplied group or creation parameters

    Returns:
        Handle to the subnet group
    """
    if isinstance(source, SuppliedResource):
        return ResourceHandle(resource=source.resource, owned=False)

    selection = vpc.select_subnets(subnet_type=ec2.SubnetType.PRIVATE_WITH_EGRESS)
    subnet_group = elasticache.CfnSubnetGroup(
        scope, "SubnetGroup",
        description=source.description,
        subnet_ids=selection.subnet_ids
    )
    return ResourceHandle(resource=subnet_group, owned=True)
