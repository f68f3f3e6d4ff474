"""Cluster attributes that are only known once the stack is deployed"""
from dataclasses import dataclass
from typing import Optional, Union

from aws_cdk import Token

from elasticache_cdk.config import CacheClusterStatus


@dataclass(frozen=True)
class Unresolved:
    """A symbolic reference that CloudFormation resolves at deploy time"""
    token: str


@dataclass(frozen=True)
class Resolved:
    """A concrete attribute value"""
    value: str


AttributeValue = Union[Unresolved, Resolved]


def attribute_value(value: str) -> AttributeValue:
    """Wrap a raw attribute string according to whether it is still a token"""
    if Token.is_unresolved(value):
        return Unresolved(token=value)
    return Resolved(value=value)


def parse_status(status: AttributeValue) -> Optional[CacheClusterStatus]:
    """
    Interpret a cluster status attribute.

    Args:
        status: Status attribute of a cache cluster

    Returns:
        The status, or None while it is still unresolved

    Raises:
        ValueError: If a resolved value is not a known status
    """
    if isinstance(status, Unresolved):
        return None
    return CacheClusterStatus(status.value)
