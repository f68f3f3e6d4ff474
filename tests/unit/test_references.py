"""Tests for security group and subnet group resolution"""
from unittest.mock import MagicMock

import aws_cdk.assertions as assertions

from elasticache_cdk.constructs.references import (
    ResourceToCreate,
    SuppliedResource,
    SECURITY_GROUP_DESCRIPTION,
    SUBNET_GROUP_DESCRIPTION,
    resolve_security_group,
    resolve_subnet_group,
    security_group_source,
    subnet_group_source
)
from tests.test_constants import ResourceType
from tests.test_helpers import assert_resource_count


class TestSources:
    """Test classification of supplied versus created resources"""

    def test_first_security_group_is_supplied(self):
        """Test that the first security group is picked and the rest ignored"""
        first, second = MagicMock(), MagicMock()
        assert security_group_source([first, second]) == SuppliedResource(first)

    def test_missing_security_groups_are_created(self):
        """Test that None and empty lists both lead to creation"""
        expected = ResourceToCreate(SECURITY_GROUP_DESCRIPTION)
        assert security_group_source(None) == expected
        assert security_group_source([]) == expected

    def test_subnet_group_sources(self):
        """Test that a supplied subnet group is reused and a missing one created"""
        existing = MagicMock()
        assert subnet_group_source(existing) == SuppliedResource(existing)
        assert subnet_group_source(None) == ResourceToCreate(SUBNET_GROUP_DESCRIPTION)


class TestResolution:
    """Test that resolution creates resources only when asked to"""

    def test_supplied_resources_are_borrowed(self, test_stack):
        """Test that supplied resources are returned unowned and nothing is created"""
        stack, vpc = test_stack
        security_group, subnet_group = MagicMock(), MagicMock()

        sg_handle = resolve_security_group(stack, vpc, SuppliedResource(security_group))
        subnet_handle = resolve_subnet_group(stack, vpc, SuppliedResource(subnet_group))

        assert sg_handle.resource is security_group and not sg_handle.owned
        assert subnet_handle.resource is subnet_group and not subnet_handle.owned
        template = assertions.Template.from_stack(stack)
        assert_resource_count(template, ResourceType.SECURITY_GROUP, 0)
        assert_resource_count(template, ResourceType.CACHE_SUBNET_GROUP, 0)

    def test_created_resources_are_owned(self, test_stack):
        """Test that created resources are owned and rendered"""
        stack, vpc = test_stack

        sg_handle = resolve_security_group(stack, vpc, ResourceToCreate("cache sg"))
        subnet_handle = resolve_subnet_group(stack, vpc, ResourceToCreate("cache subnets"))

        assert sg_handle.owned
        assert subnet_handle.owned
        template = assertions.Template.from_stack(stack)
        template.has_resource_properties(ResourceType.SECURITY_GROUP, {"GroupDescription": "cache sg"})
        template.has_resource_properties(ResourceType.CACHE_SUBNET_GROUP, {"Description": "cache subnets"})
