"""Pytest configuration and shared fixtures for CDK tests"""
import pytest
import aws_cdk as core
import aws_cdk.assertions as assertions
from aws_cdk import aws_ec2 as ec2
from elasticache_cdk.elasticache_cdk_stack import ElastiCacheStack


@pytest.fixture(scope="module")
def cdk_app():
    """Create a CDK app for testing (module-scoped for performance)"""
    return core.App()


@pytest.fixture(scope="module")
def cdk_stack(cdk_app):
    """Create the ElastiCacheStack with default configuration (module-scoped for performance)"""
    return ElastiCacheStack(cdk_app, "test-elasticache-cdk")


@pytest.fixture(scope="module")
def template(cdk_stack):
    """Generate CloudFormation template from the stack (module-scoped for performance)"""
    return assertions.Template.from_stack(cdk_stack)


@pytest.fixture
def test_stack():
    """Create an empty stack with a VPC for exercising constructs in isolation"""
    app = core.App()
    stack = core.Stack(app, "TestStack")
    vpc = ec2.Vpc(stack, "Vpc", max_azs=2)
    return stack, vpc
