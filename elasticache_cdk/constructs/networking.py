"""Networking construct for the VPC hosting the cache cluster"""
from aws_cdk import aws_ec2 as ec2
from constructs import Construct

from elasticache_cdk.config import VpcConfig


class CacheNetworkConstruct(Construct):
    """
    Construct for creating the VPC the cache cluster runs in.

    Public subnets carry the NAT gateway; cache nodes go into the
    private-with-egress subnets, one per availability zone.
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        config: VpcConfig
    ) -> None:
        """
        Initialize the networking construct.

        Args:
            scope: Parent construct
            construct_id: Unique identifier for this construct
            config: VPC configuration settings
        """
        super().__init__(scope, construct_id)

        public_subnets = ec2.SubnetConfiguration(
            name=config.public_subnet_name,
            subnet_type=ec2.SubnetType.PUBLIC,
            cidr_mask=config.public_subnet_cidr_mask
        )
        cache_subnets = ec2.SubnetConfiguration(
            name=config.private_subnet_name,
            subnet_type=ec2.SubnetType.PRIVATE_WITH_EGRESS,
            cidr_mask=config.private_subnet_cidr_mask
        )

        self._vpc = ec2.Vpc(
            self, "Vpc",
            vpc_name=config.vpc_name,
            max_azs=config.max_azs,
            nat_gateways=config.nat_gateways,
            subnet_configuration=[public_subnets, cache_subnets]
        )

    @property
    def vpc(self) -> ec2.Vpc:
        """Get the VPC resource"""
        return self._vpc

    @property
    def cache_subnets(self) -> ec2.SelectedSubnets:
        """Get the private subnets cache nodes are placed into"""
        return self._vpc.select_subnets(subnet_type=ec2.SubnetType.PRIVATE_WITH_EGRESS)
