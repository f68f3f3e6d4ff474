from typing import Optional

from aws_cdk import (
    Stack,
    CfnOutput
)
from constructs import Construct

from elasticache_cdk.config import CacheEngine, ElastiCacheStackConfig
from elasticache_cdk.constructs.cache_cluster import CacheClusterConstruct
from elasticache_cdk.constructs.networking import CacheNetworkConstruct


class ElastiCacheStack(Stack):

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        config: Optional[ElastiCacheStackConfig] = None,
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        config = config or ElastiCacheStackConfig.default()

        network = CacheNetworkConstruct(self, "Network", config.vpc)

        self._cache = CacheClusterConstruct(
            self, "CacheCluster",
            vpc=network.vpc,
            config=config.cluster
        )

        CfnOutput(
            self, "CacheClusterPort",
            value=str(self._cache.port),
            description="Port the cache cluster accepts connections on"
        )

        # Redis exposes a node endpoint, Memcached a configuration endpoint
        if config.cluster.engine == CacheEngine.REDIS:
            CfnOutput(
                self, "RedisEndpoint",
                value=self._cache.cluster.attr_redis_endpoint_address,
                description="Address of the Redis endpoint"
            )
        else:
            CfnOutput(
                self, "ConfigurationEndpoint",
                value=self._cache.cluster.attr_configuration_endpoint_address,
                description="Address of the Memcached configuration endpoint"
            )

    @property
    def cache(self) -> CacheClusterConstruct:
        return self._cache
