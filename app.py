#!/usr/bin/env python3
import aws_cdk as cdk

from elasticache_cdk.elasticache_cdk_stack import ElastiCacheStack


app = cdk.App()
ElastiCacheStack(app, "ElastiCacheStack")

app.synth()
