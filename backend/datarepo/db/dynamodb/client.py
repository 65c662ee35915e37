from __future__ import annotations

from functools import lru_cache

import boto3
from botocore.config import Config


@lru_cache(maxsize=1)
def botocore_config() -> Config:
    # botocore's own retries stay enabled; the repository layer does not retry.
    return Config(
        retries={"max_attempts": 10, "mode": "adaptive"},
        connect_timeout=2,
        read_timeout=10,
    )


def dynamodb_resource(*, region_name: str | None = None, endpoint_url: str | None = None):
    return boto3.resource(
        "dynamodb",
        region_name=region_name,
        endpoint_url=endpoint_url,
        config=botocore_config(),
    )
