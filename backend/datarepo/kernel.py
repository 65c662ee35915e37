from __future__ import annotations

from .db.dynamodb.client import dynamodb_resource
from .db.dynamodb.store import DynamoStoreClient
from .observability.logging import configure_logging, get_logger
from .persistence.repository import DynamoDbDataRepository
from .settings import Settings, get_settings


def build_store(settings: Settings, *, resource=None) -> DynamoStoreClient:
    if resource is None:
        resource = dynamodb_resource(
            region_name=settings.aws_region,
            endpoint_url=settings.ddb_endpoint_url,
        )
    # The single GSI shares the gsi1pk/gsi1sk attributes whatever it is called.
    return DynamoStoreClient(resource=resource, indexes={settings.ddb_gsi1_name: ("gsi1pk", "gsi1sk")})


def build_repository(settings: Settings | None = None, *, resource=None) -> DynamoDbDataRepository:
    """Wire logging, the boto3 resource, the store client and the repository."""
    settings = settings or get_settings()

    configure_logging(level=settings.log_level)
    log = get_logger("startup")
    log.info("repository_starting", settings=settings.to_log_safe_dict())

    return DynamoDbDataRepository(
        store=build_store(settings, resource=resource),
        table_name=settings.ddb_table_name,
        log=get_logger("datarepo.repository"),
    )
