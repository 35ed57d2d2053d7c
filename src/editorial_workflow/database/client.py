"""Cosmos DB connection and container provisioning for the workflow stores."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from azure.cosmos import PartitionKey
from azure.cosmos.aio import CosmosClient as AzureCosmosClient

if TYPE_CHECKING:
    from azure.cosmos.aio import DatabaseProxy

    from editorial_workflow.config import CosmosConfig

logger = logging.getLogger(__name__)

# container name -> partition key path
CONTAINERS: dict[str, str] = {
    "entities": "/id",
    "revisions": "/entity_id",
    "translation_jobs": "/id",
}


class CosmosClient:
    """Own the async Cosmos DB client and the workflow database."""

    def __init__(self, config: CosmosConfig) -> None:
        self._config = config
        self._client: AzureCosmosClient | None = None
        self._database: DatabaseProxy | None = None

    async def initialize(self) -> None:
        """Connect, then create the database and workflow containers when missing."""
        self._client = AzureCosmosClient(self._config.endpoint, credential=self._config.key)
        self._database = await self._client.create_database_if_not_exists(
            id=self._config.database
        )
        for name, path in CONTAINERS.items():
            await self._database.create_container_if_not_exists(
                id=name, partition_key=PartitionKey(path=path)
            )
        logger.info(
            "Cosmos DB ready database=%s containers=%s",
            self._config.database,
            ",".join(CONTAINERS),
        )

    async def close(self) -> None:
        if self._client:
            await self._client.close()
            self._client = None
            self._database = None

    @property
    def database(self) -> DatabaseProxy:
        if self._database is None:
            raise RuntimeError("Cosmos DB database requested before initialize()")
        return self._database
