"""Generic Cosmos DB repository over a single container."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar, cast

from azure.cosmos.exceptions import CosmosResourceNotFoundError
from pydantic import BaseModel

if TYPE_CHECKING:
    from azure.cosmos.aio import DatabaseProxy

T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """CRUD and query helpers shared by all containers."""

    container_name: ClassVar[str]
    model_class: ClassVar[type[BaseModel]]

    def __init__(self, database: DatabaseProxy) -> None:
        self._container = database.get_container_client(self.container_name)

    def _to_body(self, item: T) -> dict[str, Any]:
        return item.model_dump(mode="json")

    def _to_model(self, data: dict[str, Any]) -> T:
        return cast("T", self.model_class.model_validate(data))

    async def create(self, item: T) -> T:
        """Insert a new document."""
        await self._container.create_item(body=self._to_body(item))
        return item

    async def get(self, item_id: str, partition_key: str) -> T | None:
        """Read a document by id, or None when missing or soft-deleted."""
        try:
            data = cast(
                "dict[str, Any]",
                await self._container.read_item(item=item_id, partition_key=partition_key),
            )
        except CosmosResourceNotFoundError:
            return None
        if data.get("deleted_at") is not None:
            return None
        return self._to_model(data)

    async def update(self, item: T, partition_key: str) -> T:
        """Replace a stored document."""
        await self._container.replace_item(item=cast("Any", item).id, body=self._to_body(item))
        return item

    async def upsert(self, item: T) -> T:
        await self._container.upsert_item(body=self._to_body(item))
        return item

    async def query(
        self,
        query: str,
        parameters: list[dict[str, Any]] | None = None,
    ) -> list[T]:
        """Run a SQL query and validate each result into the model class."""
        results: list[T] = []
        async for item in self._container.query_items(query=query, parameters=parameters or []):
            results.append(self._to_model(cast("dict[str, Any]", item)))
        return results
