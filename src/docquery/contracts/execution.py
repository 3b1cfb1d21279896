from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from docquery.contracts.query import BasicQuery


@runtime_checkable
class QueryOperations(Protocol):
    async def find(self, query: BasicQuery) -> list[dict[str, Any]]: ...

    async def count(self, query: BasicQuery) -> int: ...

    async def delete(self, query: BasicQuery) -> Any: ...
