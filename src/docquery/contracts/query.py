# docquery/contracts/query.py
"""
Query contracts.

A query method is a declarative template definition: the raw query and an
optional field specification, both using ``?<index>`` placeholders, plus the
count/delete flags telling the execution engine what to do with the result.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping, Protocol, runtime_checkable

# Field name -> direction (1 ascending, -1 descending), in priority order.
Sort = Mapping[str, int]


@dataclass(frozen=True)
class QueryMethod:
    """Template source for a string based query.

    Attributes:
        name: Identifier used in logs and error messages.
        query: Query template, e.g. ``{name: '?0', age: {$gt: ?1}}``.
        fields: Optional field-specification template, e.g. ``{name: 1}``.
        count: Run the query as a count.
        delete: Run the query as a delete.
    """

    name: str
    query: str | None = None
    fields: str | None = None
    count: bool = False
    delete: bool = False


@dataclass(frozen=True)
class BasicQuery:
    """Resolved query handed to the execution engine."""

    query: str
    fields: str | None = None
    sort: Sort | None = None

    def with_sort(self, sort: Sort | None) -> BasicQuery:
        if not sort:
            return self
        return replace(self, sort=dict(sort))


@runtime_checkable
class ParameterAccessor(Protocol):
    """Supplies argument values (and sort metadata) for one invocation."""

    sort: Sort | None

    def get_bindable_value(self, index: int) -> Any: ...
