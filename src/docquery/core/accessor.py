# docquery/core/accessor.py
"""Positional argument accessor backed by a plain sequence."""
from __future__ import annotations

from typing import Any, Sequence

from docquery.contracts.query import Sort
from docquery.core.exceptions import ParameterCountError


class SimpleParameterAccessor:
    """Serves invocation arguments by position.

    Args:
        values: Arguments in declaration order.
        sort: Optional sort metadata attached to the resolved query.
    """

    def __init__(self, values: Sequence[Any], sort: Sort | None = None) -> None:
        self._values = tuple(values)
        self.sort = sort

    def get_bindable_value(self, index: int) -> Any:
        if index < 0 or index >= len(self._values):
            raise ParameterCountError(index, available=len(self._values))
        return self._values[index]

    def __len__(self) -> int:
        return len(self._values)
