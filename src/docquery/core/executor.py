# docquery/core/executor.py
"""
Query execution dispatch.

Resolves a :class:`StringBasedQuery` for one invocation and hands the result
to the execution engine as a count, delete or find operation.
"""
from __future__ import annotations

import logging
from typing import Any

from docquery.contracts.execution import QueryOperations
from docquery.contracts.query import ParameterAccessor
from docquery.core.exceptions import QueryTemplateError
from docquery.core.query import StringBasedQuery

logger = logging.getLogger(__name__)


class QueryExecutor:
    """Stateless executor for string based queries."""

    async def execute(
        self,
        query: StringBasedQuery,
        accessor: ParameterAccessor,
        operations: QueryOperations,
    ) -> Any:
        """Render ``query`` with ``accessor`` and run it through ``operations``.

        Returns:
            The engine's result: a count for count queries, the delete result
            for delete queries, the matching documents otherwise.
        """
        name = query.method.name

        try:
            resolved = query.create_query(accessor)
        except QueryTemplateError as exc:
            logger.warning("Query rendering failed for '%s': %s", name, exc.message)
            raise

        try:
            if query.is_count_query:
                logger.debug("Query '%s': count", name)
                return await operations.count(resolved)
            if query.is_delete_query:
                logger.debug("Query '%s': delete", name)
                return await operations.delete(resolved)
            logger.debug("Query '%s': find", name)
            return await operations.find(resolved)
        except Exception:
            logger.error("Query execution failed for '%s'", name)
            raise
