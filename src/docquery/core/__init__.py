"""Query engine core: templates, string based queries and execution dispatch."""
from docquery.core.accessor import SimpleParameterAccessor
from docquery.core.executor import QueryExecutor
from docquery.core.query import StringBasedQuery

__all__ = ["SimpleParameterAccessor", "QueryExecutor", "StringBasedQuery"]
