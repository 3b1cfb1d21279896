"""Public contracts for the query template engine."""
from docquery.contracts.execution import QueryOperations
from docquery.contracts.query import BasicQuery, ParameterAccessor, QueryMethod, Sort

__all__ = [
    "BasicQuery", "ParameterAccessor", "QueryMethod", "Sort",
    "QueryOperations",
]
