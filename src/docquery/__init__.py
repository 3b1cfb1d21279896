"""docquery: positional-parameter query templates for document stores."""
from docquery.contracts import BasicQuery, ParameterAccessor, QueryMethod, QueryOperations
from docquery.core import QueryExecutor, SimpleParameterAccessor, StringBasedQuery
from docquery.core.exceptions import (
    ParameterCountError,
    QueryConstructionError,
    QueryTemplateError,
    TemplateConsistencyError,
    ValueSerializationError,
)
from docquery.core.templates import (
    ParameterBinding,
    parse_parameter_bindings,
    replace_placeholders,
    serialize_value,
)

__version__ = "0.1.0"

__all__ = [
    "BasicQuery", "ParameterAccessor", "QueryMethod", "QueryOperations",
    "QueryExecutor", "SimpleParameterAccessor", "StringBasedQuery",
    "ParameterCountError", "QueryConstructionError", "QueryTemplateError",
    "TemplateConsistencyError", "ValueSerializationError",
    "ParameterBinding", "parse_parameter_bindings", "replace_placeholders",
    "serialize_value",
]
