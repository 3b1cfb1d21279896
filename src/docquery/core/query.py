# docquery/core/query.py
"""
String based queries.

A :class:`StringBasedQuery` compiles a :class:`QueryMethod` once: the query
and field-specification templates are parsed into bindings at construction,
and each invocation only renders them with the caller's arguments. Instances
hold no per-call state and can be shared between threads.
"""
from __future__ import annotations

import logging

from docquery.contracts.query import BasicQuery, ParameterAccessor, QueryMethod
from docquery.core.config import Settings, settings as default_settings
from docquery.core.exceptions import QueryConstructionError
from docquery.core.templates.bindings import ParameterBinding, parse_parameter_bindings
from docquery.core.templates.renderer import Serializer, replace_placeholders
from docquery.core.templates.serialization import serialize_value

logger = logging.getLogger(__name__)

COUNT_AND_DELETE = (
    "Manually defined query for {method} cannot be both a count and delete query "
    "at the same time!"
)


class StringBasedQuery:
    """Query built from a plain document-query string with ``?<index>`` placeholders.

    Args:
        method: Template source and count/delete flags.
        query: Explicit query template; overrides ``method.query``.
        serializer: Document serializer for substituted values.
        settings: Engine settings; the module defaults when omitted.

    Raises:
        QueryConstructionError: No query template, or the method is flagged
            as both count and delete.
    """

    def __init__(
        self,
        method: QueryMethod,
        *,
        query: str | None = None,
        serializer: Serializer = serialize_value,
        settings: Settings | None = None,
    ) -> None:
        self._method = method
        self._settings = settings or default_settings
        self._serializer = serializer

        template = query if query is not None else method.query
        if template is None:
            raise QueryConstructionError(
                f"No query template defined for {method.name}",
                details={"method": method.name},
            )

        if method.count and method.delete:
            raise QueryConstructionError(
                COUNT_AND_DELETE.format(method=method.name),
                details={"method": method.name},
            )

        self._query = template
        self._query_bindings = tuple(parse_parameter_bindings(template))

        self._field_spec = method.fields
        self._field_spec_bindings = tuple(parse_parameter_bindings(method.fields))

        self._is_count_query = method.count
        self._is_delete_query = method.delete

    @property
    def method(self) -> QueryMethod:
        return self._method

    @property
    def query(self) -> str:
        return self._query

    @property
    def field_spec(self) -> str | None:
        return self._field_spec

    @property
    def query_bindings(self) -> tuple[ParameterBinding, ...]:
        return self._query_bindings

    @property
    def field_spec_bindings(self) -> tuple[ParameterBinding, ...]:
        return self._field_spec_bindings

    @property
    def is_count_query(self) -> bool:
        return self._is_count_query

    @property
    def is_delete_query(self) -> bool:
        return self._is_delete_query

    def _render(self, template: str, bindings, accessor: ParameterAccessor) -> str:
        return replace_placeholders(
            template,
            bindings,
            accessor.get_bindable_value,
            serializer=self._serializer,
            on_missing=self._settings.missing_placeholder,
        )

    def create_query(self, accessor: ParameterAccessor) -> BasicQuery:
        """Resolve the templates against ``accessor`` into a :class:`BasicQuery`."""
        query_string = self._render(self._query, self._query_bindings, accessor)

        field_string: str | None = None
        if self._field_spec is not None:
            field_string = self._render(
                self._field_spec, self._field_spec_bindings, accessor
            )

        resolved = BasicQuery(query=query_string, fields=field_string)
        resolved = resolved.with_sort(accessor.sort)

        if logger.isEnabledFor(logging.DEBUG):
            limit = self._settings.query_log_max_length
            logger.debug(
                "Created query %s",
                (query_string[:limit] + "...") if len(query_string) > limit else query_string,
            )

        return resolved

    def __repr__(self) -> str:
        return (
            f"StringBasedQuery(method={self._method.name!r}, query={self._query!r}, "
            f"fields={self._field_spec!r})"
        )
