# tests/core/test_query.py
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from docquery.contracts.query import BasicQuery, QueryMethod
from docquery.core.accessor import SimpleParameterAccessor
from docquery.core.config import Settings
from docquery.core.exceptions import (
    ParameterCountError,
    QueryConstructionError,
    TemplateConsistencyError,
)
from docquery.core.query import StringBasedQuery
from docquery.core.templates.bindings import ParameterBinding


def make_query(query="{name: '?0'}", **kwargs) -> StringBasedQuery:
    return StringBasedQuery(QueryMethod(name="findByName", query=query, **kwargs))


class TestConstruction:
    def test_parses_both_templates(self):
        q = make_query("{name: ?0, age: '?1'}", fields="{name: ?2}")
        assert q.query_bindings == (ParameterBinding(0), ParameterBinding(1, quoted=True))
        assert q.field_spec_bindings == (ParameterBinding(2),)

    def test_no_field_spec(self):
        q = make_query()
        assert q.field_spec is None
        assert q.field_spec_bindings == ()

    def test_flags(self):
        assert make_query(count=True).is_count_query is True
        assert make_query(count=True).is_delete_query is False
        assert make_query(delete=True).is_delete_query is True

    def test_count_and_delete_rejected(self):
        with pytest.raises(QueryConstructionError, match="findByName"):
            make_query(count=True, delete=True)

    def test_construction_error_is_value_error(self):
        with pytest.raises(ValueError):
            make_query(count=True, delete=True)

    def test_missing_template_rejected(self):
        with pytest.raises(QueryConstructionError, match="No query template"):
            StringBasedQuery(QueryMethod(name="findAll"))

    def test_explicit_query_overrides_method(self):
        method = QueryMethod(name="findByAge", query="{name: ?0}")
        q = StringBasedQuery(method, query="{age: ?0}")
        assert q.query == "{age: ?0}"
        assert q.create_query(SimpleParameterAccessor([3])).query == "{age: 3}"

    def test_repr(self):
        assert "findByName" in repr(make_query())


class TestCreateQuery:
    def test_quoted_text(self):
        result = make_query().create_query(SimpleParameterAccessor(["Alice"]))
        assert result == BasicQuery(query="{name: 'Alice'}")

    def test_unquoted_number(self):
        result = make_query("{age: ?0}").create_query(SimpleParameterAccessor([30]))
        assert result.query == "{age: 30}"

    def test_unquoted_text(self):
        result = make_query("{name: ?0}").create_query(SimpleParameterAccessor(["Alice"]))
        assert result.query == '{name: "Alice"}'

    def test_duplicate_index(self):
        result = make_query("{a: ?0, b: ?0}").create_query(SimpleParameterAccessor([5]))
        assert result.query == "{a: 5, b: 5}"

    def test_field_spec_rendered(self):
        q = make_query("{name: '?0'}", fields="{?1: 1}")
        result = q.create_query(SimpleParameterAccessor(["Alice", "age"]))
        assert result.query == "{name: 'Alice'}"
        assert result.fields == '{"age": 1}'

    def test_field_spec_without_placeholders(self):
        q = make_query(fields="{name: 1, _id: 0}")
        result = q.create_query(SimpleParameterAccessor(["Alice"]))
        assert result.fields == "{name: 1, _id: 0}"

    def test_sort_attached(self):
        accessor = SimpleParameterAccessor(["Alice"], sort={"age": -1})
        result = make_query().create_query(accessor)
        assert result.sort == {"age": -1}

    def test_no_sort(self):
        result = make_query().create_query(SimpleParameterAccessor(["Alice"]))
        assert result.sort is None

    def test_missing_argument(self):
        with pytest.raises(ParameterCountError) as info:
            make_query().create_query(SimpleParameterAccessor([]))
        assert info.value.index == 0
        assert info.value.available == 0
        assert info.value.details == {"index": 0, "available": 0}

    def test_reused_with_different_arguments(self):
        q = make_query("{age: {$gt: ?0}}")
        assert q.create_query(SimpleParameterAccessor([1])).query == "{age: {$gt: 1}}"
        assert q.create_query(SimpleParameterAccessor([2])).query == "{age: {$gt: 2}}"
        assert q.query == "{age: {$gt: ?0}}"

    def test_concurrent_rendering(self):
        q = make_query("{n: ?0, tag: '?1'}")

        def run(i: int) -> str:
            return q.create_query(SimpleParameterAccessor([i, f"t{i}"])).query

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(run, range(200)))

        assert results == [f"{{n: {i}, tag: 't{i}'}}" for i in range(200)]

    def test_custom_serializer(self):
        q = StringBasedQuery(
            QueryMethod(name="m", query="{a: ?0}"), serializer=lambda v: "X"
        )
        assert q.create_query(SimpleParameterAccessor([1])).query == "{a: X}"

    def test_debug_log_truncated(self, caplog):
        q = StringBasedQuery(
            QueryMethod(name="m", query="{name: '?0'}"),
            settings=Settings(query_log_max_length=10),
        )
        with caplog.at_level(logging.DEBUG, logger="docquery.core.query"):
            q.create_query(SimpleParameterAccessor(["a" * 50]))
        assert "Created query {name: 'aa..." in caplog.text


class TestMissingPlaceholderPolicy:
    class OutOfSyncQuery(StringBasedQuery):
        """Carries a binding for ?5 that its template does not contain."""

        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self._query_bindings = self._query_bindings + (ParameterBinding(5),)

    def test_raise_by_default(self):
        q = self.OutOfSyncQuery(
            QueryMethod(name="m", query="{a: ?0}"), settings=Settings()
        )
        with pytest.raises(TemplateConsistencyError):
            q.create_query(SimpleParameterAccessor(list(range(6))))

    def test_skip(self):
        q = self.OutOfSyncQuery(
            QueryMethod(name="m", query="{a: ?0}"),
            settings=Settings(missing_placeholder="skip"),
        )
        assert q.create_query(SimpleParameterAccessor(list(range(6)))).query == "{a: 0}"


class TestSimpleParameterAccessor:
    def test_get_value(self):
        assert SimpleParameterAccessor(["a", "b"]).get_bindable_value(1) == "b"

    def test_out_of_range(self):
        with pytest.raises(ParameterCountError, match="1 argument"):
            SimpleParameterAccessor(["a"]).get_bindable_value(3)

    def test_none_value_is_bindable(self):
        assert SimpleParameterAccessor([None]).get_bindable_value(0) is None

    def test_len(self):
        assert len(SimpleParameterAccessor([1, 2, 3])) == 3


class TestBasicQuery:
    def test_with_sort_copies(self):
        base = BasicQuery(query="{}")
        sorted_query = base.with_sort({"name": 1})
        assert base.sort is None
        assert sorted_query.sort == {"name": 1}

    def test_with_empty_sort_returns_same(self):
        base = BasicQuery(query="{}")
        assert base.with_sort(None) is base
        assert base.with_sort({}) is base
