"""Template subsystem: binding parsing, value serialization and rendering."""
from docquery.core.templates.bindings import (
    ParameterBinding,
    ParameterBindingParser,
    parse_parameter_bindings,
)
from docquery.core.templates.renderer import replace_placeholders, value_for_binding
from docquery.core.templates.serialization import serialize_value

__all__ = [
    "ParameterBinding", "ParameterBindingParser", "parse_parameter_bindings",
    "replace_placeholders", "value_for_binding",
    "serialize_value",
]
