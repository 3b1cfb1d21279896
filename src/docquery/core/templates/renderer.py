# docquery/core/templates/renderer.py
"""
Placeholder substitution for parsed templates.

Substitution is planned against the original template: every binding claims
the first still unclaimed ``?<index>`` occurrence with its index, and all
edits are applied in a single left-to-right pass. Inserted values are never
scanned again, so a value that happens to contain ``?1`` cannot be mistaken
for a placeholder.
"""
from __future__ import annotations

import logging
import re
from collections import defaultdict, deque
from typing import Any, Callable, Literal, Sequence

from docquery.core.exceptions import ParameterCountError, TemplateConsistencyError
from docquery.core.templates.bindings import ParameterBinding
from docquery.core.templates.serialization import serialize_value

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\?(\d+)")

MissingPlaceholderPolicy = Literal["raise", "skip"]

ValueLookup = Callable[[int], Any]
Serializer = Callable[[Any], str]


def value_for_binding(
    binding: ParameterBinding,
    value_of: ValueLookup,
    serializer: Serializer = serialize_value,
) -> str:
    """Return the text that replaces ``binding`` in the template.

    Text values bound to a quoted placeholder are inserted as-is since the
    template supplies the quotes. Everything else goes through ``serializer``.
    """
    try:
        value = value_of(binding.parameter_index)
    except ParameterCountError:
        raise
    except (IndexError, KeyError) as exc:
        raise ParameterCountError(binding.parameter_index) from exc

    if isinstance(value, str) and binding.quoted:
        return value

    return serializer(value)


def _plan_edits(
    template: str,
    bindings: Sequence[ParameterBinding],
    on_missing: MissingPlaceholderPolicy,
) -> list[tuple[int, int, ParameterBinding]]:
    # parameter index -> unclaimed (start, end) spans, leftmost first
    occurrences: defaultdict[int, deque[tuple[int, int]]] = defaultdict(deque)
    for match in PLACEHOLDER_PATTERN.finditer(template):
        occurrences[int(match.group(1))].append(match.span())

    edits: list[tuple[int, int, ParameterBinding]] = []

    for binding in bindings:
        spans = occurrences.get(binding.parameter_index)
        if spans:
            start, end = spans.popleft()
            edits.append((start, end, binding))
        else:
            if on_missing == "skip":
                logger.debug(
                    "No placeholder left for %s, skipping binding", binding.parameter
                )
                continue
            raise TemplateConsistencyError(
                f"Placeholder {binding.parameter} not found in template",
                details={"parameter_index": binding.parameter_index},
            )

    edits.sort(key=lambda edit: edit[0])
    return edits


def replace_placeholders(
    template: str,
    bindings: Sequence[ParameterBinding],
    value_of: ValueLookup,
    *,
    serializer: Serializer = serialize_value,
    on_missing: MissingPlaceholderPolicy = "raise",
) -> str:
    """Substitute every binding in ``template`` with its argument value.

    Args:
        template: The raw template the bindings were parsed from.
        bindings: Bindings in discovery order.
        value_of: Returns the argument for a parameter index.
        serializer: Document serializer for non-verbatim values.
        on_missing: What to do when a binding has no placeholder left,
            ``"raise"`` or ``"skip"``.

    Returns:
        The resolved string. ``template`` itself when there are no bindings.

    Raises:
        ParameterCountError: ``value_of`` cannot supply an argument.
        TemplateConsistencyError: A binding has no placeholder left and
            ``on_missing`` is ``"raise"``.
    """
    if not bindings:
        return template

    parts: list[str] = []
    cursor = 0
    for start, end, binding in _plan_edits(template, bindings, on_missing):
        parts.append(template[cursor:start])
        parts.append(value_for_binding(binding, value_of, serializer))
        cursor = end
    parts.append(template[cursor:])

    return "".join(parts)
