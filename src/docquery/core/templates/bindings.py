# docquery/core/templates/bindings.py
"""
Positional parameter bindings.

A template refers to caller arguments with ``?<index>`` placeholders, e.g.
``{name: '?0', age: {$gt: ?1}}``. Parsing happens once per template and
yields one :class:`ParameterBinding` per occurrence, in the order the
occurrences appear.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

# ?<digits>, then an optional run of connector characters, then at most one
# closing separator. The connector run stops at separators and, unlike the
# plain ``[^,'"}]*`` rule, also at ``?``: ``[?0 ?1]`` yields two bindings
# rather than one whose connector run swallows ``?1``.
PARAMETER_BINDING_PATTERN = re.compile(
    r"\?(\d+)"
    r"[^,'\"}?]*"
    r"[,\"'}]?",
    re.IGNORECASE,
)

PARAMETER_INDEX_GROUP = 1


@dataclass(frozen=True)
class ParameterBinding:
    """A single placeholder occurrence.

    Attributes:
        parameter_index: Position of the argument to substitute.
        quoted: ``True`` when the template already wraps the placeholder in
            quotes, in which case text values are inserted verbatim.
    """

    parameter_index: int
    quoted: bool = False

    @property
    def parameter(self) -> str:
        """The placeholder token as written in the template."""
        return f"?{self.parameter_index}"


@dataclass(frozen=True)
class ParameterBindingParser:
    """Extracts :class:`ParameterBinding` items from a template string."""

    pattern: re.Pattern[str] = PARAMETER_BINDING_PATTERN

    def parse(self, template: str | None) -> list[ParameterBinding]:
        if not template or not template.strip():
            return []

        bindings: list[ParameterBinding] = []
        for match in self.pattern.finditer(template):
            group = match.group()
            bindings.append(
                ParameterBinding(
                    parameter_index=int(match.group(PARAMETER_INDEX_GROUP)),
                    quoted=group.endswith(("'", '"')),
                )
            )
        return bindings


_parser = ParameterBindingParser()


def parse_parameter_bindings(template: str | None) -> list[ParameterBinding]:
    """Return the bindings found in ``template``, left to right.

    Text without placeholders (or no text at all) yields an empty list.
    The same index may occur several times; each occurrence is a separate
    binding.
    """
    return _parser.parse(template)
