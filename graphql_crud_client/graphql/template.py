"""Operation templates: document structure kept apart from field selection."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, List, Tuple

DEFAULT_RETURN_FIELDS = "id"


def format_return_fields(return_fields: Any = DEFAULT_RETURN_FIELDS) -> str:
    """
    Normalize a field selection for embedding into a document.

    A string is used verbatim (surrounding whitespace trimmed); a sequence of
    field names is joined with spaces. Field names are never checked against
    the schema, an unknown field surfaces as an execution error instead.
    """
    if isinstance(return_fields, str):
        selection = return_fields.strip()
    elif isinstance(return_fields, Sequence) and not isinstance(return_fields, (bytes, bytearray)):
        selection = " ".join(str(f).strip() for f in return_fields if str(f).strip())
    else:
        raise ValueError(f"Return fields must be a string or a list of field names, got {type(return_fields).__name__}")

    if not selection:
        raise ValueError("Return fields cannot be empty")
    return selection


@dataclass(frozen=True)
class OperationTemplate:
    """
    Structural skeleton of a single-field GraphQL operation.

    ``field_name`` is the generated operation name; the response envelope is keyed by it.
    """

    operation_type: str
    field_name: str
    variable_definitions: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)
    arguments: str = ""

    def render(self, return_fields: Any = DEFAULT_RETURN_FIELDS) -> str:
        selection = format_return_fields(return_fields)
        header = self.operation_type
        if self.variable_definitions:
            definitions = ", ".join(f"${name}: {gql_type}" for name, gql_type in self.variable_definitions)
            header = f"{header} ({definitions})"
        call = f"{self.field_name}({self.arguments})" if self.arguments else self.field_name
        return f"{header} {{\n  {call} {{\n    {selection}\n  }}\n}}"

    @property
    def variable_names(self) -> List[str]:
        return [name for name, _ in self.variable_definitions]
