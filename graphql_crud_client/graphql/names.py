"""Generated GraphQL names for a list."""

import re
from dataclasses import dataclass
from typing import Optional

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# Top-level keys of a GraphQL response body
RESERVED_LIST_NAMES = {"data", "errors", "extensions"}


def pluralize(word: str) -> str:
    lower = word.lower()
    if lower.endswith("y") and len(word) > 1 and lower[-2] not in "aeiou":
        return word[:-1] + "ies"
    if lower.endswith(("s", "x", "z", "ch", "sh")):
        return word + "es"
    return word + "s"


@dataclass(frozen=True)
class ListNames:
    """All operation and type names the backend generates for one list."""

    list_name: str
    plural: str

    @classmethod
    def for_list(cls, list_name: str, plural: Optional[str] = None) -> "ListNames":
        if not isinstance(list_name, str) or not list_name.strip():
            raise ValueError("List name cannot be empty")
        list_name = list_name.strip()
        if not _IDENTIFIER.match(list_name):
            raise ValueError(f"Invalid list name '{list_name}': must be a GraphQL identifier")
        if list_name in RESERVED_LIST_NAMES:
            raise ValueError(f"Invalid list name '{list_name}': reserved by the response format")

        plural = plural.strip() if plural else pluralize(list_name)
        if not _IDENTIFIER.match(plural):
            raise ValueError(f"Invalid plural '{plural}' for list '{list_name}'")
        # Singular and plural operations must never share a name
        if plural == list_name:
            plural = f"{plural}s"

        return cls(list_name=list_name, plural=plural)

    @property
    def item_query_name(self) -> str:
        return self.list_name

    @property
    def list_query_name(self) -> str:
        return f"all{self.plural}"

    @property
    def create_mutation_name(self) -> str:
        return f"create{self.list_name}"

    @property
    def create_many_mutation_name(self) -> str:
        return f"create{self.plural}"

    @property
    def update_mutation_name(self) -> str:
        return f"update{self.list_name}"

    @property
    def update_many_mutation_name(self) -> str:
        return f"update{self.plural}"

    @property
    def delete_mutation_name(self) -> str:
        return f"delete{self.list_name}"

    @property
    def delete_many_mutation_name(self) -> str:
        return f"delete{self.plural}"

    @property
    def create_input_name(self) -> str:
        return f"{self.list_name}CreateInput"

    @property
    def create_many_input_name(self) -> str:
        return f"{self.plural}CreateInput"

    @property
    def update_input_name(self) -> str:
        return f"{self.list_name}UpdateInput"

    @property
    def update_many_input_name(self) -> str:
        return f"{self.plural}UpdateInput"

    @property
    def where_input_name(self) -> str:
        return f"{self.list_name}WhereInput"

    @property
    def where_unique_input_name(self) -> str:
        return f"{self.list_name}WhereUniqueInput"

    @property
    def list_sort_name(self) -> str:
        return f"Sort{self.plural}By"
