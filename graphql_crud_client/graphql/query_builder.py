"""Read (query) templates."""

from typing import Iterable

from .names import ListNames
from .template import OperationTemplate

# Order in which optional list arguments appear in a get-many document
LIST_ARGUMENTS = ("where", "sortBy", "first", "skip")


class QueryBuilder:
    """Build read documents for a list."""

    @staticmethod
    def get_item_template(names: ListNames) -> OperationTemplate:
        return OperationTemplate(
            operation_type="query",
            field_name=names.item_query_name,
            variable_definitions=(("id", "ID!"),),
            arguments="where: { id: $id }",
        )

    @staticmethod
    def get_items_template(names: ListNames, arguments: Iterable[str] = ()) -> OperationTemplate:
        """
        Build the get-many template declaring only the arguments the caller supplied.

        Args:
            names: Generated names for the list
            arguments: Names out of ``where``, ``sortBy``, ``first``, ``skip``

        Returns:
            Template for the ``all<Plural>`` query
        """
        requested = set(arguments)
        unknown = requested.difference(LIST_ARGUMENTS)
        if unknown:
            raise ValueError(f"Unsupported list arguments: {', '.join(sorted(unknown))}")

        types = {
            "where": names.where_input_name,
            "sortBy": f"[{names.list_sort_name}!]",
            "first": "Int",
            "skip": "Int",
        }
        used = [name for name in LIST_ARGUMENTS if name in requested]

        return OperationTemplate(
            operation_type="query",
            field_name=names.list_query_name,
            variable_definitions=tuple((name, types[name]) for name in used),
            arguments=", ".join(f"{name}: ${name}" for name in used),
        )
