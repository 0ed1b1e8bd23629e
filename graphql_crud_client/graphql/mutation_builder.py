"""Create, update and delete (mutation) templates."""

from .names import ListNames
from .template import OperationTemplate


class MutationBuilder:
    """Build mutation documents for a list, in singular or plural form."""

    @staticmethod
    def create_template(names: ListNames, many: bool = False) -> OperationTemplate:
        if many:
            return OperationTemplate(
                operation_type="mutation",
                field_name=names.create_many_mutation_name,
                variable_definitions=(("items", f"[{names.create_many_input_name}]"),),
                arguments="data: $items",
            )
        return OperationTemplate(
            operation_type="mutation",
            field_name=names.create_mutation_name,
            variable_definitions=(("item", names.create_input_name),),
            arguments="data: $item",
        )

    @staticmethod
    def update_template(names: ListNames, many: bool = False) -> OperationTemplate:
        if many:
            return OperationTemplate(
                operation_type="mutation",
                field_name=names.update_many_mutation_name,
                variable_definitions=(("items", f"[{names.update_many_input_name}]"),),
                arguments="data: $items",
            )
        return OperationTemplate(
            operation_type="mutation",
            field_name=names.update_mutation_name,
            variable_definitions=(("id", "ID!"), ("data", names.update_input_name)),
            arguments="id: $id, data: $data",
        )

    @staticmethod
    def delete_template(names: ListNames, many: bool = False) -> OperationTemplate:
        if many:
            return OperationTemplate(
                operation_type="mutation",
                field_name=names.delete_many_mutation_name,
                variable_definitions=(("ids", "[ID!]"),),
                arguments="ids: $ids",
            )
        return OperationTemplate(
            operation_type="mutation",
            field_name=names.delete_mutation_name,
            variable_definitions=(("id", "ID!"),),
            arguments="id: $id",
        )
