"""Turn an OperationRequest into a document and its variables."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Iterable

from graphql_crud_client.core.types import ItemUpdate, Many, OperationKind, OperationRequest, Single

from .mutation_builder import MutationBuilder
from .names import ListNames
from .query_builder import QueryBuilder
from .template import OperationTemplate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuiltRequest:
    template: OperationTemplate
    document: str
    variables: Dict[str, Any]
    many: bool

    @property
    def operation_name(self) -> str:
        return self.template.field_name


def build_template(
    kind: OperationKind, names: ListNames, many: bool, arguments: Iterable[str] = ()
) -> OperationTemplate:
    """Pick the structural template for an operation kind and cardinality."""
    if kind is OperationKind.CREATE:
        return MutationBuilder.create_template(names, many)
    if kind is OperationKind.UPDATE:
        return MutationBuilder.update_template(names, many)
    if kind is OperationKind.DELETE:
        return MutationBuilder.delete_template(names, many)
    if kind is OperationKind.READ:
        if many:
            return QueryBuilder.get_items_template(names, arguments)
        return QueryBuilder.get_item_template(names)
    raise ValueError(f"Unknown operation kind: {kind!r}")


def _check_record(data: Any) -> Dict[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"Item data must be a mapping, got {type(data).__name__}")
    return dict(data)


def _check_id(item_id: Any) -> str:
    if not isinstance(item_id, str) or not item_id:
        raise ValueError(f"Item id must be a non-empty string, got {item_id!r}")
    return item_id


def _build_variables(request: OperationRequest) -> Dict[str, Any]:
    cardinality = request.cardinality
    kind = request.kind

    if kind is OperationKind.CREATE:
        if isinstance(cardinality, Many):
            return {"items": [{"data": _check_record(data)} for data in cardinality.values]}
        return {"item": _check_record(cardinality.value)}

    if kind is OperationKind.UPDATE:
        if isinstance(cardinality, Many):
            return {"items": [ItemUpdate.coerce(item).to_variables() for item in cardinality.values]}
        return ItemUpdate.coerce(cardinality.value).to_variables()

    if kind is OperationKind.DELETE:
        if isinstance(cardinality, Many):
            return {"ids": [_check_id(item_id) for item_id in cardinality.values]}
        return {"id": _check_id(cardinality.value)}

    if isinstance(cardinality, Single):
        return {"id": _check_id(cardinality.value)}

    variables = {}
    if request.where is not None:
        variables["where"] = _check_record(request.where)
    if request.sort_by is not None:
        variables["sortBy"] = [request.sort_by] if isinstance(request.sort_by, str) else list(request.sort_by)
    if request.first is not None:
        variables["first"] = request.first
    if request.skip is not None:
        variables["skip"] = request.skip
    return variables


def build_request(request: OperationRequest) -> BuiltRequest:
    """
    Build the document and variables for one request.

    Raises:
        ValueError: If the list name, payload or field selection is malformed
    """
    if not isinstance(request.cardinality, (Single, Many)):
        raise TypeError(f"Cardinality must be Single or Many, got {type(request.cardinality).__name__}")

    names = ListNames.for_list(request.list_name, request.plural)
    variables = _build_variables(request)
    many = isinstance(request.cardinality, Many)

    template = build_template(request.kind, names, many, arguments=variables.keys() if many else ())
    document = template.render(request.return_fields)

    logger.debug(f"Built {template.field_name} with variables: {sorted(variables)}")
    return BuiltRequest(template=template, document=document, variables=variables, many=many)
