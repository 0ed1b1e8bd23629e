"""
Create, read, update and delete items of a list.

Every function issues exactly one request through ``execute`` and returns
plain records shaped by ``return_fields``.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from graphql_crud_client.core.types import ItemUpdate, Many, OperationKind, OperationRequest, Single
from graphql_crud_client.graphql.executor import ExecuteCallable, QueryExecutor
from graphql_crud_client.graphql.template import DEFAULT_RETURN_FIELDS

ReturnFields = Union[str, Sequence[str]]


async def _dispatch(execute: ExecuteCallable, request: OperationRequest, context: Any):
    return await QueryExecutor(execute).dispatch(request, context)


async def create_item(
    execute: ExecuteCallable,
    list_name: str,
    item: Mapping[str, Any],
    return_fields: ReturnFields = DEFAULT_RETURN_FIELDS,
    context: Any = None,
    plural: Optional[str] = None,
) -> Optional[Dict[str, Any]]:
    request = OperationRequest(OperationKind.CREATE, list_name, Single(item), return_fields, plural=plural)
    return await _dispatch(execute, request, context)


async def create_items(
    execute: ExecuteCallable,
    list_name: str,
    items: Sequence[Mapping[str, Any]],
    return_fields: ReturnFields = DEFAULT_RETURN_FIELDS,
    context: Any = None,
    plural: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Create all ``items`` in one request; results come back in input order."""
    request = OperationRequest(OperationKind.CREATE, list_name, Many(items), return_fields, plural=plural)
    return await _dispatch(execute, request, context)


async def get_item(
    execute: ExecuteCallable,
    list_name: str,
    item_id: str,
    return_fields: ReturnFields = DEFAULT_RETURN_FIELDS,
    context: Any = None,
    plural: Optional[str] = None,
) -> Optional[Dict[str, Any]]:
    """Fetch one item by id; returns None when it does not exist."""
    request = OperationRequest(OperationKind.READ, list_name, Single(item_id), return_fields, plural=plural)
    return await _dispatch(execute, request, context)


async def get_items(
    execute: ExecuteCallable,
    list_name: str,
    return_fields: ReturnFields = DEFAULT_RETURN_FIELDS,
    where: Optional[Mapping[str, Any]] = None,
    sort_by: Optional[Union[str, Sequence[str]]] = None,
    first: Optional[int] = None,
    skip: Optional[int] = None,
    context: Any = None,
    plural: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    Fetch every item matching ``where`` (all items when omitted).

    ``sort_by``, ``first`` and ``skip`` are passed to the backend in the same
    request; no client-side pagination is done.
    """
    request = OperationRequest(
        OperationKind.READ,
        list_name,
        Many(()),
        return_fields,
        where=dict(where) if where is not None else None,
        sort_by=sort_by,
        first=first,
        skip=skip,
        plural=plural,
    )
    return await _dispatch(execute, request, context)


async def update_item(
    execute: ExecuteCallable,
    list_name: str,
    item: Union[ItemUpdate, Mapping[str, Any]],
    return_fields: ReturnFields = DEFAULT_RETURN_FIELDS,
    context: Any = None,
    plural: Optional[str] = None,
) -> Optional[Dict[str, Any]]:
    request = OperationRequest(OperationKind.UPDATE, list_name, Single(item), return_fields, plural=plural)
    return await _dispatch(execute, request, context)


async def update_items(
    execute: ExecuteCallable,
    list_name: str,
    items: Sequence[Union[ItemUpdate, Mapping[str, Any]]],
    return_fields: ReturnFields = DEFAULT_RETURN_FIELDS,
    context: Any = None,
    plural: Optional[str] = None,
) -> List[Dict[str, Any]]:
    request = OperationRequest(OperationKind.UPDATE, list_name, Many(items), return_fields, plural=plural)
    return await _dispatch(execute, request, context)


async def delete_item(
    execute: ExecuteCallable,
    list_name: str,
    item_id: str,
    return_fields: ReturnFields = DEFAULT_RETURN_FIELDS,
    context: Any = None,
    plural: Optional[str] = None,
) -> Optional[Dict[str, Any]]:
    """Delete one item; returns its last known state."""
    request = OperationRequest(OperationKind.DELETE, list_name, Single(item_id), return_fields, plural=plural)
    return await _dispatch(execute, request, context)


async def delete_items(
    execute: ExecuteCallable,
    list_name: str,
    items: Sequence[str],
    return_fields: ReturnFields = DEFAULT_RETURN_FIELDS,
    context: Any = None,
    plural: Optional[str] = None,
) -> List[Dict[str, Any]]:
    request = OperationRequest(OperationKind.DELETE, list_name, Many(items), return_fields, plural=plural)
    return await _dispatch(execute, request, context)
