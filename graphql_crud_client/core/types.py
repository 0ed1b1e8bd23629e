"""Request model shared by the builders and the executor."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

T = TypeVar("T")


class OperationKind(str, Enum):
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class Single(Generic[T]):
    """One item: dispatched to the singular operation."""

    value: T


@dataclass(frozen=True)
class Many(Generic[T]):
    """A sequence of items: dispatched to the plural (batch) operation, even when it holds one item."""

    values: List[T]

    def __init__(self, values: Sequence[T]):
        if isinstance(values, (str, bytes, Mapping)) or not isinstance(values, Sequence):
            raise TypeError(f"Many expects a sequence of items, got {type(values).__name__}")
        object.__setattr__(self, "values", list(values))

    def __len__(self) -> int:
        return len(self.values)


Cardinality = Union[Single, Many]


@dataclass(frozen=True)
class ItemUpdate:
    """An ``{id, data}`` pair for update operations."""

    id: str
    data: Dict[str, Any]

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id:
            raise ValueError("Update requires a non-empty item id")
        if not isinstance(self.data, Mapping):
            raise ValueError(f"Update data for item '{self.id}' must be a mapping")

    @classmethod
    def coerce(cls, value: Any) -> "ItemUpdate":
        if isinstance(value, ItemUpdate):
            return value
        if isinstance(value, Mapping) and "id" in value and "data" in value:
            return cls(id=value["id"], data=value["data"])
        raise ValueError("Update items must provide both 'id' and 'data'")

    def to_variables(self) -> Dict[str, Any]:
        return {"id": self.id, "data": dict(self.data)}


@dataclass
class ExecutionContext:
    """
    Caller-supplied context passed through to the execution interface untouched.

    The bundled HTTP transport reads ``auth_token``, ``headers`` and ``schema_name``;
    custom execution callables may put anything in ``extra``.
    """

    auth_token: Optional[str] = None
    schema_name: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class OperationRequest:
    kind: OperationKind
    list_name: str
    cardinality: Cardinality
    return_fields: Any = "id"
    where: Optional[Dict[str, Any]] = None
    sort_by: Optional[List[str]] = None
    first: Optional[int] = None
    skip: Optional[int] = None
    plural: Optional[str] = None

    @property
    def is_many(self) -> bool:
        return isinstance(self.cardinality, Many)
