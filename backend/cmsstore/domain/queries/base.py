"""Query specification: declarative, validated filter/sort/paging intent.

Every filter is a :class:`QueryParam` descriptor. A parameter is either unset
or set; reading an unset parameter returns its neutral default, so presence
must be checked with :meth:`EntityQuery.has`. Types are checked on
assignment, degenerate values (empty string, empty list, negative number) are
only rejected by :meth:`EntityQuery.validate`.

    query = PageQuery(site_id=site.id, status="active", limit=10)
    query.order_by = "created_at"
    query.has("offset")   # False
    del query.limit       # unset again
"""

from collections.abc import Iterable
from enum import Enum
from typing import Any, ClassVar, Self

from cmsstore.domain.columns import (
    COLUMN_CREATED_AT,
    COLUMN_HANDLE,
    COLUMN_ID,
    COLUMN_NAME,
    COLUMN_STATUS,
    SHARED_COLUMNS,
)
from cmsstore.domain.exceptions import QueryValidationError

SORT_ASCENDING_KEYWORDS = frozenset({"asc", "ascending"})


class ParamKind(str, Enum):
    """How a parameter takes part in compilation."""

    RANGE_GTE = "range_gte"
    RANGE_LTE = "range_lte"
    EQUALS = "equals"
    EQUALS_ANY = "equals_any"
    IN = "in"
    CONTAINS = "contains"
    FLAG = "flag"
    PAGING = "paging"
    SORT = "sort"
    COLUMNS = "columns"


class QueryParam:
    """One optional query field with its presence tracked separately from its value."""

    def __init__(
        self,
        kind: ParamKind,
        value_type: type,
        *,
        column: str | None = None,
        columns: tuple[str, ...] = (),
        contains_format: str = "{}",
    ):
        self.kind = kind
        self.value_type = value_type
        self.column = column
        self.columns = columns
        self.contains_format = contains_format

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        if self.column is None:
            self.column = name

    def __get__(self, instance: "EntityQuery | None", owner: type | None = None) -> Any:
        if instance is None:
            return self
        if self.name in instance._params:
            value = instance._params[self.name]
            return list(value) if self.value_type is list else value
        return self.default()

    def __set__(self, instance: "EntityQuery", value: Any) -> None:
        instance._params[self.name] = self.coerce(value)

    def __delete__(self, instance: "EntityQuery") -> None:
        instance._params.pop(self.name, None)

    def default(self) -> Any:
        if self.value_type is bool:
            return False
        if self.value_type is list:
            return []
        return None

    def coerce(self, value: Any) -> Any:
        if isinstance(value, Enum):
            value = value.value
        if self.value_type is list:
            if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
                raise TypeError(f"{self.name} must be a list of strings")
            items = [item.value if isinstance(item, Enum) else item for item in value]
            if not all(isinstance(item, str) for item in items):
                raise TypeError(f"{self.name} must be a list of strings")
            return items
        if self.value_type is int and isinstance(value, bool):
            raise TypeError(f"{self.name} must be an integer")
        if not isinstance(value, self.value_type):
            raise TypeError(f"{self.name} must be {self.value_type.__name__}, got {type(value).__name__}")
        return value

    def degenerate_reason(self, value: Any) -> str | None:
        if self.value_type is str and value == "":
            return "cannot be empty"
        if self.value_type is list and len(value) < 1:
            return "cannot be empty array"
        if self.value_type is int and value < 0:
            return "cannot be negative"
        return None


class EntityQuery:
    """Fields every entity kind can be filtered, sorted and paged by."""

    entity_name: ClassVar[str] = "entity"
    allowed_columns: ClassVar[tuple[str, ...]] = SHARED_COLUMNS

    created_at_gte = QueryParam(ParamKind.RANGE_GTE, str, column=COLUMN_CREATED_AT)
    created_at_lte = QueryParam(ParamKind.RANGE_LTE, str, column=COLUMN_CREATED_AT)
    id = QueryParam(ParamKind.EQUALS, str, column=COLUMN_ID)
    handle = QueryParam(ParamKind.EQUALS, str, column=COLUMN_HANDLE)
    status = QueryParam(ParamKind.EQUALS, str, column=COLUMN_STATUS)
    id_in = QueryParam(ParamKind.IN, list, column=COLUMN_ID)
    status_in = QueryParam(ParamKind.IN, list, column=COLUMN_STATUS)
    name_like = QueryParam(ParamKind.CONTAINS, str, column=COLUMN_NAME)
    soft_deleted_included = QueryParam(ParamKind.FLAG, bool)
    count_only = QueryParam(ParamKind.FLAG, bool)
    limit = QueryParam(ParamKind.PAGING, int)
    offset = QueryParam(ParamKind.PAGING, int)
    order_by = QueryParam(ParamKind.SORT, str)
    sort_order = QueryParam(ParamKind.SORT, str)
    columns = QueryParam(ParamKind.COLUMNS, list)

    def __init__(self, **params: Any):
        self._params: dict[str, Any] = {}
        self.set(**params)

    def __repr__(self) -> str:
        args = ", ".join(f"{name}={value!r}" for name, value in self._params.items())
        return f"{type(self).__name__}({args})"

    @classmethod
    def params(cls) -> tuple[QueryParam, ...]:
        """All parameters in declaration order, inherited ones first."""
        found: dict[str, QueryParam] = {}
        for klass in reversed(cls.__mro__):
            for value in vars(klass).values():
                if isinstance(value, QueryParam):
                    found[value.name] = value
        return tuple(found.values())

    def set(self, **params: Any) -> Self:
        known = {param.name for param in self.params()}
        for name, value in params.items():
            if name not in known:
                raise TypeError(f"{type(self).__name__} has no parameter '{name}'")
            setattr(self, name, value)
        return self

    def has(self, name: str) -> bool:
        return name in self._params

    def set_params(self) -> list[tuple[QueryParam, Any]]:
        """Parameters that are set, with their values, in declaration order."""
        return [(param, getattr(self, param.name)) for param in self.params() if self.has(param.name)]

    def copy(self) -> Self:
        clone = type(self)()
        clone._params = {
            name: list(value) if isinstance(value, list) else value
            for name, value in self._params.items()
        }
        return clone

    @property
    def sort_ascending(self) -> bool:
        """Descending unless the sort order is explicitly an ascending keyword."""
        return self.has("sort_order") and self.sort_order.strip().lower() in SORT_ASCENDING_KEYWORDS

    def validate(self) -> None:
        """Reject the first set-but-degenerate field; raises QueryValidationError."""
        for param, value in self.set_params():
            reason = param.degenerate_reason(value)
            if reason is not None:
                raise QueryValidationError(self.entity_name, param.name, reason)

        if self.has("order_by") and self.order_by not in self.allowed_columns:
            raise QueryValidationError(self.entity_name, "order_by", f"has unknown column '{self.order_by}'")

        for column in self.columns:
            if column not in self.allowed_columns:
                raise QueryValidationError(self.entity_name, "columns", f"has unknown column '{column}'")
