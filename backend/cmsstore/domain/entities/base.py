"""Shared base for all CMS entities: typed facades over a change-tracking record."""

import json
import uuid
from collections.abc import Mapping
from enum import Enum
from typing import Any, ClassVar, Self

from cmsstore.domain.columns import (
    AUDIT_COLUMNS,
    COLUMN_CREATED_AT,
    COLUMN_HANDLE,
    COLUMN_ID,
    COLUMN_MEMO,
    COLUMN_METAS,
    COLUMN_NAME,
    COLUMN_SOFT_DELETED_AT,
    COLUMN_STATUS,
    COLUMN_UPDATED_AT,
    SHARED_COLUMNS,
)
from cmsstore.domain.entities.record import ChangeTrackingRecord
from cmsstore.domain.exceptions import PreconditionError
from cmsstore.domain.soft_delete import MAX_DATETIME, is_soft_deleted, now_datetime_string


class EntityKind(str, Enum):
    """Closed set of entity kinds; the value doubles as the versioning type tag."""

    BLOCK = "block"
    PAGE = "page"
    SITE = "site"
    TEMPLATE = "template"
    MENU = "menu"
    MENU_ITEM = "menu_item"
    TRANSLATION = "translation"

    @property
    def versioned(self) -> bool:
        """Menus and menu items are never snapshotted."""
        return self not in (EntityKind.MENU, EntityKind.MENU_ITEM)


class EntityStatus(str, Enum):
    """Status lifecycle shared by every entity kind."""

    DRAFT = "draft"
    ACTIVE = "active"
    INACTIVE = "inactive"


# ── Field descriptors ────────────────────────────────────────────────


def _require_sequence(column: str, value: Any) -> None:
    if isinstance(value, (str, bytes)):
        raise TypeError(f"{column} must be a list of strings, got a string")


def _load_json(column: str, raw: str, expected: type) -> Any:
    """Decode a stored JSON value; malformed or mistyped values raise ValueError."""
    if not raw.strip():
        return expected()
    value = json.loads(raw)
    if not isinstance(value, expected):
        raise ValueError(f"{column} must hold a JSON {expected.__name__}, got {type(value).__name__}")
    return value


class TextField:
    """Plain string attribute stored under ``column``."""

    def __init__(self, column: str):
        self.column = column

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: "CmsEntity | None", owner: type | None = None) -> Any:
        if instance is None:
            return self
        return self.decode(instance._record.get(self.column))

    def __set__(self, instance: "CmsEntity", value: Any) -> None:
        instance._record.set(self.column, self.encode(value))

    def decode(self, raw: str) -> Any:
        return raw

    def encode(self, value: Any) -> str:
        if isinstance(value, Enum):
            value = value.value
        if not isinstance(value, str):
            raise TypeError(f"{self.column} must be a string, got {type(value).__name__}")
        return value


class ListField(TextField):
    """List of strings stored comma-separated."""

    def decode(self, raw: str) -> list[str]:
        return raw.split(",") if raw else []

    def encode(self, value: Any) -> str:
        _require_sequence(self.column, value)
        return ",".join(str(item) for item in value)


class JsonMapField(TextField):
    """String-keyed map stored as a JSON object."""

    def decode(self, raw: str) -> dict[str, str]:
        return _load_json(self.column, raw, dict)

    def encode(self, value: Any) -> str:
        return json.dumps(dict(value), ensure_ascii=False)


class JsonListField(TextField):
    """List of strings stored as a JSON array."""

    def decode(self, raw: str) -> list[str]:
        return _load_json(self.column, raw, list)

    def encode(self, value: Any) -> str:
        _require_sequence(self.column, value)
        return json.dumps(list(value), ensure_ascii=False)


class IntField(TextField):
    """Integer stored in its decimal string form."""

    def decode(self, raw: str) -> int:
        return int(raw) if raw.strip() else 0

    def encode(self, value: Any) -> str:
        return str(int(value))


# ── Base entity ──────────────────────────────────────────────────────


class CmsEntity:
    """Base for Block, Page, Site, Template, Menu, MenuItem and Translation.

    Subclasses declare ``kind`` and their extra columns with defaults in
    ``EXTRA_DEFAULTS``; ``COLUMNS`` is derived from them. A fresh entity gets
    a new ID and every default, and starts with nothing dirty. Entities read
    from the backend are built with :meth:`from_existing_data`.
    """

    kind: ClassVar[EntityKind]
    EXTRA_DEFAULTS: ClassVar[dict[str, str]] = {}
    COLUMNS: ClassVar[tuple[str, ...]] = SHARED_COLUMNS
    WRITABLE_COLUMNS: ClassVar[frozenset[str]] = frozenset()

    status = TextField(COLUMN_STATUS)
    name = TextField(COLUMN_NAME)
    handle = TextField(COLUMN_HANDLE)
    memo = TextField(COLUMN_MEMO)
    metas = JsonMapField(COLUMN_METAS)
    created_at = TextField(COLUMN_CREATED_AT)
    updated_at = TextField(COLUMN_UPDATED_AT)
    soft_deleted_at = TextField(COLUMN_SOFT_DELETED_AT)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.COLUMNS = SHARED_COLUMNS + tuple(cls.EXTRA_DEFAULTS)
        cls.WRITABLE_COLUMNS = frozenset(cls.COLUMNS) - AUDIT_COLUMNS - {COLUMN_ID}

    def __init__(self) -> None:
        self._record = ChangeTrackingRecord()
        now = now_datetime_string()
        defaults = {
            COLUMN_ID: str(uuid.uuid4()),
            COLUMN_STATUS: EntityStatus.DRAFT.value,
            COLUMN_NAME: "",
            COLUMN_HANDLE: "",
            COLUMN_MEMO: "",
            COLUMN_METAS: "{}",
            COLUMN_CREATED_AT: now,
            COLUMN_UPDATED_AT: now,
            COLUMN_SOFT_DELETED_AT: MAX_DATETIME,
            **self.EXTRA_DEFAULTS,
        }
        for column, value in defaults.items():
            self._record.set(column, value)
        self._record.mark_as_not_dirty()

    @classmethod
    def from_existing_data(cls, data: Mapping[str, str]) -> Self:
        """Build an entity from a persisted row; the result is not dirty."""
        entity = cls.__new__(cls)
        entity._record = ChangeTrackingRecord()
        entity._record.hydrate(data)
        return entity

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id!r}, status={self.status!r})>"

    # ── Identity and status ──────────────────────────────────────────

    @property
    def id(self) -> str:
        return self._record.get(COLUMN_ID)

    @property
    def is_active(self) -> bool:
        return self.status == EntityStatus.ACTIVE.value

    @property
    def is_inactive(self) -> bool:
        return self.status == EntityStatus.INACTIVE.value

    @property
    def is_soft_deleted(self) -> bool:
        """Evaluated against the clock on every access."""
        return is_soft_deleted(self.soft_deleted_at)

    # ── Change tracking ──────────────────────────────────────────────

    def data(self) -> dict[str, str]:
        return self._record.data()

    def data_changed(self) -> dict[str, str]:
        return self._record.data_changed()

    def is_dirty(self) -> bool:
        return self._record.is_dirty()

    def mark_as_not_dirty(self) -> None:
        self._record.mark_as_not_dirty()

    def assign(self, values: Mapping[str, Any]) -> Self:
        """Set several writable fields by column name through their typed accessors."""
        for column, value in values.items():
            if column not in self.WRITABLE_COLUMNS:
                raise PreconditionError(f"{self.kind.value} field '{column}' is not writable")
            setattr(self, column, value)
        return self

    def to_versioned_content(self) -> str:
        """Canonical JSON of the persistable fields, audit timestamps excluded."""
        content = {key: value for key, value in self.data().items() if key not in AUDIT_COLUMNS}
        return json.dumps(content, sort_keys=True, separators=(",", ":"), ensure_ascii=False)

    # ── Metas ────────────────────────────────────────────────────────

    def meta(self, name: str) -> str:
        return self.metas.get(name, "")

    def set_meta(self, name: str, value: str) -> None:
        self.upsert_metas({name: value})

    def upsert_metas(self, metas: Mapping[str, str]) -> None:
        current = self.metas
        current.update(metas)
        self.metas = current
