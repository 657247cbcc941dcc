"""Change-tracking record: the flat string map every entity is built on."""

from collections.abc import Mapping


class ChangeTrackingRecord:
    """Holds the field map of one entity and the keys mutated since the last persist.

    Every write goes through :meth:`set`, which marks the key dirty even when
    the value does not change, so re-assigning a value forces it onto the next
    partial UPDATE. Not safe for concurrent mutation.
    """

    def __init__(self) -> None:
        self._fields: dict[str, str] = {}
        self._changed: set[str] = set()

    def get(self, key: str) -> str:
        return self._fields.get(key, "")

    def set(self, key: str, value: str) -> None:
        self._fields[key] = value
        self._changed.add(key)

    def data(self) -> dict[str, str]:
        return dict(self._fields)

    def data_changed(self) -> dict[str, str]:
        return {key: self._fields[key] for key in self._changed}

    def is_dirty(self) -> bool:
        return bool(self._changed)

    def mark_as_not_dirty(self) -> None:
        self._changed.clear()

    def hydrate(self, existing: Mapping[str, str]) -> None:
        """Load a baseline that is already persisted; nothing is left dirty."""
        self._fields = {key: value for key, value in existing.items()}
        self._changed = set()
