"""Domain-specific exceptions, framework-independent."""


class CmsStoreError(Exception):
    """Base class for every error raised by the store itself."""


class QueryValidationError(CmsStoreError):
    """Raised when a query field is set to a degenerate value.

    Always detected before any backend call and always names the field.
    """

    def __init__(self, query_name: str, field: str, reason: str):
        self.query_name = query_name
        self.field = field
        self.reason = reason
        super().__init__(f"{query_name} query: {field} {reason}")


class PreconditionError(CmsStoreError):
    """Raised when an operation receives a missing entity, query or identifier."""


class FeatureDisabledError(PreconditionError):
    """Raised when an optional feature (menus, translations, versioning) is off."""

    def __init__(self, feature: str):
        self.feature = feature
        super().__init__(f"{feature} feature is not enabled")


class EntityNotFoundError(CmsStoreError):
    """Raised when an operation needs an existing entity and none matches."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ConfigurationError(CmsStoreError):
    """Raised when store options are inconsistent."""
