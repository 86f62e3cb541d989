"""Custom exceptions for the client registry."""


class RegistryError(Exception):
    """Base exception for registry errors."""
    pass


class ValidationError(RegistryError):
    """Exception raised when an operation violates a client invariant."""
    pass


class InvalidNameError(ValidationError):
    """Exception raised for empty or blank client names."""
    pass


class InvalidScoreError(ValidationError):
    """Exception raised for negative or non-integer scores."""
    pass


class SelfFollowError(ValidationError):
    """Exception raised when a client tries to follow itself."""
    pass


class DuplicateFollowError(ValidationError):
    """Exception raised when a client already follows the target."""
    pass


class CapacityExceededError(ValidationError):
    """Exception raised when a client already follows the maximum allowed."""
    pass


class SelfConnectionError(ValidationError):
    """Exception raised when a client is connected to itself."""
    pass


class InvalidLimitError(ValidationError):
    """Exception raised for negative history limits."""
    pass


class RecordFormatError(ValidationError):
    """Exception raised when a bulk-load record is malformed."""
    pass


class LoadError(ValidationError):
    """Exception raised when a bulk load is rejected."""
    pass


class NotFoundError(RegistryError):
    """Exception raised when a name is absent from an index or the graph."""
    pass


class UnknownClientError(NotFoundError):
    """Exception raised when an operation references a missing client."""
    pass


class ConflictError(RegistryError):
    """Exception raised when data conflicts occur."""
    pass


class DuplicateNameError(ConflictError):
    """Exception raised when a client name is already registered."""
    pass


class HistoryCorruptionError(RegistryError):
    """Exception raised when undo finds the structures have diverged."""
    pass
