"""Domain exceptions."""


class AclSyncError(Exception):
    """Base exception for aclsync."""

    pass


class NotFound(AclSyncError):
    """Object or its permissions are absent on the platform."""

    pass


class ResolutionError(AclSyncError):
    """Identity, path or creator lookup failed."""

    pass


class UnknownObjectType(AclSyncError):
    """Object type tag or reference is not in the registry."""

    pass


class ValidationError(AclSyncError):
    """Declared permissions are not acceptable for the object."""

    pass


class TransportError(AclSyncError):
    """Platform API call failed."""

    def __init__(self, status_code: int, message: str, error_code: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error_code = error_code

    def __str__(self) -> str:
        if self.error_code:
            return f"{self.error_code}: {self.message}"
        return self.message
