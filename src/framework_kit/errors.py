"""Exceptions raised by framework lifecycle operations.

Storage failures are not wrapped: they surface as the builtin ``OSError``
family (``FileNotFoundError``, ``PermissionError``, ...) exactly as the
file system integration raised them.
"""


class FrameworkKitError(Exception):
    """Base class for all framework-kit errors."""


class CatalogLoadError(FrameworkKitError):
    """Raised when the framework catalog is missing or cannot be parsed."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load framework catalog from {source}: {reason}")


class PackageNotFoundError(FrameworkKitError):
    """Raised when a framework id is not present in the catalog."""

    def __init__(self, framework_id: str, operation: str) -> None:
        self.framework_id = framework_id
        self.operation = operation
        super().__init__(f"Cannot {operation} '{framework_id}': framework not found in catalog")


class NotInstalledError(FrameworkKitError):
    """Raised when an operation needs an installed framework file that is absent."""

    def __init__(self, framework_id: str, operation: str) -> None:
        self.framework_id = framework_id
        self.operation = operation
        super().__init__(f"Cannot {operation} '{framework_id}': framework is not installed")


class ConflictError(FrameworkKitError):
    """Raised when an install target already exists and no resolution was requested."""

    def __init__(self, framework_id: str, target: str) -> None:
        self.framework_id = framework_id
        self.target = target
        super().__init__(
            f"Cannot install '{framework_id}': {target} already exists "
            "(use overwrite or merge to resolve)"
        )


class UserCancelledError(FrameworkKitError):
    """Raised when the user declines an interactive flow."""

    def __init__(self, framework_id: str, operation: str) -> None:
        self.framework_id = framework_id
        self.operation = operation
        super().__init__(f"{operation.capitalize()} of '{framework_id}' cancelled by user")


class RegistryLoadError(FrameworkKitError):
    """Raised when the installed-frameworks registry exists but cannot be parsed.

    The document is left as it is on disk; nothing is written over it.
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(
            f"Failed to read framework registry {source}: {reason} "
            "(fix or remove the file to continue)"
        )
