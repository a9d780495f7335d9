"""Error definitions for add-on installation."""

from typing import Any, Dict


class XPInstallError(Exception):
    """Base exception for all xpinstall errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context


class ConfigurationError(XPInstallError):
    """Configuration is invalid or missing."""
    pass


class AddonFormatError(XPInstallError):
    """Add-on manifest is missing or malformed."""

    def __init__(self, message: str, path: Any = None, **context: Any) -> None:
        super().__init__(message, path=path, **context)
        self.path = path


class InvalidSourceError(XPInstallError):
    """Add-on path is neither a directory nor a packed archive."""

    def __init__(self, message: str, path: Any = None, **context: Any) -> None:
        super().__init__(message, path=path, **context)
        self.path = path
