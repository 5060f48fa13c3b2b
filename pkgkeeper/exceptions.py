"""Custom exceptions for pkgkeeper."""


class PackageKeeperError(Exception):
    """Base exception for all pkgkeeper errors."""

    pass


class ConfigurationError(PackageKeeperError):
    """Exception raised when configuration is invalid."""

    pass


class ArgumentError(PackageKeeperError, ValueError):
    """Exception raised when a value object is built from malformed arguments."""

    pass


class RestoreError(PackageKeeperError):
    """Exception raised when an external restore invocation fails."""

    pass


class ScanError(PackageKeeperError):
    """Exception raised when a folder or package file cannot be read."""

    pass
