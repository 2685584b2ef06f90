"""Custom exception classes for hardhat-environments library."""


class ConfigurationError(Exception):
    """Base exception for configuration resolution errors."""

    pass


class UnknownNetworkError(ConfigurationError, KeyError):
    """Raised when a logical network is not declared in the project's registry."""

    def __str__(self) -> str:
        # KeyError quotes its message; keep plain text like the other errors
        return str(self.args[0]) if self.args else ""


class UnknownProjectError(ConfigurationError, KeyError):
    """Raised when no profile is registered under the requested project name."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class UnknownForkNetworkError(ConfigurationError, ValueError):
    """Raised in strict mode when the fork source names an undeclared network."""

    pass


class DefectiveRecordError(ConfigurationError, ValueError):
    """Raised when a deployment record is missing its address or ABI."""

    pass
