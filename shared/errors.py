"""Exception types shared by the tool servers."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Startup configuration is missing or invalid (fatal)."""


class UnknownToolError(LookupError):
    """Requested tool is not in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ArgumentValidationError(ValueError):
    """Tool arguments violate a declared schema constraint."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"'{field}' {reason}")


class BackendError(RuntimeError):
    """A provider call failed in a way the adapter detected itself."""


class ModelNotFoundError(KeyError):
    """Model name is not in the catalog. Callers treat this as non-fatal."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Model not found in catalog: {self.name}"
