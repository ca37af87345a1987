from __future__ import annotations


class TodoAPIError(Exception):
    """Base class for errors raised by the todo service."""


# PUBLIC_INTERFACE
class ConfigError(TodoAPIError):
    """Required configuration is missing or malformed."""


# PUBLIC_INTERFACE
class StorageError(TodoAPIError):
    """
    A storage operation failed.

    Raised for unknown drivers, unreachable databases, failed queries and rows
    that cannot be converted into a TodoEntity. Fatal during startup; mapped to
    a 500 response while serving a request.
    """
