# querycount/core/exceptions.py

from typing import Optional

class QueryCountError(Exception):
    """Base exception for querycount-specific errors."""
    pass

class UnsupportedOperationError(QueryCountError):
    """Raised when an operation the type deliberately does not support is invoked."""
    def __init__(self, operation: str, owner: Optional[str] = None):
        target = f"{owner}.{operation}()" if owner else f"{operation}()"
        super().__init__(f"{target} not supported")
        self.operation = operation
        self.owner = owner

class ConfigurationError(QueryCountError):
    """Custom exception for invalid or unreadable configuration."""
    pass
