"""
querycount: emission counting for reactive query streams

Wraps every item of an async query stream in a QueryCountResult so consumers
can tell the initial result from subsequent updates.
"""

from .core.exceptions import QueryCountError, UnsupportedOperationError, ConfigurationError
from .core.logging_setup import get_logger
from .counter import QueryCounter
from .result import QueryCountResult
from .stream_operators import StreamOperators
from .transformer import QueryCountTransformer, count_queries
from .filters import updates_only, initial_only

__all__ = [
    'QueryCounter',
    'QueryCountResult',
    'QueryCountTransformer',
    'count_queries',
    'updates_only',
    'initial_only',
    'StreamOperators',
    'QueryCountError',
    'UnsupportedOperationError',
    'ConfigurationError',
    'get_logger'
]
