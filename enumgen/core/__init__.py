"""
Core components for enumgen.
"""
from .error_handling import (
    ConfigurationError,
    EnumGenError,
    InconsistentStateError,
    ParseError,
    SourceReadError,
    WriteError,
)
from .error_context import error_context, format_error_with_context
