"""
Error handling utilities for enumgen.

This module provides the exception hierarchy used throughout the generator.
Every exception carries a context dictionary that is enriched as it propagates
through the pipeline stages (see ``enumgen.core.error_context``).
"""
import logging
from typing import Any, Optional

logger = logging.getLogger('enumgen')

class EnumGenError(Exception):
    """Base class for all enumgen exceptions.

    All exceptions specific to enumgen inherit from this class so callers can
    handle every generation failure with a single ``except`` clause.
    """
    def __init__(self, message: str, **kwargs):
        self.message = message
        self.context = kwargs.get('context', {})

        # Capture any additional context information
        for key, value in kwargs.items():
            if key != 'context' and value is not None:
                self.context[key] = value

        super().__init__(message)

    def add_context(self, key: str, value: Any) -> None:
        """Add additional context information to the exception.

        Args:
            key: The context key
            value: The context value
        """
        self.context[key] = value

    @property
    def stage(self) -> Optional[str]:
        """Pipeline stage the error was raised in, if known."""
        return self.context.get('stage')

    def __str__(self) -> str:
        """Return a string representation of the exception.

        If context information is available, it will be included in the string.
        """
        if not self.context:
            return self.message

        context_str = ', '.join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} [Context: {context_str}]"

# ===== Configuration Errors =====

class ConfigurationError(EnumGenError):
    """Exception raised for unknown or invalid configuration settings."""
    def __init__(self, section: str, key: Optional[str] = None, **kwargs):
        message = f"Unknown configuration setting '{section}'"
        if key:
            message = f"Unknown configuration setting '{section}.{key}'"
        super().__init__(message, section=section, key=key, **kwargs)
        self.section = section
        self.key = key

# ===== Input Errors =====

class SourceReadError(EnumGenError):
    """Exception raised when the source file cannot be read."""
    def __init__(self, path: str, reason: str, **kwargs):
        message = f"Cannot read source file '{path}': {reason}"
        super().__init__(message, path=path, **kwargs)
        self.path = path
        self.reason = reason

class ParseError(EnumGenError):
    """Exception raised when the source text is not syntactically valid.

    Line and column are 1-based and point at the first node tree-sitter
    could not fit into the grammar.
    """
    def __init__(self, message: str, path: Optional[str] = None,
                 line: Optional[int] = None, column: Optional[int] = None,
                 code_snippet: Optional[str] = None, **kwargs):
        super().__init__(message, path=path, line=line, column=column, **kwargs)
        self.path = path
        self.line = line
        self.column = column
        self.code_snippet = code_snippet

    @property
    def position(self):
        if self.line is None:
            return None
        return (self.line, self.column)

# ===== Generation Errors =====

class InconsistentStateError(EnumGenError):
    """Exception raised when method detection and replacement disagree.

    Detection reported an existing method but no matching declaration was
    found when replacing it. Appending instead would duplicate the method.
    """
    def __init__(self, type_name: str, method_name: str, **kwargs):
        message = (f"Method '{method_name}' on type '{type_name}' was detected "
                   f"but could not be found for replacement")
        super().__init__(message, type_name=type_name, method_name=method_name, **kwargs)
        self.type_name = type_name
        self.method_name = method_name

# ===== Output Errors =====

class WriteError(EnumGenError):
    """Exception raised when the generated source cannot be written.

    No rollback is attempted. With non-atomic writes the destination may be
    left empty or partially written.
    """
    def __init__(self, path: str, reason: str, **kwargs):
        message = f"Cannot write generated source to '{path}': {reason}"
        super().__init__(message, path=path, **kwargs)
        self.path = path
        self.reason = reason
