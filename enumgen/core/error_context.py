"""
Error context enhancement for enumgen.

Every pipeline stage runs inside ``error_context`` so that an exception
escaping the stage names the stage it came from. Exceptions that are not
``EnumGenError``s are wrapped, with the original preserved as ``__cause__``.
"""
import contextlib
import logging
from typing import Any, Dict

from enumgen.core.error_handling import EnumGenError

logger = logging.getLogger('enumgen')

@contextlib.contextmanager
def error_context(stage: str, **kwargs):
    """
    Context manager for adding execution context to exceptions.

    Args:
        stage: Pipeline stage name (e.g. 'parse', 'merge', 'write')
        **kwargs: Additional context data

    Yields:
        None

    Example:
        ```python
        with error_context('parse', path=path):
            source_file = parse_source(text, path)
        ```
    """
    try:
        yield
    except EnumGenError as e:
        # The innermost stage wins
        if 'stage' not in e.context:
            e.add_context('stage', stage)
        for key, value in kwargs.items():
            if value is not None and key not in e.context:
                e.add_context(key, value)
        raise
    except Exception as e:
        wrapped = EnumGenError(f"Error in {stage}: {e}")
        wrapped.add_context('stage', stage)
        for key, value in kwargs.items():
            if value is not None:
                wrapped.add_context(key, value)
        logger.debug(f"Wrapped {type(e).__name__} raised during {stage}")
        raise wrapped from e

def format_error_with_context(e: Exception) -> str:
    """
    Format an exception for display, naming the failing stage first.

    Args:
        e: The exception to format

    Returns:
        A single-line description of the failure
    """
    if not isinstance(e, EnumGenError):
        return f"{type(e).__name__}: {e}"
    details: Dict[str, Any] = {k: v for k, v in e.context.items() if k != 'stage'}
    prefix = f"[{e.stage}] " if e.stage else ''
    if not details:
        return f"{prefix}{e.message}"
    context_str = ', '.join(f"{k}={v}" for k, v in details.items())
    return f"{prefix}{e.message} ({context_str})"
