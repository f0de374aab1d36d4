from .models.enums import DeclarationKind, MergeAction
from .models.report import EnumTypeReport, GenerationReport
from .core.config import GenerationOptions, config
from .core.error_handling import (
    EnumGenError,
    InconsistentStateError,
    ParseError,
    SourceReadError,
    WriteError,
)
from .main import EnumGenerator, generate

__version__ = "1.0.0"
__all__ = [
    "EnumGenerator",
    "generate",
    "GenerationOptions",
    "GenerationReport",
    "EnumTypeReport",
    "DeclarationKind",
    "MergeAction",
    "EnumGenError",
    "ParseError",
    "SourceReadError",
    "WriteError",
    "InconsistentStateError",
    "config",
]
