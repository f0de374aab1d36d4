"""
Core enumerations for the enumgen declaration model.
"""
from enum import Enum

class DeclarationKind(str, Enum):
    """Closed set of top-level declaration variants"""
    TYPE = 'type'
    CONSTANT_GROUP = 'constant_group'
    METHOD = 'method'
    IMPORT = 'import'
    OTHER = 'other'

class MergeAction(str, Enum):
    """How a synthesized method ended up in the declaration list"""
    INSERTED = 'inserted'
    REPLACED = 'replaced'
