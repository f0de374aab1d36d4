from .enums import DeclarationKind, MergeAction
from .range import CodeRange
from .declarations import (
    ConstantGroup,
    Declaration,
    DirectiveSet,
    ImportDeclaration,
    ImportSpec,
    MethodDeclaration,
    OtherDeclaration,
    Receiver,
    SourceFile,
    TypeDeclaration,
    TypeSpec,
    ValueSpec,
)
from .report import EnumTypeReport, GenerationReport
