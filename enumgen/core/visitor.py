"""
Declaration walker.

Dispatches on the closed set of declaration kinds. ``walk`` visits every
top-level declaration and, right after it, the constant groups nested inside
it, which is the pre-order of the full syntax tree restricted to
declarations.
"""
from typing import Callable, Dict

from enumgen.models.declarations import (
    ConstantGroup,
    Declaration,
    ImportDeclaration,
    MethodDeclaration,
    OtherDeclaration,
    SourceFile,
    TypeDeclaration,
)
from enumgen.models.enums import DeclarationKind


class DeclarationVisitor:
    """Base visitor; override the ``visit_*`` methods you need."""

    def walk(self, source_file: SourceFile) -> None:
        for declaration in source_file.declarations:
            self.visit(declaration)
            for nested in declaration.children:
                self.visit(nested)

    def visit(self, declaration: Declaration) -> None:
        handlers: Dict[DeclarationKind, Callable] = {
            DeclarationKind.TYPE: self.visit_type_declaration,
            DeclarationKind.CONSTANT_GROUP: self.visit_constant_group,
            DeclarationKind.METHOD: self.visit_method_declaration,
            DeclarationKind.IMPORT: self.visit_import_declaration,
            DeclarationKind.OTHER: self.visit_other,
        }
        handlers[declaration.kind](declaration)

    def visit_type_declaration(self, declaration: TypeDeclaration) -> None:
        pass

    def visit_constant_group(self, declaration: ConstantGroup) -> None:
        pass

    def visit_method_declaration(self, declaration: MethodDeclaration) -> None:
        pass

    def visit_import_declaration(self, declaration: ImportDeclaration) -> None:
        pass

    def visit_other(self, declaration: OtherDeclaration) -> None:
        pass
