"""
Renders synthesized Go declarations in gofmt layout (tab indentation, one
statement per line, opening brace on the signature line).
"""
import json
from typing import List

from enumgen.core.formatting.formatter import BaseFormatter
from enumgen.models.declarations import Declaration, ImportDeclaration, ImportSpec, MethodDeclaration
from enumgen.models.syntax import (
    CallExpression,
    CompositeLiteral,
    Identifier,
    NamedType,
    Parameter,
    ReturnStatement,
    SelectorExpression,
    SliceType,
    StringLiteral,
)


class GoFormatter(BaseFormatter):
    """Formatter for synthesized Go code."""

    def __init__(self):
        super().__init__(indent_string='\t')

    def format_declaration(self, declaration: Declaration) -> str:
        """Render a synthesized declaration."""
        if isinstance(declaration, MethodDeclaration):
            return self.format_method(declaration)
        if isinstance(declaration, ImportDeclaration):
            return self.format_import(declaration)
        raise TypeError(f'Cannot format {declaration.kind.value} declarations')

    def format_import(self, declaration: ImportDeclaration) -> str:
        specs = [self.format_import_spec(spec) for spec in declaration.specs]
        if len(specs) == 1:
            return 'import ' + specs[0]
        return 'import (\n' + self.apply_indentation('\n'.join(specs), self.indent_string) + '\n)'

    def format_import_spec(self, spec: ImportSpec) -> str:
        path = json.dumps(spec.path, ensure_ascii=False)
        return f'{spec.alias} {path}' if spec.alias else path

    def format_method(self, method: MethodDeclaration) -> str:
        receiver = method.receiver
        receiver_text = f'{receiver.name} {receiver.type_name}' if receiver.name else receiver.type_name
        params = ', '.join(self.format_parameter(p) for p in method.parameters)
        signature = f'func ({receiver_text}) {method.name}({params}){self.format_results(method.results)}'
        body = '\n'.join(self.format_statement(statement) for statement in method.body)
        if not body:
            return signature + ' {\n}'
        return f'{signature} {{\n{self.apply_indentation(body, self.indent_string)}\n}}'

    def format_results(self, results: List[Parameter]) -> str:
        if not results:
            return ''
        if len(results) == 1 and not results[0].name:
            return ' ' + self.format_type(results[0].type)
        return ' (' + ', '.join(self.format_parameter(r) for r in results) + ')'

    def format_parameter(self, parameter: Parameter) -> str:
        if parameter.name:
            return f'{parameter.name} {self.format_type(parameter.type)}'
        return self.format_type(parameter.type)

    def format_type(self, type_expr) -> str:
        if isinstance(type_expr, SliceType):
            return '[]' + self.format_type(type_expr.element)
        if isinstance(type_expr, NamedType):
            return type_expr.name
        raise TypeError(f'Cannot format type expression {type(type_expr).__name__}')

    def format_statement(self, statement: ReturnStatement) -> str:
        if not statement.results:
            return 'return'
        return 'return ' + ', '.join(self.format_expression(e) for e in statement.results)

    def format_expression(self, expression) -> str:
        if isinstance(expression, Identifier):
            return expression.name
        if isinstance(expression, StringLiteral):
            return json.dumps(expression.value, ensure_ascii=False)
        if isinstance(expression, CompositeLiteral):
            elements = ', '.join(self.format_expression(e) for e in expression.elements)
            return f'{self.format_type(expression.type)}{{{elements}}}'
        if isinstance(expression, SelectorExpression):
            return f'{self.format_expression(expression.operand)}.{expression.selector.name}'
        if isinstance(expression, CallExpression):
            arguments = ', '.join(self.format_expression(a) for a in expression.arguments)
            return f'{self.format_expression(expression.function)}({arguments})'
        raise TypeError(f'Cannot format expression {type(expression).__name__}')
