"""
Method synthesizer: builds the ``Values`` and ``String`` accessors as
syntax fragments. Nothing is rendered or executed here.
"""
from typing import Sequence

from enumgen.models.declarations import MethodDeclaration, Receiver
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


def build_values_method(type_name: str, values: Sequence[str], receiver_name: str = 'g',
                        method_name: str = 'Values') -> MethodDeclaration:
    """
    Build ``func (g T) Values() []T { return []T{v1, v2, ...} }``.

    An empty ``values`` sequence yields an empty slice literal.
    """
    slice_type = SliceType(element=NamedType(name=type_name))
    literal = CompositeLiteral(type=slice_type, elements=[Identifier(name=v) for v in values])
    return MethodDeclaration(
        receiver=Receiver(name=receiver_name, type_name=type_name),
        name=method_name,
        results=[Parameter(type=slice_type)],
        body=[ReturnStatement(results=[literal])],
    )


def build_string_method(type_name: str, receiver_name: str = 'g', method_name: str = 'String',
                        format_verb: str = '%v') -> MethodDeclaration:
    """
    Build ``func (g T) String() string { return fmt.Sprintf("%v", g) }``.

    The receiver is formatted with the default verb; collected value names
    play no part.
    """
    call = CallExpression(
        function=SelectorExpression(operand=Identifier(name='fmt'), selector=Identifier(name='Sprintf')),
        arguments=[StringLiteral(value=format_verb), Identifier(name=receiver_name)],
    )
    return MethodDeclaration(
        receiver=Receiver(name=receiver_name, type_name=type_name),
        name=method_name,
        results=[Parameter(type=NamedType(name='string'))],
        body=[ReturnStatement(results=[call])],
    )
