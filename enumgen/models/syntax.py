"""
Syntax fragments for synthesized Go code.

Only the shapes the generator emits are modelled: identifiers, string
literals, slice composite literals, qualified calls and return statements.
Parsed code is never lifted into these models; it keeps its source text.
"""
from typing import List, Optional, Union

from pydantic import BaseModel, Field


class Identifier(BaseModel):
    name: str


class StringLiteral(BaseModel):
    """An interpreted string literal; ``value`` is unquoted."""
    value: str


class NamedType(BaseModel):
    name: str


class SliceType(BaseModel):
    element: Union[NamedType, 'SliceType']


TypeExpr = Union[NamedType, SliceType]


class CompositeLiteral(BaseModel):
    type: SliceType
    elements: List[Identifier] = Field(default_factory=list)


class SelectorExpression(BaseModel):
    operand: Identifier
    selector: Identifier


class CallExpression(BaseModel):
    function: Union[SelectorExpression, Identifier]
    arguments: List[Union[StringLiteral, Identifier, CompositeLiteral]] = Field(default_factory=list)


Expression = Union[Identifier, StringLiteral, CompositeLiteral, SelectorExpression, CallExpression]


class ReturnStatement(BaseModel):
    results: List[Expression] = Field(default_factory=list)


class Parameter(BaseModel):
    """A parameter or result entry of a signature."""
    name: Optional[str] = None
    type: TypeExpr


SliceType.model_rebuild()
CompositeLiteral.model_rebuild()
