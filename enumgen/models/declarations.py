"""
Models for top-level declarations.
Provides the tagged declaration variants the pipeline operates on and the
source file container that holds them in order.
"""
import logging
import re
from typing import Iterable, List, Literal, Optional

from pydantic import BaseModel, Field

from .enums import DeclarationKind
from .range import CodeRange
from .syntax import Parameter, ReturnStatement

logger = logging.getLogger(__name__)

DIRECTIVE_PATTERN = re.compile(r'@([A-Za-z_][A-Za-z0-9_]*)')


class DirectiveSet(BaseModel):
    """Directive tokens (``@name``) found in a declaration's doc comment."""
    tokens: List[str] = Field(default_factory=list)

    @classmethod
    def parse(cls, doc_lines: Iterable[str]) -> 'DirectiveSet':
        tokens: List[str] = []
        for line in doc_lines:
            for match in DIRECTIVE_PATTERN.finditer(line):
                token = match.group(0)
                if token not in tokens:
                    tokens.append(token)
        return cls(tokens=tokens)

    def __contains__(self, token: object) -> bool:
        if not isinstance(token, str):
            return False
        if not token.startswith('@'):
            token = '@' + token
        return token in self.tokens

    def __bool__(self) -> bool:
        return bool(self.tokens)


class Declaration(BaseModel):
    """Common shape of every top-level declaration.

    ``leading`` is the verbatim text between the previous declaration and this
    one, doc comments included. ``source`` is the verbatim declaration text;
    it is ``None`` for synthesized declarations, which are rendered from their
    syntax fragments.
    """
    kind: DeclarationKind
    leading: str = ''
    source: Optional[str] = None
    span: Optional[CodeRange] = None
    doc: List[str] = Field(default_factory=list)
    directives: DirectiveSet = Field(default_factory=DirectiveSet)
    children: List['ConstantGroup'] = Field(default_factory=list)

    @property
    def is_synthesized(self) -> bool:
        return self.source is None


class TypeSpec(BaseModel):
    name: str
    is_alias: bool = False


class TypeDeclaration(Declaration):
    kind: Literal[DeclarationKind.TYPE] = DeclarationKind.TYPE
    specs: List[TypeSpec] = Field(default_factory=list)


class ValueSpec(BaseModel):
    """One ``name1, name2 T = ...`` line; the value expression is not kept."""
    names: List[str] = Field(default_factory=list)
    type_name: Optional[str] = None


class ConstantGroup(Declaration):
    kind: Literal[DeclarationKind.CONSTANT_GROUP] = DeclarationKind.CONSTANT_GROUP
    keyword: Literal['const', 'var'] = 'const'
    specs: List[ValueSpec] = Field(default_factory=list)


class Receiver(BaseModel):
    name: Optional[str] = None
    type_name: str


class MethodDeclaration(Declaration):
    kind: Literal[DeclarationKind.METHOD] = DeclarationKind.METHOD
    receiver: Receiver
    name: str
    parameters: List[Parameter] = Field(default_factory=list)
    results: List[Parameter] = Field(default_factory=list)
    body: List[ReturnStatement] = Field(default_factory=list)

    def belongs_to(self, type_name: str) -> bool:
        return self.receiver.type_name == type_name


class ImportSpec(BaseModel):
    path: str
    alias: Optional[str] = None

    @property
    def local_name(self) -> str:
        """Name the package is referenced by in this file."""
        if self.alias:
            return self.alias
        return self.path.rsplit('/', 1)[-1]


class ImportDeclaration(Declaration):
    kind: Literal[DeclarationKind.IMPORT] = DeclarationKind.IMPORT
    specs: List[ImportSpec] = Field(default_factory=list)


class OtherDeclaration(Declaration):
    kind: Literal[DeclarationKind.OTHER] = DeclarationKind.OTHER
    node_type: str = ''


class SourceFile(BaseModel):
    """One parsed Go file: ordered declarations plus the text after the last one.

    ``newline`` is the file's line ending, used for synthesized text.
    """
    path: Optional[str] = None
    text: str = ''
    declarations: List[Declaration] = Field(default_factory=list)
    trailing: str = ''
    newline: str = '\n'

    def iter_methods(self) -> Iterable[MethodDeclaration]:
        for declaration in self.declarations:
            if isinstance(declaration, MethodDeclaration):
                yield declaration

    def imports(self) -> List[ImportSpec]:
        specs: List[ImportSpec] = []
        for declaration in self.declarations:
            if isinstance(declaration, ImportDeclaration):
                specs.extend(declaration.specs)
        return specs


for _model in (Declaration, TypeDeclaration, ConstantGroup, MethodDeclaration,
               ImportDeclaration, OtherDeclaration, SourceFile):
    _model.model_rebuild()
