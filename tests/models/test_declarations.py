from enumgen.models.declarations import (
    DirectiveSet,
    ImportSpec,
    MethodDeclaration,
    Receiver,
    SourceFile,
    TypeDeclaration,
)
from enumgen.models.enums import DeclarationKind
from enumgen.models.report import GenerationReport


def test_directive_set_parses_tokens_once():
    directives = DirectiveSet.parse(['// Gender. @enumGenerated', '/* @other and @enumGenerated */'])
    assert directives.tokens == ['@enumGenerated', '@other']
    assert '@enumGenerated' in directives
    assert 'other' in directives
    assert '@missing' not in directives


def test_directive_set_requires_whole_token():
    directives = DirectiveSet.parse(['// @enumGeneratedV2'])
    assert '@enumGenerated' not in directives


def test_empty_directive_set_is_falsy():
    assert not DirectiveSet.parse(['// plain comment'])


def test_declaration_kinds_are_fixed():
    method = MethodDeclaration(receiver=Receiver(type_name='t'), name='Values')
    assert method.kind == DeclarationKind.METHOD
    assert method.belongs_to('t')
    assert not method.belongs_to('*t')
    assert TypeDeclaration().kind == DeclarationKind.TYPE


def test_import_local_name():
    assert ImportSpec(path='encoding/json').local_name == 'json'
    assert ImportSpec(path='fmt', alias='f').local_name == 'f'


def test_source_file_helpers():
    method = MethodDeclaration(receiver=Receiver(type_name='t'), name='String', source='func (t) String() string { return "" }')
    source_file = SourceFile(declarations=[TypeDeclaration(source='type t int'), method])
    assert list(source_file.iter_methods()) == [method]
    assert source_file.imports() == []


def test_report_changed():
    assert GenerationReport(original_hash='a', output_hash='b').changed
    assert not GenerationReport(original_hash='a', output_hash='a').changed
