import pytest

from enumgen.core.error_handling import ParseError, SourceReadError
from enumgen.core.loader import load_source, parse_source
from enumgen.core.writer import render_source
from enumgen.models.declarations import (
    ConstantGroup,
    ImportDeclaration,
    MethodDeclaration,
    OtherDeclaration,
    TypeDeclaration,
)
from enumgen.models.enums import DeclarationKind

MIXED_SOURCE = '''// Package shapes is a fixture.
package shapes

import (
	"fmt"
	str "strings"
)

// Gender of a person.
// @enumGenerated
type gender string

// unrelated comment

type plain int

var counter int = 3

func helper() int {
	const local gender = "local"
	return 1
}

func (g gender) Values() []gender {
	return nil
}

func (gender) String() string {
	return fmt.Sprint(str.ToUpper("x"))
}
'''


def test_parse_lifts_declaration_kinds():
    source_file = parse_source(MIXED_SOURCE)
    kinds = [d.kind for d in source_file.declarations]
    assert kinds == [
        DeclarationKind.OTHER,
        DeclarationKind.IMPORT,
        DeclarationKind.TYPE,
        DeclarationKind.TYPE,
        DeclarationKind.CONSTANT_GROUP,
        DeclarationKind.OTHER,
        DeclarationKind.METHOD,
        DeclarationKind.METHOD,
    ]
    assert isinstance(source_file.declarations[0], OtherDeclaration)
    assert source_file.declarations[0].node_type == 'package_clause'


def test_unmodified_source_renders_back_unchanged():
    source_file = parse_source(MIXED_SOURCE)
    assert render_source(source_file) == MIXED_SOURCE


def test_doc_comment_group_attached_to_type():
    source_file = parse_source(MIXED_SOURCE)
    gender = source_file.declarations[2]
    assert isinstance(gender, TypeDeclaration)
    assert [s.name for s in gender.specs] == ['gender']
    assert gender.doc == ['// Gender of a person.', '// @enumGenerated']
    assert '@enumGenerated' in gender.directives


def test_comment_separated_by_blank_line_is_not_doc():
    source_file = parse_source(MIXED_SOURCE)
    plain = source_file.declarations[3]
    assert isinstance(plain, TypeDeclaration)
    assert plain.doc == []
    assert not plain.directives
    assert '// unrelated comment' in plain.leading


def test_import_specs_with_alias():
    source_file = parse_source(MIXED_SOURCE)
    imports = source_file.declarations[1]
    assert isinstance(imports, ImportDeclaration)
    assert [(s.path, s.alias) for s in imports.specs] == [('fmt', None), ('strings', 'str')]
    assert imports.specs[1].local_name == 'str'


def test_var_group_and_nested_constants():
    source_file = parse_source(MIXED_SOURCE)
    counter = source_file.declarations[4]
    assert isinstance(counter, ConstantGroup)
    assert counter.keyword == 'var'
    assert counter.specs[0].names == ['counter']
    assert counter.specs[0].type_name == 'int'

    helper = source_file.declarations[5]
    assert len(helper.children) == 1
    nested = helper.children[0]
    assert nested.keyword == 'const'
    assert nested.specs[0].names == ['local']
    assert nested.specs[0].type_name == 'gender'


def test_method_receivers():
    source_file = parse_source(MIXED_SOURCE)
    values, string = source_file.declarations[6], source_file.declarations[7]
    assert isinstance(values, MethodDeclaration)
    assert values.name == 'Values'
    assert values.receiver.name == 'g'
    assert values.receiver.type_name == 'gender'
    assert string.name == 'String'
    assert string.receiver.name is None
    assert string.receiver.type_name == 'gender'


def test_spans_are_one_based():
    source_file = parse_source(MIXED_SOURCE)
    package_clause = source_file.declarations[0]
    assert package_clause.span.start_line == 2
    assert package_clause.span.start_column == 0


def test_grouped_specs_share_one_declaration():
    source = 'package p\n\nconst (\n\ta, b color = 1, 2\n\tc        = 3\n)\n\ntype (\n\tcolor int\n\talias = color\n)\n'
    source_file = parse_source(source)
    group = source_file.declarations[1]
    assert [s.names for s in group.specs] == [['a', 'b'], ['c']]
    assert [s.type_name for s in group.specs] == ['color', None]
    types = source_file.declarations[2]
    assert [(s.name, s.is_alias) for s in types.specs] == [('color', False), ('alias', True)]


def test_parse_error_reports_position():
    with pytest.raises(ParseError) as exc_info:
        parse_source('package p\n\nfunc broken( {\n', path='broken.go')
    error = exc_info.value
    assert error.line is not None and error.line >= 1
    assert error.column is not None
    assert error.path == 'broken.go'


def test_load_missing_file(tmp_path):
    with pytest.raises(SourceReadError) as exc_info:
        load_source(str(tmp_path / 'missing.go'))
    assert exc_info.value.stage == 'read'


def test_load_keeps_crlf_line_endings(tmp_path):
    path = tmp_path / 'crlf.go'
    path.write_bytes(b'package p\r\n\r\ntype t int\r\n')
    source_file = load_source(str(path))
    assert source_file.text == 'package p\r\n\r\ntype t int\r\n'
    assert render_source(source_file) == source_file.text


def test_multi_name_spec_skips_separators():
    source_file = parse_source('package p\n\nconst a, b, c t = 1, 2, 3\n')
    assert source_file.declarations[1].specs[0].names == ['a', 'b', 'c']


def test_type_declaration_without_final_newline_parses():
    source = 'package p\n\nconst a t = 1\n\n// @enumGenerated\ntype t int'
    source_file = parse_source(source)
    assert [d.kind for d in source_file.declarations][-1] == DeclarationKind.TYPE
    assert '@enumGenerated' in source_file.declarations[-1].directives
    assert source_file.trailing == ''
    assert render_source(source_file) == source


def test_same_line_comment_stays_with_declaration():
    source = 'package p // pkg\n\n// Doc.\ntype t int // trailing\n\nconst a t = 1\n'
    source_file = parse_source(source)
    package_clause, type_decl, const_decl = source_file.declarations
    assert package_clause.source == 'package p // pkg'
    assert type_decl.leading == '\n\n// Doc.\n'
    assert type_decl.doc == ['// Doc.']
    assert type_decl.source == 'type t int // trailing'
    assert const_decl.leading == '\n\n'
    assert render_source(source_file) == source


def test_newline_style_detected():
    assert parse_source('package p\r\n').newline == '\r\n'
    assert parse_source('package p\n').newline == '\n'
    assert parse_source('package p').newline == '\n'
