import os

import pytest

from enumgen.core.error_handling import WriteError
from enumgen.core.loader import parse_source
from enumgen.core.merger import append_declaration
from enumgen.core.synthesizer import build_string_method
from enumgen.core.writer import render_source, write_source


def test_render_appends_synthesized_declaration():
    source_file = parse_source('package p\n\ntype t int\n')
    append_declaration(source_file.declarations, build_string_method('t'))
    assert render_source(source_file) == (
        'package p\n\ntype t int\n\n'
        'func (g t) String() string {\n\treturn fmt.Sprintf("%v", g)\n}\n'
    )


def test_render_adds_final_newline_after_synthesized_tail():
    source_file = parse_source('package p\n\ntype t int')
    append_declaration(source_file.declarations, build_string_method('t'))
    assert render_source(source_file).endswith('}\n')


@pytest.mark.parametrize('atomic', [True, False])
def test_write_replaces_content(tmp_path, atomic):
    path = tmp_path / 'out.go'
    path.write_text('old content that is longer than the new one\n')
    write_source(str(path), 'package p\n', atomic=atomic)
    assert path.read_text() == 'package p\n'


def test_atomic_write_leaves_no_temporary_files(tmp_path):
    path = tmp_path / 'out.go'
    path.write_text('package p\n')
    write_source(str(path), 'package q\n')
    assert sorted(os.listdir(tmp_path)) == ['out.go']


@pytest.mark.parametrize('atomic', [True, False])
def test_write_to_missing_directory_raises(tmp_path, atomic):
    target = tmp_path / 'missing' / 'out.go'
    with pytest.raises(WriteError) as exc_info:
        write_source(str(target), 'package p\n', atomic=atomic)
    assert exc_info.value.path == str(target)


def test_failed_rename_cleans_up(tmp_path, monkeypatch):
    path = tmp_path / 'out.go'
    path.write_text('package p\n')

    def failing_replace(src, dst):
        raise OSError('disk full')

    monkeypatch.setattr(os, 'replace', failing_replace)
    with pytest.raises(WriteError):
        write_source(str(path), 'package q\n')
    assert sorted(os.listdir(tmp_path)) == ['out.go']
    assert path.read_text() == 'package p\n'
