"""
Go source loader.

Parses Go source with tree-sitter and lifts the top-level nodes into the
declaration model. Text between declarations (blank lines, free comments and
doc comments) is kept verbatim in each declaration's ``leading`` field, so an
unmodified file renders back byte for byte.
"""
import logging
from typing import List, Optional

from tree_sitter import Node

from enumgen.core.engine.ast_handler import ASTHandler
from enumgen.core.error_context import error_context
from enumgen.core.error_handling import ParseError, SourceReadError
from enumgen.models.declarations import (
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
from enumgen.models.range import CodeRange

logger = logging.getLogger(__name__)

VALUE_DECLARATION_TYPES = {'const_declaration', 'var_declaration'}
VALUE_SPEC_TYPES = {'const_spec', 'var_spec'}
TYPE_SPEC_TYPES = {'type_spec', 'type_alias'}


def detect_newline(text: str) -> str:
    """Line ending used by the first line of ``text``, a bare line feed if it has none."""
    index = text.find('\n')
    if index > 0 and text[index - 1] == '\r':
        return '\r\n'
    return '\n'


class GoSourceLoader:
    """
    Loads Go files into ``SourceFile`` models.

    Uses tree-sitter to parse the code and keeps the comment nodes so doc
    comments can be attached to the declarations they precede.
    """

    def __init__(self):
        self.ast_handler = ASTHandler('go')

    def load(self, path: str, encoding: str = 'utf8') -> SourceFile:
        """
        Read and parse the file at ``path``.

        Raises:
            SourceReadError: If the file cannot be read or decoded
            ParseError: If the file is not valid Go
        """
        with error_context('read', path=path):
            try:
                with open(path, 'r', encoding=encoding, newline='') as fh:
                    text = fh.read()
            except (OSError, UnicodeDecodeError) as e:
                raise SourceReadError(path, str(e)) from e
        return self.parse(text, path)

    def parse(self, text: str, path: Optional[str] = None) -> SourceFile:
        """
        Parse Go source text.

        Args:
            text: Go source code
            path: Optional path, used in error messages

        Returns:
            The lifted source file
        """
        logger.debug('Parsing Go code with tree-sitter')
        root, code_bytes = self.ast_handler.parse(text)
        if root.has_error and not text.endswith('\n') \
                and self.ast_handler.find_first_error(root) is None:
            # tree-sitter-go flags a file whose last declaration lacks a
            # terminator without producing an ERROR node
            root, _ = self.ast_handler.parse(text + '\n')
        self._raise_on_syntax_error(root, code_bytes, path)

        declarations: List[Declaration] = []
        pending_comments: List[Node] = []
        previous_end = 0
        previous_end_row = -1
        for child in root.children:
            if not child.is_named:
                continue
            if child.type == 'comment':
                if declarations and child.start_point[0] == previous_end_row:
                    # same-line comment stays with the declaration it follows
                    owner = declarations[-1]
                    owner.source = code_bytes[owner.span.start_byte:child.end_byte].decode('utf8')
                    previous_end = child.end_byte
                else:
                    pending_comments.append(child)
                continue
            declaration = self._lift(child, code_bytes)
            declaration.leading = code_bytes[previous_end:child.start_byte].decode('utf8')
            declaration.span = CodeRange.from_node(child)
            declaration.doc = self._doc_comments(pending_comments, child, previous_end_row, code_bytes)
            declaration.directives = DirectiveSet.parse(declaration.doc)
            declaration.children = [
                self._lift_value_group(node, code_bytes)
                for node in self.ast_handler.find_descendants_of_type(child, VALUE_DECLARATION_TYPES)
            ]
            declarations.append(declaration)
            pending_comments = []
            previous_end = child.end_byte
            previous_end_row = child.end_point[0]

        logger.debug(f'Lifted {len(declarations)} top-level declarations')
        return SourceFile(
            path=path,
            text=text,
            declarations=declarations,
            trailing=code_bytes[previous_end:].decode('utf8'),
            newline=detect_newline(text),
        )

    def _raise_on_syntax_error(self, root: Node, code_bytes: bytes, path: Optional[str]) -> None:
        error_node = self.ast_handler.find_first_error(root)
        if error_node is None:
            return
        line = error_node.start_point[0] + 1
        column = error_node.start_point[1] + 1
        lines = code_bytes.decode('utf8').splitlines()
        snippet = lines[line - 1] if 0 < line <= len(lines) else None
        cause = 'missing ' + error_node.type if error_node.is_missing else 'unexpected input'
        raise ParseError(f'Syntax error at line {line}, column {column}: {cause}',
                         path=path, line=line, column=column, code_snippet=snippet)

    def _doc_comments(self, comments: List[Node], node: Node, previous_end_row: int,
                      code_bytes: bytes) -> List[str]:
        """
        Return the comment group ending on the line directly above ``node``.

        A group is a run of comments with no blank line between them. A comment
        starting on the last line of the previous declaration is a trailing
        comment of that declaration, not documentation.
        """
        group: List[Node] = []
        expected_end_row = node.start_point[0] - 1
        for comment in reversed(comments):
            if comment.end_point[0] != expected_end_row or comment.start_point[0] == previous_end_row:
                break
            group.append(comment)
            expected_end_row = comment.start_point[0] - 1
        return [self.ast_handler.get_node_text(comment, code_bytes) for comment in reversed(group)]

    def _lift(self, node: Node, code_bytes: bytes) -> Declaration:
        if node.type == 'type_declaration':
            return self._lift_type_declaration(node, code_bytes)
        if node.type in VALUE_DECLARATION_TYPES:
            return self._lift_value_group(node, code_bytes)
        if node.type == 'method_declaration':
            return self._lift_method(node, code_bytes)
        if node.type == 'import_declaration':
            return self._lift_import(node, code_bytes)
        return OtherDeclaration(node_type=node.type, source=self.ast_handler.get_node_text(node, code_bytes))

    def _lift_type_declaration(self, node: Node, code_bytes: bytes) -> TypeDeclaration:
        ah = self.ast_handler
        specs = []
        for spec_node in node.named_children:
            if spec_node.type not in TYPE_SPEC_TYPES:
                continue
            name_node = ah.find_child_by_field_name(spec_node, 'name')
            specs.append(TypeSpec(name=ah.get_node_text(name_node, code_bytes),
                                  is_alias=spec_node.type == 'type_alias'))
        return TypeDeclaration(specs=specs, source=ah.get_node_text(node, code_bytes))

    def _lift_value_group(self, node: Node, code_bytes: bytes) -> ConstantGroup:
        ah = self.ast_handler
        specs = []
        for spec_node in self._value_spec_nodes(node):
            names = [ah.get_node_text(n, code_bytes) for n in ah.find_children_by_field_name(spec_node, 'name')]
            if not names:
                continue
            type_node = ah.find_child_by_field_name(spec_node, 'type')
            specs.append(ValueSpec(names=names,
                                   type_name=ah.get_node_text(type_node, code_bytes) if type_node else None))
        keyword = 'const' if node.type == 'const_declaration' else 'var'
        group = ConstantGroup(keyword=keyword, specs=specs, source=ah.get_node_text(node, code_bytes))
        group.span = CodeRange.from_node(node)
        return group

    @staticmethod
    def _value_spec_nodes(node: Node) -> List[Node]:
        """Specs that belong to this group itself, not to groups nested in its values."""
        spec_nodes = []
        for child in node.named_children:
            if child.type in VALUE_SPEC_TYPES:
                spec_nodes.append(child)
            elif child.type == 'var_spec_list':
                spec_nodes.extend(c for c in child.named_children if c.type in VALUE_SPEC_TYPES)
        return spec_nodes

    def _lift_method(self, node: Node, code_bytes: bytes) -> MethodDeclaration:
        ah = self.ast_handler
        receiver_list = ah.find_child_by_field_name(node, 'receiver')
        receiver = Receiver(type_name='')
        if receiver_list is not None:
            for parameter in receiver_list.named_children:
                if parameter.type != 'parameter_declaration':
                    continue
                name_node = ah.find_child_by_field_name(parameter, 'name')
                type_node = ah.find_child_by_field_name(parameter, 'type')
                receiver = Receiver(name=ah.get_node_text(name_node, code_bytes) if name_node else None,
                                    type_name=ah.get_node_text(type_node, code_bytes))
                break
        name = ah.get_node_text(ah.find_child_by_field_name(node, 'name'), code_bytes)
        return MethodDeclaration(receiver=receiver, name=name, source=ah.get_node_text(node, code_bytes))

    def _lift_import(self, node: Node, code_bytes: bytes) -> ImportDeclaration:
        ah = self.ast_handler
        specs = []
        for spec_node in ah.find_descendants_of_type(node, 'import_spec'):
            path_node = ah.find_child_by_field_name(spec_node, 'path')
            alias_node = ah.find_child_by_field_name(spec_node, 'name')
            specs.append(ImportSpec(path=ah.get_node_text(path_node, code_bytes).strip('"`'),
                                    alias=ah.get_node_text(alias_node, code_bytes) if alias_node else None))
        return ImportDeclaration(specs=specs, source=ah.get_node_text(node, code_bytes))


_default_loader: Optional[GoSourceLoader] = None


def _get_loader() -> GoSourceLoader:
    global _default_loader
    if _default_loader is None:
        _default_loader = GoSourceLoader()
    return _default_loader


def parse_source(text: str, path: Optional[str] = None) -> SourceFile:
    """Parse Go source text into a ``SourceFile``."""
    return _get_loader().parse(text, path)


def load_source(path: str, encoding: str = 'utf8') -> SourceFile:
    """Read and parse the Go file at ``path``."""
    return _get_loader().load(path, encoding)
