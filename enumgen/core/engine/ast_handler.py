"""
AST Handler for enumgen providing a unified interface for tree-sitter operations.
"""
import logging
from typing import Iterator, List, Optional, Tuple

from tree_sitter import Node

from enumgen.core.engine.languages import LANGUAGES, get_parser

logger = logging.getLogger(__name__)

class ASTHandler:
    """
    Handles Abstract Syntax Tree operations using tree-sitter.
    Provides a unified interface for parsing and navigating syntax trees.
    """

    def __init__(self, language_code: str = 'go'):
        """
        Initialize the AST handler.

        Args:
            language_code: Language code (only 'go' is registered)
        """
        self.language_code = language_code
        self.parser = get_parser(language_code)
        self.language = LANGUAGES[language_code]

    def parse(self, code: str) -> Tuple[Node, bytes]:
        """
        Parse source code into an AST.

        Args:
            code: Source code as string

        Returns:
            Tuple of (root_node, code_bytes)
        """
        code_bytes = code.encode('utf8')
        tree = self.parser.parse(code_bytes)
        return (tree.root_node, code_bytes)

    def get_node_text(self, node: Optional[Node], code_bytes: bytes) -> str:
        """
        Get the text content of a node.

        Args:
            node: Tree-sitter node
            code_bytes: Source code as bytes

        Returns:
            String content of the node, empty for a missing node
        """
        if node is None:
            return ''
        return code_bytes[node.start_byte:node.end_byte].decode('utf8')

    def find_child_by_field_name(self, node: Optional[Node], field_name: str) -> Optional[Node]:
        """
        Find a child node by field name.

        Args:
            node: Parent node
            field_name: Field name to find

        Returns:
            Child node or None if not found
        """
        if node is None:
            return None
        return node.child_by_field_name(field_name)

    def find_children_by_field_name(self, node: Optional[Node], field_name: str) -> List[Node]:
        """
        Named children stored under ``field_name`` (e.g. every name of a const spec).

        Anonymous tokens such as the commas between names share the field and
        are skipped.
        """
        if node is None:
            return []
        return [child for child in node.children_by_field_name(field_name) if child.is_named]

    def walk(self, node: Node) -> Iterator[Node]:
        """Yield ``node`` and all of its descendants in pre-order."""
        stack = [node]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))

    def find_descendants_of_type(self, node: Node, node_types) -> List[Node]:
        """
        Collect the descendants of ``node`` (not ``node`` itself) whose type is
        in ``node_types``, in pre-order.
        """
        if isinstance(node_types, str):
            node_types = {node_types}
        walker = self.walk(node)
        next(walker)
        return [current for current in walker if current.type in node_types]

    def find_first_error(self, root: Node) -> Optional[Node]:
        """
        Find the first node tree-sitter could not fit into the grammar.

        Returns:
            The first ERROR or missing node in pre-order, or None if there is none
        """
        if not root.has_error:
            return None
        for node in self.walk(root):
            if node.type == 'ERROR' or node.is_missing:
                return node
        logger.debug("Tree reports an error but no ERROR or missing node was found")
        return None
