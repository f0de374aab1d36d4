"""
Declaration merger.

Synthesized methods either overwrite the slot of the method they replace or
are appended to the end of the declaration list. Slots are never removed and
reinserted, so every other declaration keeps its position.
"""
import logging
from typing import List, Optional

from enumgen.core.error_handling import InconsistentStateError
from enumgen.models.declarations import (
    Declaration,
    ImportDeclaration,
    ImportSpec,
    MethodDeclaration,
    OtherDeclaration,
)
from enumgen.models.enums import MergeAction

logger = logging.getLogger(__name__)


def find_method_index(declarations: List[Declaration], type_name: str, method_name: str) -> Optional[int]:
    """Index of the first top-level method ``method_name`` on ``type_name``, or None."""
    for index, declaration in enumerate(declarations):
        if (isinstance(declaration, MethodDeclaration)
                and declaration.belongs_to(type_name)
                and declaration.name == method_name):
            return index
    return None


def replace_method(declarations: List[Declaration], type_name: str, method_name: str,
                   new_method: MethodDeclaration) -> int:
    """
    Overwrite the existing method in place.

    The replacement inherits the replaced slot's leading text, so comments
    and spacing above the old method stay where they were.

    Returns:
        Index of the replaced slot

    Raises:
        InconsistentStateError: If no matching method exists
    """
    index = find_method_index(declarations, type_name, method_name)
    if index is None:
        raise InconsistentStateError(type_name, method_name)
    new_method.leading = declarations[index].leading
    declarations[index] = new_method
    return index


def append_declaration(declarations: List[Declaration], declaration: Declaration,
                       newline: str = '\n') -> int:
    """Append ``declaration`` after a blank line and return its index."""
    declaration.leading = newline * 2
    declarations.append(declaration)
    return len(declarations) - 1


def merge_method(declarations: List[Declaration], exists: bool, type_name: str,
                 new_method: MethodDeclaration, newline: str = '\n') -> MergeAction:
    """
    Replace or insert ``new_method`` depending on what detection reported.

    Args:
        declarations: Top-level declarations, modified in place
        exists: Whether detection found the method on ``type_name``
        type_name: Receiver type
        new_method: Synthesized method
        newline: Line ending of the file

    Returns:
        The action taken
    """
    if exists:
        logger.info(f"Replacing existing {new_method.name} method for type {type_name}")
        replace_method(declarations, type_name, new_method.name, new_method)
        return MergeAction.REPLACED
    logger.info(f"Inserting {new_method.name} method for type {type_name}")
    append_declaration(declarations, new_method, newline)
    return MergeAction.INSERTED


def has_import(declarations: List[Declaration], path: str) -> bool:
    """Whether ``path`` is imported under its default package name."""
    default_name = path.rsplit('/', 1)[-1]
    for declaration in declarations:
        if not isinstance(declaration, ImportDeclaration):
            continue
        for spec in declaration.specs:
            if spec.path == path and spec.local_name == default_name:
                return True
    return False


def ensure_import(declarations: List[Declaration], path: str, newline: str = '\n') -> bool:
    """
    Add ``import "<path>"`` unless the file already imports it.

    The new declaration goes right after the last import declaration, or
    after the package clause when the file has no imports.

    Returns:
        True if an import declaration was added
    """
    if has_import(declarations, path):
        return False
    anchor = None
    for index, declaration in enumerate(declarations):
        if isinstance(declaration, ImportDeclaration):
            anchor = index
        elif anchor is None and isinstance(declaration, OtherDeclaration) \
                and declaration.node_type == 'package_clause':
            anchor = index
    new_import = ImportDeclaration(specs=[ImportSpec(path=path)], leading=newline * 2)
    if anchor is None:
        new_import.leading = ''
        if declarations:
            declarations[0].leading = newline * 2 + declarations[0].leading.lstrip('\r\n')
        declarations.insert(0, new_import)
    else:
        declarations.insert(anchor + 1, new_import)
    logger.info(f"Adding import {path!r}")
    return True
