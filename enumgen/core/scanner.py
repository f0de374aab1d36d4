"""
Annotation scanner: finds the top-level types marked for generation.
"""
import logging
from typing import List, Tuple

from enumgen.models.declarations import SourceFile, TypeDeclaration

logger = logging.getLogger(__name__)

DEFAULT_MARKER = '@enumGenerated'


def scan_annotated_types(source_file: SourceFile, marker: str = DEFAULT_MARKER) -> List[Tuple[str, TypeDeclaration]]:
    """
    Find type declarations whose doc comment carries ``marker``.

    Only top-level declarations are scanned. Every spec of a grouped
    ``type ( ... )`` declaration shares the group's doc comment, so a marked
    group marks each of its types.

    Args:
        source_file: Parsed source file
        marker: Directive token requesting generation

    Returns:
        Ordered list of (type name, declaration) pairs
    """
    found = []
    for declaration in source_file.declarations:
        if not isinstance(declaration, TypeDeclaration):
            continue
        if marker not in declaration.directives:
            continue
        for spec in declaration.specs:
            logger.info(f"Found enum type: {spec.name}")
            found.append((spec.name, declaration))
    return found
