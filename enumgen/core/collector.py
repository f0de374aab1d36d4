"""
Value collector: gathers the constants declared with an enum's type.
"""
import logging
from typing import List

from enumgen.core.visitor import DeclarationVisitor
from enumgen.models.declarations import ConstantGroup, SourceFile

logger = logging.getLogger(__name__)


class EnumValueCollector(DeclarationVisitor):
    """Collects value names whose declared type text equals ``type_name``.

    Names are kept in encounter order and never deduplicated: a type whose
    constants are spread over several groups gets every occurrence.
    """

    def __init__(self, type_name: str, include_vars: bool = False):
        self.type_name = type_name
        self.include_vars = include_vars
        self.values: List[str] = []

    def visit_constant_group(self, declaration: ConstantGroup) -> None:
        if declaration.keyword == 'var' and not self.include_vars:
            return
        for spec in declaration.specs:
            if spec.type_name == self.type_name:
                self.values.extend(spec.names)


def collect_enum_values(source_file: SourceFile, type_name: str, include_vars: bool = False) -> List[str]:
    """
    Collect the names of all constants of type ``type_name`` anywhere in the file.

    Args:
        source_file: Parsed source file
        type_name: Enum type name
        include_vars: Also collect ``var`` declarations of the type

    Returns:
        Value names in pre-order traversal order
    """
    collector = EnumValueCollector(type_name, include_vars=include_vars)
    collector.walk(source_file)
    logger.info(f"Enum values: {collector.values}")
    return collector.values
