"""
Existing-method detector.
"""
from typing import NamedTuple

from enumgen.models.declarations import SourceFile


class ExistingMethods(NamedTuple):
    has_values: bool
    has_string: bool


def check_existing_methods(source_file: SourceFile, type_name: str,
                           values_method: str = 'Values', string_method: str = 'String') -> ExistingMethods:
    """
    Report whether ``type_name`` already has the two accessor methods.

    Matching is by method name and exact receiver type text; the receiver
    name and the method signature are ignored. A pointer receiver ``*T``
    does not count as a method on ``T``.
    """
    has_values = False
    has_string = False
    for method in source_file.iter_methods():
        if not method.belongs_to(type_name):
            continue
        if method.name == values_method:
            has_values = True
        elif method.name == string_method:
            has_string = True
    return ExistingMethods(has_values, has_string)
