"""
Base formatter class for enumgen.
"""


class BaseFormatter:
    """Base class for code formatters."""

    def __init__(self, indent_string: str = '    '):
        """
        Initialize the formatter.

        Args:
            indent_string: Text of one indentation level
        """
        self.indent_string = indent_string

    def apply_indentation(self, code: str, base_indent: str) -> str:
        """
        Apply indentation to the code.

        Args:
            code: Code to indent
            base_indent: Base indentation to apply

        Returns:
            Indented code
        """
        lines = code.splitlines()
        result = []
        for line in lines:
            if line.strip():
                result.append(base_indent + line.lstrip())
            else:
                result.append('')
        return '\n'.join(result)
