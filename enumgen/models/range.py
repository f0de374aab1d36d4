from typing import Optional

from pydantic import BaseModel


class CodeRange(BaseModel):
    """Represents a range in source code (1-based lines, 0-based columns and bytes)"""
    start_line: int
    end_line: int
    start_column: Optional[int] = None
    end_column: Optional[int] = None
    start_byte: Optional[int] = None
    end_byte: Optional[int] = None

    @classmethod
    def from_node(cls, node) -> 'CodeRange':
        """Build a range from a tree-sitter node."""
        return cls(
            start_line=node.start_point[0] + 1,
            end_line=node.end_point[0] + 1,
            start_column=node.start_point[1],
            end_column=node.end_point[1],
            start_byte=node.start_byte,
            end_byte=node.end_byte,
        )
