"""
Result models returned by a generation run.
"""
from typing import List, Optional

from pydantic import BaseModel, Field

from .enums import MergeAction


class EnumTypeReport(BaseModel):
    """What happened to one marked type"""
    type_name: str
    values: List[str] = Field(default_factory=list)
    values_action: MergeAction
    string_action: MergeAction


class GenerationReport(BaseModel):
    """Outcome of one ``generate`` call"""
    path: Optional[str] = None
    enum_types: List[EnumTypeReport] = Field(default_factory=list)
    imports_added: List[str] = Field(default_factory=list)
    original_hash: str
    output_hash: str
    output: str = ''
    written: bool = False

    @property
    def changed(self) -> bool:
        return self.original_hash != self.output_hash
