# src/core/models/props.py

from typing import Optional
from pydantic import BaseModel, Field
from src.core.enums.sort_order import SortOrder

class CellProps(BaseModel):
    """Sort state shown on a body cell."""
    order: Optional[SortOrder] = Field(None, description="Current order of the cell's column, if sorted")


class HeaderProps(CellProps):
    """Sort state shown on a column header."""
    disabled: bool = Field(default=False, description="Whether the user may toggle this column")
