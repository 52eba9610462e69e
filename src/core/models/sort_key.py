# src/core/models/sort_key.py

from pydantic import BaseModel, Field, ConfigDict
from src.core.enums.sort_order import SortOrder

class SortKey(BaseModel):
    """
    One active sort criterion: the column to sort by and its direction.
    The position of a key within a sequence is its priority.
    """
    id: str = Field(..., description="Identifier of the column to sort by")
    order: SortOrder = Field(..., description="Sort direction for the column")

    model_config = ConfigDict(frozen=True)
