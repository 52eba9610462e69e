# src/core/models/column_options.py

from typing import Any, Callable, Optional
from pydantic import BaseModel, Field, ConfigDict

class SortByColumnOptions(BaseModel):
    """
    Per-column sort customisation.
    A disabled column cannot be toggled by the user, but a key already present
    for it (e.g. set programmatically) is still honoured by the sorter.
    """
    disable: bool = Field(default=False, description="Exclude the column from user-driven toggling")
    invert: bool = Field(default=False, description="Reverse the sort without changing the indicated order")
    get_sort_value: Optional[Callable[[Any], Any]] = Field(
        default=None,
        description="Projects a cell value to a string, number or list of those before comparison",
    )

    model_config = ConfigDict(frozen=True)
