# src/core/models/row.py

from typing import Annotated, Any, Literal, Optional, Union
from pydantic import BaseModel, Field, ConfigDict

class DataCell(BaseModel):
    """
    A body cell backed by a value from the row's data item.
    Only data cells carry a value that can take part in sorting.
    """
    kind: Literal["data"] = "data"
    value: Any = Field(None, description="Cell value (string, number, list of those, or anything else)")

    model_config = ConfigDict(frozen=True)


class DisplayCell(BaseModel):
    """
    A body cell that only renders content (group labels, action columns, ...).
    It never contributes to the sort order.
    """
    kind: Literal["display"] = "display"
    label: Optional[str] = Field(None, description="Rendered content of the cell")

    model_config = ConfigDict(frozen=True)


Cell = Annotated[Union[DataCell, DisplayCell], Field(discriminator="kind")]


class Row(BaseModel):
    """
    A body row: a mapping from column id to cell plus optional nested sub-rows.
    Rows are immutable; sorting produces copies that only differ in sub_rows.
    """
    id: str = Field(..., description="Identifier of the row")
    original: Any = Field(None, description="The data item the row was built from")
    cells: dict[str, Cell] = Field(default_factory=dict, description="Cells keyed by column id")
    sub_rows: Optional[list["Row"]] = Field(None, description="Nested rows, absent for leaf rows")

    model_config = ConfigDict(frozen=True)

    def cell_for_id(self, column_id: str) -> Optional[Union[DataCell, DisplayCell]]:
        """Returns the cell for the given column, or None if the row has no such column."""
        return self.cells.get(column_id)
