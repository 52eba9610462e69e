# src/core/models/request.py

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict
from src.core.enums.sort_value_projection import SortValueProjection
from src.core.models.event import ToggleEvent
from src.core.models.row import Row
from src.core.models.sort_key import SortKey

class ColumnSortOptionsPayload(BaseModel):
    """
    Wire form of per-column sort options.
    A named projection replaces the get_sort_value callable.
    """
    disable: bool = Field(default=False, description="Exclude the column from user-driven toggling")
    invert: bool = Field(default=False, description="Reverse the sort without changing the indicated order")
    sort_value: Optional[SortValueProjection] = Field(
        None, description="Named projection applied to cell values before comparison"
    )

    model_config = ConfigDict(extra='ignore')


class SortRequest(BaseModel):
    """
    Represents the input payload for sorting a row forest.
    """
    rows: list[Row] = Field(..., description="Root rows of the forest, in their original order")
    sort_keys: list[SortKey] = Field(
        default_factory=list,
        description="Active sort keys in priority order (first key is the primary sort)"
    )
    column_options: dict[str, ColumnSortOptionsPayload] = Field(
        default_factory=dict,
        description="Sort options keyed by column id"
    )

    model_config = ConfigDict(
        json_schema_extra = {
            "example": {
                "rows": [
                    {
                        "id": "0",
                        "cells": {
                            "name": {"kind": "data", "value": "Bob"},
                            "age": {"kind": "data", "value": 30}
                        }
                    },
                    {
                        "id": "1",
                        "cells": {
                            "name": {"kind": "data", "value": "Amy"},
                            "age": {"kind": "data", "value": 30}
                        },
                        "sub_rows": [
                            {"id": "1>0", "cells": {"name": {"kind": "data", "value": "Zoe"}}},
                            {"id": "1>1", "cells": {"name": {"kind": "data", "value": "Ann"}}}
                        ]
                    },
                    {
                        "id": "2",
                        "cells": {
                            "name": {"kind": "data", "value": "Amy"},
                            "age": {"kind": "data", "value": 25},
                            "actions": {"kind": "display", "label": "Edit"}
                        }
                    }
                ],
                "sort_keys": [
                    {"id": "age", "order": "desc"},
                    {"id": "name", "order": "asc"}
                ],
                "column_options": {
                    "name": {"sort_value": "casefold"}
                }
            }
        },
        extra='ignore' # Ignore extra fields in input
    )


class ToggleSortKeyRequest(BaseModel):
    """
    Represents a user toggle on a column header, applied to the given key sequence.
    """
    sort_keys: list[SortKey] = Field(default_factory=list, description="Current sort keys")
    column_id: str = Field(..., description="Column whose header was activated")
    event: ToggleEvent = Field(default_factory=ToggleEvent, description="Modifier keys held during the toggle")
    column_options: dict[str, ColumnSortOptionsPayload] = Field(
        default_factory=dict, description="Sort options keyed by column id"
    )

    model_config = ConfigDict(
        json_schema_extra = {
            "example": {
                "sort_keys": [{"id": "age", "order": "asc"}],
                "column_id": "name",
                "event": {"shift_key": True}
            }
        },
        extra='ignore'
    )


class ClearSortKeyRequest(BaseModel):
    """
    Represents an explicit clear action on a column, applied to the given key sequence.
    """
    sort_keys: list[SortKey] = Field(default_factory=list, description="Current sort keys")
    column_id: str = Field(..., description="Column to remove from the sort")
    column_options: dict[str, ColumnSortOptionsPayload] = Field(
        default_factory=dict, description="Sort options keyed by column id"
    )

    model_config = ConfigDict(extra='ignore')
