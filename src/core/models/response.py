# src/core/models/response.py

from typing import List
from pydantic import BaseModel, Field
from src.core.models.row import Row
from src.core.models.sort_key import SortKey

class SortKeysResponse(BaseModel):
    """
    Represents the key sequence after a toggle or clear action.
    """
    sort_keys: List[SortKey] = Field(..., description="Sort keys in priority order")


class SortResponse(SortKeysResponse):
    """
    Represents the output response from the sort API.
    """
    rows: List[Row] = Field(..., description="The forest sorted at every level")

    model_config = {
        "json_schema_extra": {
            "example": {
                "sort_keys": [
                    {"id": "age", "order": "desc"},
                    {"id": "name", "order": "asc"}
                ],
                "rows": [
                    {
                        "id": "1",
                        "original": None,
                        "cells": {
                            "name": {"kind": "data", "value": "Amy"},
                            "age": {"kind": "data", "value": 30}
                        },
                        "sub_rows": [
                            {"id": "1>1", "original": None, "cells": {"name": {"kind": "data", "value": "Ann"}}, "sub_rows": None},
                            {"id": "1>0", "original": None, "cells": {"name": {"kind": "data", "value": "Zoe"}}, "sub_rows": None}
                        ]
                    },
                    {
                        "id": "0",
                        "original": None,
                        "cells": {
                            "name": {"kind": "data", "value": "Bob"},
                            "age": {"kind": "data", "value": 30}
                        },
                        "sub_rows": None
                    }
                ]
            }
        }
    }
