# src/api/v1/sorting.py

import logging
from typing import Mapping
from fastapi import APIRouter, Depends, HTTPException
from src.core.config.settings import settings
from src.core.exceptions import StructuralError
from src.core.models.column_options import SortByColumnOptions
from src.core.models.request import ClearSortKeyRequest, ColumnSortOptionsPayload, SortRequest, ToggleSortKeyRequest
from src.core.models.response import SortKeysResponse, SortResponse
from src.logic.sort_values import get_projection
from src.logic.sorter import HierarchicalSorter
from src.services.sort_by_controller import SortByController

logger = logging.getLogger(__name__)

router = APIRouter()

def to_column_options(
    payloads: Mapping[str, ColumnSortOptionsPayload]
) -> dict[str, SortByColumnOptions]:
    """
    Converts wire column options into SortByColumnOptions, resolving named projections.
    """
    column_options: dict[str, SortByColumnOptions] = {}
    for column_id, payload in payloads.items():
        get_sort_value = get_projection(payload.sort_value) if payload.sort_value is not None else None
        column_options[column_id] = SortByColumnOptions(
            disable=payload.disable,
            invert=payload.invert,
            get_sort_value=get_sort_value,
        )
        logger.debug(f"Column '{column_id}' options: disable={payload.disable}, invert={payload.invert}, sort_value={payload.sort_value}")
    return column_options

# Dependency for the sorter
def get_sorter() -> HierarchicalSorter:
    """
    Provides a HierarchicalSorter configured with the maximum row depth.
    """
    return HierarchicalSorter(max_depth=settings.MAX_ROW_DEPTH)


@router.post(
    "/sort",
    response_model=SortResponse,
    summary="Sort a hierarchical row forest",
    description="Sorts the root rows and, recursively, every row's sub_rows by the given "
                "sort keys in priority order, applying per-column invert and sort value options."
)
async def sort_rows_endpoint(
    request: SortRequest,
    sorter: HierarchicalSorter = Depends(get_sorter)
) -> SortResponse:
    """
    API endpoint to sort a row forest.
    """
    logger.info(f"Sorting {len(request.rows)} root rows by {len(request.sort_keys)} keys.")
    try:
        sorted_rows = sorter.sort_rows(
            request.rows,
            request.sort_keys,
            to_column_options(request.column_options)
        )
    except StructuralError as e:
        logger.warning(f"Rejected row forest: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    return SortResponse(rows=sorted_rows, sort_keys=request.sort_keys)


@router.post(
    "/sort-keys/toggle",
    response_model=SortKeysResponse,
    summary="Toggle a column's sort key",
    description="Advances the column through none -> asc -> desc -> none. Shift-held toggles "
                "add to the sort (multi-sort) unless multi-sort is disabled; other toggles replace it. "
                "Toggles on disabled columns leave the keys unchanged."
)
async def toggle_sort_key_endpoint(request: ToggleSortKeyRequest) -> SortKeysResponse:
    """
    API endpoint to apply a header toggle to a key sequence.
    """
    controller = SortByController(
        column_options=to_column_options(request.column_options),
        initial_sort_keys=request.sort_keys,
        disable_multi_sort=settings.DISABLE_MULTI_SORT
    )
    controller.toggle(request.column_id, request.event)
    return SortKeysResponse(sort_keys=list(controller.sort_keys.keys))


@router.post(
    "/sort-keys/clear",
    response_model=SortKeysResponse,
    summary="Clear a column's sort key",
    description="Removes the column from the sort. Unknown and disabled columns leave the keys unchanged."
)
async def clear_sort_key_endpoint(request: ClearSortKeyRequest) -> SortKeysResponse:
    """
    API endpoint to apply a clear action to a key sequence.
    """
    controller = SortByController(
        column_options=to_column_options(request.column_options),
        initial_sort_keys=request.sort_keys
    )
    controller.clear(request.column_id)
    return SortKeysResponse(sort_keys=list(controller.sort_keys.keys))
