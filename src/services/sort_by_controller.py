# src/services/sort_by_controller.py

import logging
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

from src.core.enums.sort_order import SortOrder
from src.core.models.column_options import SortByColumnOptions
from src.core.models.props import CellProps, HeaderProps
from src.core.models.row import Row
from src.core.models.sort_key import SortKey
from src.logic.events import MultiSortEventPredicate, is_shift_click
from src.logic.sort_keys import SortKeySequence
from src.logic.sorter import HierarchicalSorter

logger = logging.getLogger(__name__)

RowsObserver = Callable[[list[Row]], None]

class SortByController:
    """
    Orchestrates sorting for one table.
    It owns the sort key state, guards user toggles against disabled and non-data
    columns, recomputes the sorted forest whenever rows or keys change, and
    notifies registered observers with the result.
    """
    def __init__(
        self,
        column_options: Optional[Mapping[str, SortByColumnOptions]] = None,
        initial_sort_keys: Optional[Iterable[SortKey]] = None,
        disable_multi_sort: bool = False,
        is_multi_sort_event: MultiSortEventPredicate = is_shift_click,
        sorter: Optional[HierarchicalSorter] = None,
    ):
        self._column_options: dict[str, SortByColumnOptions] = dict(column_options or {})
        self._disable_multi_sort = disable_multi_sort
        self._is_multi_sort_event = is_multi_sort_event
        self._sorter = sorter or HierarchicalSorter()
        self.sort_keys = SortKeySequence(initial_sort_keys)
        self.disabled_ids: frozenset[str] = frozenset(
            column_id for column_id, options in self._column_options.items() if options.disable
        )
        self._pre_sorted_rows: list[Row] = []
        self._sorted_rows: list[Row] = []
        self._observers: list[RowsObserver] = []
        logger.debug(f"SortByController initialized. Keys: {self.sort_keys!r}, disabled: {sorted(self.disabled_ids)}, disable_multi_sort={disable_multi_sort}")

    @property
    def pre_sorted_rows(self) -> list[Row]:
        """The rows as last passed to derive_rows, in their original order."""
        return list(self._pre_sorted_rows)

    @property
    def sorted_rows(self) -> list[Row]:
        return list(self._sorted_rows)

    def subscribe(self, observer: RowsObserver) -> Callable[[], None]:
        """
        Registers an observer called with the sorted rows after every recompute.
        Returns a function that unregisters it.
        """
        self._observers.append(observer)

        def unsubscribe():
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def derive_rows(self, rows: Sequence[Row]) -> list[Row]:
        """
        Takes a new snapshot of the rows, sorts it with the current keys,
        notifies observers and returns the sorted rows.
        """
        self._pre_sorted_rows = list(rows)
        return self._recompute()

    def _recompute(self) -> list[Row]:
        self._sorted_rows = self._sorter.sort_rows(self._pre_sorted_rows, self.sort_keys.keys, self._column_options)
        for observer in list(self._observers):
            observer(self.sorted_rows)
        return self.sorted_rows

    def is_multi_sort(self, event: Any) -> bool:
        """Decides whether a toggle event adds to the sort or replaces it."""
        if self._disable_multi_sort:
            return False
        return bool(self._is_multi_sort_event(event))

    def toggle(self, column_id: str, event: Any = None, is_data: bool = True) -> bool:
        """
        Handles a user toggle on a column header.
        Returns False if the toggle was suppressed (non-data or disabled column).
        """
        if not is_data or column_id in self.disabled_ids:
            logger.debug(f"Ignoring toggle on column '{column_id}' (is_data={is_data}, disabled={column_id in self.disabled_ids}).")
            return False
        self.sort_keys.toggle(column_id, multi_sort=self.is_multi_sort(event))
        self._recompute()
        return True

    def clear(self, column_id: str, is_data: bool = True) -> bool:
        """
        Handles an explicit clear on a column.
        Returns False if the clear was suppressed (non-data or disabled column).
        """
        if not is_data or column_id in self.disabled_ids:
            logger.debug(f"Ignoring clear on column '{column_id}' (is_data={is_data}, disabled={column_id in self.disabled_ids}).")
            return False
        self.sort_keys.clear(column_id)
        self._recompute()
        return True

    def set_sort_keys(self, keys: Iterable[SortKey]):
        """Replaces the keys programmatically; disabled columns are not filtered out."""
        self.sort_keys.set(keys)
        self._recompute()

    def current_order(self, column_id: str) -> Optional[SortOrder]:
        return self.sort_keys.current_order(column_id)

    def header_props(self, column_id: str) -> HeaderProps:
        return HeaderProps(order=self.current_order(column_id), disabled=column_id in self.disabled_ids)

    def cell_props(self, column_id: str) -> CellProps:
        return CellProps(order=self.current_order(column_id))
