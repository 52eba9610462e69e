# src/logic/sorter.py

import logging
from functools import cmp_to_key
from typing import Iterable, Mapping, Optional, Sequence

from src.core.config.settings import settings
from src.core.exceptions import StructuralError
from src.core.models.column_options import SortByColumnOptions
from src.core.models.row import DataCell, Row
from src.core.models.sort_key import SortKey
from src.logic.compare import compare, is_sort_value

logger = logging.getLogger(__name__)


class _SortLevel:
    """One list of sibling rows being sorted, and where it hangs in its parent level."""
    def __init__(self, rows: list[Row], parent: Optional["_SortLevel"], index: int, depth: int, owner: Optional[Row] = None):
        self.rows = rows
        self.parent = parent
        self.index = index
        self.depth = depth
        # The input row whose sub_rows this level holds; None for the root level.
        self.owner = owner

    def has_ancestor(self, row: Row) -> bool:
        level: Optional[_SortLevel] = self
        while level is not None:
            if level.owner is row:
                return True
            level = level.parent
        return False

    def __repr__(self) -> str:
        return f"_SortLevel(rows={len(self.rows)}, index={self.index}, depth={self.depth})"


def compare_rows(
    row_a: Row,
    row_b: Row,
    sort_keys: Sequence[SortKey],
    column_options: Mapping[str, SortByColumnOptions],
) -> int:
    """
    Compares two sibling rows by the sort keys in priority order.
    The first key giving a nonzero order decides; a key is skipped when either
    row lacks a data cell for the column or the values cannot be compared.
    """
    for key in sort_keys:
        cell_a = row_a.cell_for_id(key.id)
        cell_b = row_b.cell_for_id(key.id)
        if not isinstance(cell_a, DataCell) or not isinstance(cell_b, DataCell):
            continue
        options = column_options.get(key.id)
        get_sort_value = options.get_sort_value if options is not None else None
        if get_sort_value is not None:
            order = compare(get_sort_value(cell_a.value), get_sort_value(cell_b.value))
        elif is_sort_value(cell_a.value) and is_sort_value(cell_b.value):
            order = compare(cell_a.value, cell_b.value)
        else:
            order = 0
        if order != 0:
            order_factor = key.order.factor
            # Invert flips the sort without changing the order shown for the column.
            if options is not None and options.invert:
                order_factor *= -1
            return order * order_factor
    return 0


class HierarchicalSorter:
    """
    Sorts a forest of rows: the root rows and, at every depth, each row's sub_rows,
    all by the same keys. Input rows and lists are never mutated; rows with sub_rows
    are copied with only sub_rows replaced.
    """
    def __init__(self, max_depth: Optional[int] = None):
        self._max_depth = settings.MAX_ROW_DEPTH if max_depth is None else max_depth

    def sort_rows(
        self,
        rows: Sequence[Row],
        sort_keys: Iterable[SortKey],
        column_options: Optional[Mapping[str, SortByColumnOptions]] = None,
    ) -> list[Row]:
        """
        Returns a new list of the rows sorted at every level.

        Args:
            rows: Root rows in their original order.
            sort_keys: Active keys in priority order.
            column_options: Per-column invert / get_sort_value settings.

        Returns:
            The sorted forest. Rows tying on every key keep their input order.

        Raises:
            StructuralError: If sub_rows nest deeper than the configured maximum,
                or a row appears among its own sub_rows.
        """
        keys = tuple(sort_keys)
        options = column_options or {}
        sort_key = cmp_to_key(lambda a, b: compare_rows(a, b, keys, options))

        root = _SortLevel(list(rows), parent=None, index=-1, depth=0)
        pending = [root]
        visited: list[_SortLevel] = []
        while pending:
            level = pending.pop()
            # list.sort is stable; the level already holds a private copy.
            level.rows.sort(key=sort_key)
            visited.append(level)
            for idx, row in enumerate(level.rows):
                if row.sub_rows is None:
                    continue
                if level.depth + 1 > self._max_depth:
                    raise StructuralError.too_deep(row.id, level.depth + 1, self._max_depth)
                if level.has_ancestor(row):
                    raise StructuralError.cyclic(row.id, level.depth)
                pending.append(_SortLevel(list(row.sub_rows), parent=level, index=idx, depth=level.depth + 1, owner=row))

        # Every level is visited after its ancestors, so walking backwards
        # finishes all sub-levels before their parent row is rebuilt.
        for level in reversed(visited):
            if level.parent is None:
                continue
            parent_rows = level.parent.rows
            parent_rows[level.index] = parent_rows[level.index].model_copy(update={"sub_rows": level.rows})

        logger.debug(f"Sorted {len(root.rows)} root rows across {len(visited)} levels by {[(k.id, k.order.value) for k in keys]}")
        return root.rows


def sort_rows(
    rows: Sequence[Row],
    sort_keys: Iterable[SortKey],
    column_options: Optional[Mapping[str, SortByColumnOptions]] = None,
    max_depth: Optional[int] = None,
) -> list[Row]:
    """Sorts a row forest with a one-off HierarchicalSorter."""
    return HierarchicalSorter(max_depth=max_depth).sort_rows(rows, sort_keys, column_options)
