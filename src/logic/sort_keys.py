# src/logic/sort_keys.py

import logging
from typing import Iterable, Iterator, Optional

from src.core.enums.sort_order import SortOrder
from src.core.models.sort_key import SortKey

logger = logging.getLogger(__name__)

class SortKeySequence:
    """
    Owns the ordered list of active sort keys and its toggle/clear transitions.

    Per column, for a fixed mode, toggling cycles absent -> asc -> desc -> absent.
    In single-sort mode every toggle also drops all other keys.
    Keys are unique by column id; position is priority (first key is the primary sort).
    No validation against column metadata is done here.
    """
    def __init__(self, initial_keys: Optional[Iterable[SortKey]] = None):
        self._keys: list[SortKey] = []
        self.set(initial_keys or [])

    @property
    def keys(self) -> tuple[SortKey, ...]:
        """Read-only snapshot of the current keys."""
        return tuple(self._keys)

    def __iter__(self) -> Iterator[SortKey]:
        return iter(tuple(self._keys))

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return "SortKeySequence([" + ", ".join(f"{k.id}:{k.order.value}" for k in self._keys) + "])"

    def set(self, keys: Iterable[SortKey]):
        """
        Replaces the whole sequence. A repeated column id keeps its first occurrence.
        """
        unique_keys: list[SortKey] = []
        seen_ids: set[str] = set()
        for key in keys:
            if key.id in seen_ids:
                logger.warning(f"Dropping duplicate sort key for column '{key.id}'.")
                continue
            seen_ids.add(key.id)
            unique_keys.append(key)
        self._keys = unique_keys
        logger.debug(f"Sort keys set to {self!r}")

    def _index_of(self, column_id: str) -> int:
        for idx, key in enumerate(self._keys):
            if key.id == column_id:
                return idx
        return -1

    def current_order(self, column_id: str) -> Optional[SortOrder]:
        """Returns the direction the column is sorted in, or None if it is not sorted."""
        idx = self._index_of(column_id)
        return self._keys[idx].order if idx != -1 else None

    def toggle(self, column_id: str, multi_sort: bool = True):
        """
        Advances the column through absent -> asc -> desc -> absent.

        With multi_sort=False the result holds at most this column's key.
        With multi_sort=True a new key is appended with the lowest priority,
        a flipped key keeps its position and a removed key leaves the others in order.
        """
        key_idx = self._index_of(column_id)
        if not multi_sort:
            if key_idx == -1:
                self._keys = [SortKey(id=column_id, order=SortOrder.ASC)]
            elif self._keys[key_idx].order == SortOrder.ASC:
                self._keys = [SortKey(id=column_id, order=SortOrder.DESC)]
            else:
                self._keys = []
        elif key_idx == -1:
            self._keys = [*self._keys, SortKey(id=column_id, order=SortOrder.ASC)]
        elif self._keys[key_idx].order == SortOrder.ASC:
            self._keys = [
                *self._keys[:key_idx],
                SortKey(id=column_id, order=SortOrder.DESC),
                *self._keys[key_idx + 1:],
            ]
        else:
            self._keys = [*self._keys[:key_idx], *self._keys[key_idx + 1:]]
        logger.debug(f"Toggled '{column_id}' (multi_sort={multi_sort}): {self!r}")

    def clear(self, column_id: str):
        """Removes the column's key if present; otherwise does nothing."""
        key_idx = self._index_of(column_id)
        if key_idx == -1:
            return
        self._keys = [*self._keys[:key_idx], *self._keys[key_idx + 1:]]
        logger.debug(f"Cleared '{column_id}': {self!r}")
