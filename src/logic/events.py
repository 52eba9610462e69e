# src/logic/events.py

from typing import Any, Callable
from src.core.models.event import ToggleEvent

MultiSortEventPredicate = Callable[[Any], bool]


def is_shift_click(event: Any) -> bool:
    """
    Default multi-sort predicate: a toggle counts as multi-sort when shift was held.
    Anything that is not a ToggleEvent (including None) is a plain click.
    """
    return isinstance(event, ToggleEvent) and event.shift_key
