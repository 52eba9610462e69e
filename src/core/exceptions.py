# src/core/exceptions.py

from typing import Optional

class StructuralError(ValueError):
    """
    Raised when a row forest violates the structural preconditions of the sorter:
    a sub-row chain deeper than the configured limit, or a row that is its own ancestor.
    """
    def __init__(self, row_id: str, message: str, depth: Optional[int] = None, max_depth: Optional[int] = None):
        self.row_id = row_id
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(message)

    @classmethod
    def too_deep(cls, row_id: str, depth: int, max_depth: int) -> "StructuralError":
        return cls(
            row_id,
            f"Row '{row_id}' is nested {depth} levels deep, exceeding the maximum of {max_depth}",
            depth=depth,
            max_depth=max_depth,
        )

    @classmethod
    def cyclic(cls, row_id: str, depth: int) -> "StructuralError":
        return cls(row_id, f"Row '{row_id}' appears among its own sub_rows at depth {depth}", depth=depth)
