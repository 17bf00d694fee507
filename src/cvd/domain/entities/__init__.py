"""Domain entities for device selection.

- SelectionRequest: empty-only flag plus optional count
- SelectionResult: ordered identifiers to expose
"""

from cvd.domain.entities.selection import SelectionRequest, SelectionResult

__all__ = [
    "SelectionRequest",
    "SelectionResult",
]
