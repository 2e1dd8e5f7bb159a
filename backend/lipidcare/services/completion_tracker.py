"""Per-item completion state keyed by (day index, item index)."""
from __future__ import annotations

from typing import Dict, Tuple

CompletionKey = Tuple[int, int]


class CompletionTracker:
    """Boolean done-marks for routine items.

    Keys are positions, not item identities, and are never checked against a
    schedule. Callers that replace the schedule decide whether to clear().
    """

    def __init__(self) -> None:
        self._completions: Dict[CompletionKey, bool] = {}

    def toggle(self, day_index: int, item_index: int) -> bool:
        """Flip the mark for the item and return the new value."""
        key = (day_index, item_index)
        value = not self._completions.get(key, False)
        self._completions[key] = value
        return value

    def is_complete(self, day_index: int, item_index: int) -> bool:
        return self._completions.get((day_index, item_index), False)

    def completed_count(self, day_index: int, item_count: int) -> int:
        return sum(1 for item_index in range(item_count) if self.is_complete(day_index, item_index))

    def clear(self) -> None:
        self._completions.clear()

    def snapshot(self) -> Dict[CompletionKey, bool]:
        return {key: value for key, value in self._completions.items() if value}
