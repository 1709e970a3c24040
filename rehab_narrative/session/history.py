"""Undo/redo over snapshots of the recorded unit list."""

from collections import deque
from typing import Iterable, Optional

from rehab_narrative.config import get_settings
from rehab_narrative.models.session import TreatmentUnit

Snapshot = tuple[TreatmentUnit, ...]


class SelectionHistory:
    """Current unit list plus bounded past/future snapshot stacks."""

    def __init__(self, units: Iterable[TreatmentUnit] = (), limit: Optional[int] = None):
        if limit is None:
            limit = get_settings().history_limit
        self.limit = limit
        self.current: Snapshot = tuple(units)
        self._past: deque[Snapshot] = deque(maxlen=limit)
        self._future: deque[Snapshot] = deque(maxlen=limit)

    @property
    def can_undo(self) -> bool:
        return bool(self._past)

    @property
    def can_redo(self) -> bool:
        return bool(self._future)

    def apply(self, units: Iterable[TreatmentUnit]) -> Snapshot:
        """Replace the unit list, recording the previous one for undo."""
        self._past.append(self.current)
        self.current = tuple(units)
        self._future.clear()
        return self.current

    def add(self, unit: TreatmentUnit) -> Snapshot:
        return self.apply((*self.current, unit))

    def remove(self, index: int) -> Snapshot:
        units = list(self.current)
        del units[index]
        return self.apply(units)

    def undo(self) -> bool:
        """Step back one snapshot. Returns False when there is nothing to undo."""
        if not self._past:
            return False
        self._future.appendleft(self.current)
        self.current = self._past.pop()
        return True

    def redo(self) -> bool:
        """Step forward one snapshot. Returns False when there is nothing to redo."""
        if not self._future:
            return False
        self._past.append(self.current)
        self.current = self._future.popleft()
        return True

    def reset(self) -> None:
        self.current = ()
        self._past.clear()
        self._future.clear()
