from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Selection:
    """Ids ticked in a listing. Every change returns a new selection."""

    selected: frozenset[int] = field(default_factory=frozenset)

    def toggle(self, record_id: int) -> "Selection":
        if record_id in self.selected:
            return Selection(self.selected - {record_id})
        return Selection(self.selected | {record_id})

    def select_all(self, record_ids: Iterable[int]) -> "Selection":
        return Selection(frozenset(record_ids))

    def clear(self) -> "Selection":
        return Selection()

    def contains(self, record_id: int) -> bool:
        return record_id in self.selected

    @property
    def ids(self) -> list[int]:
        return sorted(self.selected)

    def __len__(self) -> int:
        return len(self.selected)

    def __iter__(self) -> Iterator[int]:
        return iter(self.ids)
