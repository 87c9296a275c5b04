from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass
class YAxisLabelCache:
    """Caller-owned memo for the Y-axis label set.

    Entries are keyed by dataset identity plus an extra key (field accessor, formatter);
    mutating a dataset in place does not invalidate the entry.
    """

    dataset_ref: Any = None
    key: tuple[Any, ...] | None = None
    labels: tuple[str, ...] | None = None
    builds: int = 0

    def get_or_build(self, dataset: Any, key: tuple[Any, ...], build: Callable[[], list[str]]) -> tuple[str, ...]:
        if self.labels is not None and self.dataset_ref is dataset and self.key == key:
            return self.labels
        self.labels = tuple(build())
        self.dataset_ref = dataset
        self.key = key
        self.builds += 1
        return self.labels

    def invalidate(self) -> None:
        self.dataset_ref = None
        self.key = None
        self.labels = None
