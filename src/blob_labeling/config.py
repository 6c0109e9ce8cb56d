from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LabelingStrategy(str, Enum):
    DISJOINT_SET = "disjoint_set"
    GROUP_LIST = "group_list"


@dataclass(frozen=True, slots=True)
class LabelingConfig:
    """
    Blob labeling parameters.

    Both strategies produce identical blob indices; they differ only in cost.
    `group_list` is quadratic and exists as a readable baseline.
    """

    strategy: LabelingStrategy = LabelingStrategy.DISJOINT_SET
    require_sorted: bool = True  # reject unsorted input instead of mislabeling it

    def validate(self) -> None:
        if not isinstance(self.strategy, LabelingStrategy):
            raise ValueError(f"strategy must be a LabelingStrategy, got {self.strategy!r}")
        if not isinstance(self.require_sorted, bool):
            raise ValueError("require_sorted must be a bool")

    def to_dict(self) -> dict[str, object]:
        return {"strategy": self.strategy.value, "require_sorted": self.require_sorted}
