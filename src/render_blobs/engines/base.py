from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Sequence

from blob_contracts.geometry import Line


class BlobRenderEngine(ABC):
    """
    Rendering backend abstraction.

    Engines must:
    - Paint each line with a value derived only from its blob index
    - Leave every other pixel as background
    - Be deterministic for a given input
    - Perform NO labeling and NO validation of the labeling itself
    """

    @abstractmethod
    def backend_id(self) -> str:
        raise NotImplementedError

    def backend_version(self) -> str | None:
        return None

    def max_blob_index(self) -> int | None:
        """Largest blob index this backend can represent; None means unbounded."""
        return None

    @abstractmethod
    def render(
        self,
        *,
        lines: Sequence[Line],
        blob_indices: Sequence[int],
        width: int,
        height: int,
        out_file: Path | None,
    ) -> tuple[list[str] | None, dict[str, Any]]:
        """
        Return:
        - rendered text rows (text backends) or None
        - render_params fragment (backend info/version/etc) to be merged into meta
        """

        raise NotImplementedError
