from __future__ import annotations

from pathlib import Path


class DirectoryError(ValueError):
    """Raised when the restaurant fixture cannot be turned into a directory."""

    def __init__(self, reason: str, path: Path | str | None = None) -> None:
        self.reason = reason
        self.path = Path(path) if path is not None else None
        super().__init__(f"{self.path}: {reason}" if self.path else reason)
