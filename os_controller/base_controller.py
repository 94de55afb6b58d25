"""Base interface for window-manager backends."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseController(ABC):
    """Abstract window-manager backend."""

    @abstractmethod
    def list_windows(self) -> list[str] | None:
        """Return raw window listing lines, or None when the query failed."""
        pass

    @abstractmethod
    def activate_window(self, window_id: str) -> bool:
        """Bring a window to the foreground; return True on success."""
        pass
