"""
Base provider interface for tmuxl.

Defines the abstract interface that all providers must implement.
"""

from abc import ABC, abstractmethod


class Provider(ABC):
    """Abstract base class for pane providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this provider is available in current environment."""
        pass

    @abstractmethod
    def get_window_info(self) -> tuple[int, int, int]:
        """
        Get the current window's size and pane count in one query.

        Returns:
            Tuple of (width, height, pane_count).
        """
        pass

    @abstractmethod
    def create_pane(self, target: int) -> None:
        """
        Create a new pane by splitting an existing one.

        Args:
            target: Index of the pane to split.
        """
        pass

    @abstractmethod
    def select_layout(self, layout: str) -> None:
        """
        Apply a layout string.

        Args:
            layout: "{checksum},{layout}" string.
        """
        pass

    def select_pane(self, target: int) -> None:
        """
        Select/focus a pane.

        Args:
            target: Pane index to select.
        """
        raise NotImplementedError("Select not supported by this provider")
