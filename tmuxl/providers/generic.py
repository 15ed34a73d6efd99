"""
Generic provider for tmuxl.

A provider that works with a window described programmatically.
Useful for library usage and custom integrations.
"""

from typing import Callable, Optional

from .base import Provider


class GenericProvider(Provider):
    """
    Generic provider for custom integrations.

    This provider doesn't interact with any terminal multiplexer. It keeps
    the window in memory and records every operation applied to it.
    """

    @property
    def name(self) -> str:
        return "generic"

    def __init__(
        self,
        window_width: int = 200,
        window_height: int = 50,
        pane_count: int = 1,
        on_layout_applied: Optional[Callable[[str], None]] = None
    ):
        """
        Initialize generic provider.

        Args:
            window_width: Window width.
            window_height: Window height.
            pane_count: Number of panes the window starts with.
            on_layout_applied: Callback when a layout is applied.
        """
        self._window_width = window_width
        self._window_height = window_height
        self._pane_count = pane_count
        self._on_layout_applied = on_layout_applied

        self.created: list[int] = []
        self.layouts: list[str] = []
        self.selected: list[int] = []

    def is_available(self) -> bool:
        """Always available."""
        return True

    @property
    def pane_count(self) -> int:
        return self._pane_count

    def get_window_info(self) -> tuple[int, int, int]:
        return self._window_width, self._window_height, self._pane_count

    def create_pane(self, target: int) -> None:
        if not 0 <= target < self._pane_count:
            raise IndexError(f"no pane {target} in a window of {self._pane_count}")
        self.created.append(target)
        self._pane_count += 1

    def select_layout(self, layout: str) -> None:
        self.layouts.append(layout)
        if self._on_layout_applied:
            self._on_layout_applied(layout)

    def select_pane(self, target: int) -> None:
        if not 0 <= target < self._pane_count:
            raise IndexError(f"no pane {target} in a window of {self._pane_count}")
        self.selected.append(target)
