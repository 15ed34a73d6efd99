"""
tmuxl layout adjuster.

Grows the current window to a pane count and applies the matching layout.
"""

import logging
from typing import Optional

from .config import LayoutConfig
from .errors import PaneCountError
from .layout import MAX_PANES, MIN_PANES, compute_and_serialize
from .providers.base import Provider
from .types import AdjustResult

logger = logging.getLogger(__name__)


def split_target(existing: int) -> int:
    """
    Index of the pane to split when the window has `existing` panes.

    The 2nd and 4th panes are split from pane 0 and the 3rd from pane 1.
    The 5th pane comes from the 4th, which tmux numbers 1 since indices run
    left to right, top to bottom.
    """
    if existing in (2, 4):
        return 1
    return 0


def focus_target(current: int, desired: int) -> Optional[int]:
    """Bottom-left pane to focus after growing past two panes, if any."""
    if current < 3 <= desired:
        return desired - 2
    return None


class LayoutAdjuster:
    """Brings a window to a pane count with the fixed tmuxl layout."""

    def __init__(self, provider: Provider, config: Optional[LayoutConfig] = None):
        """
        Initialize adjuster.

        Args:
            provider: Provider for the window being adjusted.
            config: Layout settings. Defaults if None.
        """
        self.provider = provider
        self.config = config or LayoutConfig()

    def plan(self, current: int, desired: Optional[int] = None) -> tuple[int, list[int]]:
        """
        Validate a target count and work out which panes to split.

        Args:
            current: Panes in the window now.
            desired: Target count. None keeps the current count.

        Returns:
            Tuple of (desired, split targets in creation order).
        """
        if desired is None:
            desired = current
            if not MIN_PANES <= desired <= MAX_PANES:
                raise PaneCountError(
                    f"window has {current} panes, expected {MIN_PANES} to {MAX_PANES}"
                )
        elif not MIN_PANES <= desired <= MAX_PANES:
            raise PaneCountError(f"expected {MIN_PANES} <= n(={desired}) <= {MAX_PANES}")
        elif desired < current:
            raise PaneCountError(f"expected n(={desired}) to be >= current(={current})")

        return desired, [split_target(i) for i in range(current, desired)]

    def adjust(self, desired: Optional[int] = None, dry_run: bool = False) -> AdjustResult:
        """
        Adjust the window to `desired` panes.

        Args:
            desired: Target pane count (1-5). None re-applies the layout
                for the current count.
            dry_run: Calculate only, don't touch the window.

        Returns:
            AdjustResult describing what was (or would be) done.
        """
        width, height, current = self.provider.get_window_info()
        desired, targets = self.plan(current, desired)
        layout = compute_and_serialize(width, height, desired)

        focused = None
        if self.config.focus_bottom_left:
            focused = focus_target(current, desired)

        result = AdjustResult(
            width=width,
            height=height,
            current=current,
            desired=desired,
            layout=layout,
            split_targets=targets,
            focused=focused,
            dry_run=dry_run,
        )

        if dry_run:
            logger.info("dry run: %d -> %d panes, layout %s", current, desired, layout)
            return result

        for target in targets:
            logger.debug("splitting pane %d", target)
            self.provider.create_pane(target)

        logger.info("applying layout %s", layout)
        self.provider.select_layout(layout)

        if focused is not None:
            logger.debug("focusing pane %d", focused)
            self.provider.select_pane(focused)

        return result
