"""
tmuxl exceptions.
"""

from typing import Optional, Sequence


class TmuxlError(Exception):
    """Base class for all tmuxl errors."""


class LayoutError(TmuxlError):
    """Invalid layout geometry or tree addressing."""


class AlreadySplitError(LayoutError):
    """A pane that already has children was split again."""

    def __init__(self, pane):
        self.pane = pane
        super().__init__(f"pane {pane.id} is already split")


class PaneCountError(TmuxlError, ValueError):
    """Requested pane count is not supported or smaller than the current one."""


class TmuxError(TmuxlError):
    """A tmux command failed."""

    def __init__(
        self,
        message: str,
        command: Sequence[str] = (),
        returncode: Optional[int] = None,
        stderr: str = ""
    ):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)
