"""
tmux provider for tmuxl.

Implements pane management for tmux terminal multiplexer.
"""

import logging
import os
import re
import subprocess
import time
from typing import Optional

from ..errors import TmuxError
from .base import Provider

logger = logging.getLogger(__name__)

WINDOW_INFO_FORMAT = "[#{window_width}x#{window_height}:#{window_panes}]"
_WINDOW_INFO_RE = re.compile(r"\[(\d+)x(\d+):(\d+)\]")


class TmuxProvider(Provider):
    """Provider for tmux terminal multiplexer."""

    @property
    def name(self) -> str:
        return "tmux"

    def __init__(
        self,
        binary: str = "tmux",
        cool_off: float = 0.25,
        timeout: float = 10.0
    ):
        """
        Initialize tmux provider.

        Args:
            binary: tmux executable.
            cool_off: Seconds to wait before each command. Back-to-back
                commands can leave the prompt half drawn.
            timeout: Seconds before a tmux command is abandoned.
        """
        self.binary = binary
        self.cool_off = cool_off
        self.timeout = timeout
        self._attach_process: Optional[subprocess.Popen] = None

    def _run_tmux(self, *args: str) -> str:
        """Run tmux command and return output."""
        cmd = [self.binary, *args]
        if self.cool_off > 0:
            time.sleep(self.cool_off)
        logger.debug("running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout
            )
        except FileNotFoundError as e:
            raise TmuxError(f"{self.binary} not found", cmd) from e
        except subprocess.TimeoutExpired as e:
            raise TmuxError(f"{args[0]} timed out after {self.timeout}s", cmd) from e

        if result.returncode != 0:
            stderr = result.stderr.strip()
            raise TmuxError(
                f"{args[0]} failed ({result.returncode}): {stderr}",
                cmd, result.returncode, stderr
            )
        return result.stdout.strip()

    def _run_silent(self, *args: str) -> None:
        """Run a tmux command that is expected to print nothing."""
        output = self._run_tmux(*args)
        if output:
            raise TmuxError(f"{args[0]} returned unexpected output: {output}", [self.binary, *args])

    @staticmethod
    def in_session() -> bool:
        """True when running inside a tmux client."""
        return "TMUX" in os.environ

    def is_available(self) -> bool:
        """Check if tmux is available and we're in a session."""
        try:
            result = subprocess.run(
                [self.binary, "display-message", "-p", "#{session_name}"],
                capture_output=True,
                timeout=5
            )
            return result.returncode == 0 and bool(result.stdout.strip())
        except (subprocess.TimeoutExpired, FileNotFoundError):
            return False

    def attach(self) -> Optional[subprocess.Popen]:
        """
        Attach to a tmux session in the background if not inside one.

        Returns:
            The attach-session process, or None when already in a session.
        """
        if self.in_session():
            return None
        logger.info("not inside tmux, attaching to a session")
        try:
            self._attach_process = subprocess.Popen([self.binary, "attach-session"])
        except FileNotFoundError as e:
            raise TmuxError(f"{self.binary} not found", [self.binary, "attach-session"]) from e
        # Give tmux a moment to attach before querying it.
        time.sleep(self.cool_off)
        return self._attach_process

    def wait(self) -> int:
        """Wait for a background attach-session, if any, and return its exit code."""
        if self._attach_process is None:
            return 0
        returncode = self._attach_process.wait()
        self._attach_process = None
        return returncode

    def get_window_info(self) -> tuple[int, int, int]:
        """Get window dimensions and pane count."""
        output = self._run_tmux("display-message", "-p", WINDOW_INFO_FORMAT)
        match = _WINDOW_INFO_RE.fullmatch(output)
        if not match:
            raise TmuxError(f"could not parse window info: {output!r}")
        width, height, panes = (int(g) for g in match.groups())
        logger.debug("window is %dx%d with %d panes", width, height, panes)
        return width, height, panes

    def create_pane(self, target: int) -> None:
        """Split pane `target`, keeping focus where it is."""
        self._run_silent(
            "split-window",
            "-c", "#{pane_current_path}",
            "-d",
            "-t", str(target)
        )

    def select_layout(self, layout: str) -> None:
        """Apply a checksummed layout string."""
        self._run_silent("select-layout", layout)

    def select_pane(self, target: int) -> None:
        """Select a pane."""
        self._run_tmux("select-pane", "-t", str(target))
