"""
tmuxl providers.

Providers abstract the interaction with the terminal multiplexer.
"""

from .base import Provider
from .tmux import TmuxProvider
from .generic import GenericProvider

__all__ = ["Provider", "TmuxProvider", "GenericProvider"]
