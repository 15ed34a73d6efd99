"""
tmuxl - fixed tmux pane layouts for 1 to 5 panes.

Computes the pane geometry for a window, renders it in tmux's layout
grammar with the layout checksum, and grows a window to the requested
pane count.

Basic Usage:
    from tmuxl import compute_and_serialize

    compute_and_serialize(100, 40, 2)
    # '350d,100x40,0,0[100x19,0,0,1,100x20,0,20,2]'

With Provider (e.g., tmux integration):
    from tmuxl import LayoutAdjuster
    from tmuxl.providers import TmuxProvider

    adjuster = LayoutAdjuster(TmuxProvider())
    result = adjuster.adjust(4)
    print(result.layout)
"""

__version__ = "0.1.0"
__author__ = "tmuxl Contributors"

# Core types
from .types import (
    Direction,
    Ratio,
    Rect,
    Leaf,
    Split,
    Pane,
    AdjustResult,
    EQUAL,
    SMALL_LARGE,
    LARGE_SMALL,
)

from .errors import (
    TmuxlError,
    LayoutError,
    AlreadySplitError,
    PaneCountError,
    TmuxError,
)

# Core functions
from .layout import (
    MIN_PANES,
    MAX_PANES,
    build_tree,
    compute_layout,
    compute_and_serialize,
    leaves,
    split,
)
from .serializer import render, layout_checksum, format_layout
from .adjust import LayoutAdjuster

# Configuration
from .config import (
    TmuxlConfig,
    TmuxConfig,
    LayoutConfig,
    load_config,
    save_config,
    get_config_path,
)

from . import providers

__all__ = [
    # Version
    "__version__",

    # Types
    "Direction",
    "Ratio",
    "Rect",
    "Leaf",
    "Split",
    "Pane",
    "AdjustResult",
    "EQUAL",
    "SMALL_LARGE",
    "LARGE_SMALL",

    # Errors
    "TmuxlError",
    "LayoutError",
    "AlreadySplitError",
    "PaneCountError",
    "TmuxError",

    # Core
    "MIN_PANES",
    "MAX_PANES",
    "build_tree",
    "compute_layout",
    "compute_and_serialize",
    "leaves",
    "split",
    "render",
    "layout_checksum",
    "format_layout",
    "LayoutAdjuster",

    # Configuration
    "TmuxlConfig",
    "TmuxConfig",
    "LayoutConfig",
    "load_config",
    "save_config",
    "get_config_path",

    # Submodules
    "providers",
]
