"""
tmuxl layout builder.

Builds the pane tree for a window of a given size. Only a fixed shape per
pane count is supported:

    1         2          3               4                5
    +----+    +----+     +----+          +---+--+         +---+--+
    |    |    |    |     |    |          |   |  |         |   |--|
    |    |    +----+     +----+          +---+--+         +---+--+
    |    |    |    |     |  |  |         |  |   |         |  |   |
    +----+    +----+     +----+          +--+---+         +--+---+
"""

from typing import Iterator

from .errors import AlreadySplitError, LayoutError, PaneCountError
from .serializer import format_layout, render
from .types import (
    Direction, Ratio, Rect, Leaf, Split, Pane,
    EQUAL, SMALL_LARGE, LARGE_SMALL,
)

MIN_PANES = 1
MAX_PANES = 5

# (path from the root, direction, ratio). Path entries pick the first (0)
# or second (1) child. A window with n panes applies the first n - 1 steps.
SPLIT_SCHEDULE: tuple[tuple[tuple[int, ...], Direction, Ratio], ...] = (
    ((), Direction.VERTICAL, EQUAL),
    ((1,), Direction.HORIZONTAL, SMALL_LARGE),
    ((0,), Direction.HORIZONTAL, LARGE_SMALL),
    ((0, 1), Direction.VERTICAL, EQUAL),
)


def split_rect(rect: Rect, direction: Direction, ratio: Ratio) -> tuple[Rect, Rect]:
    """
    Divide a rectangle in two, leaving one cell for the separator.

    Args:
        rect: Rectangle to divide.
        direction: VERTICAL for top/bottom, HORIZONTAL for left/right.
        ratio: Share of the first child.

    Returns:
        Tuple of (first, second) rectangles.
    """
    if direction == Direction.VERTICAL:
        top = ratio.first(rect.height - 1)
        bottom = rect.height - top - 1
        return (
            Rect(rect.x, rect.y, rect.width, top),
            Rect(rect.x, rect.y + top + 1, rect.width, bottom),
        )
    left = ratio.first(rect.width - 1)
    right = rect.width - left - 1
    return (
        Rect(rect.x, rect.y, left, rect.height),
        Rect(rect.x + left + 1, rect.y, right, rect.height),
    )


def split(pane: Pane, direction: Direction, ratio: Ratio) -> Split:
    """
    Split a leaf pane into two children.

    Children are numbered 2*id+1 and 2*id+2, the same way tmux numbers
    panes created by successive splits.

    Raises:
        AlreadySplitError: If the pane already has children.
    """
    if isinstance(pane, Split):
        raise AlreadySplitError(pane)
    first, second = split_rect(pane.rect, direction, ratio)
    return Split(
        id=pane.id,
        rect=pane.rect,
        direction=direction,
        ratio=ratio,
        first=Leaf(2 * pane.id + 1, first),
        second=Leaf(2 * pane.id + 2, second),
    )


def split_at(
    root: Pane,
    path: tuple[int, ...],
    direction: Direction,
    ratio: Ratio
) -> Pane:
    """Return a copy of `root` with the pane at `path` split."""
    if not path:
        return split(root, direction, ratio)
    if isinstance(root, Leaf):
        raise LayoutError(f"no pane at path {path}: pane {root.id} is a leaf")

    head, rest = path[0], path[1:]
    if head == 0:
        return Split(root.id, root.rect, root.direction, root.ratio,
                     split_at(root.first, rest, direction, ratio), root.second)
    if head == 1:
        return Split(root.id, root.rect, root.direction, root.ratio,
                     root.first, split_at(root.second, rest, direction, ratio))
    raise LayoutError(f"invalid child index {head}")


def validate(width: int, height: int, n: int) -> None:
    """Check layout inputs before building anything."""
    if not MIN_PANES <= n <= MAX_PANES:
        raise PaneCountError(f"expected {MIN_PANES} <= n(={n}) <= {MAX_PANES}")
    if width <= 0 or height <= 0:
        raise LayoutError(f"expected a positive window size, got {width}x{height}")


def build_tree(width: int, height: int, n: int) -> Pane:
    """
    Build the pane tree for `n` panes in a `width` x `height` window.

    Args:
        width: Window width in cells.
        height: Window height in cells.
        n: Number of panes, 1 to 5.

    Returns:
        Root pane (id 0) covering the whole window.
    """
    validate(width, height, n)
    root: Pane = Leaf(0, Rect(0, 0, width, height))
    for path, direction, ratio in SPLIT_SCHEDULE[:n - 1]:
        root = split_at(root, path, direction, ratio)
    return root


def leaves(pane: Pane) -> Iterator[Leaf]:
    """Yield leaf panes in layout order."""
    if isinstance(pane, Leaf):
        yield pane
        return
    yield from leaves(pane.first)
    yield from leaves(pane.second)


def count_splits(pane: Pane) -> int:
    if isinstance(pane, Leaf):
        return 0
    return 1 + count_splits(pane.first) + count_splits(pane.second)


def compute_layout(width: int, height: int, n: int) -> str:
    """Layout string (without checksum) for `n` panes."""
    return render(build_tree(width, height, n))


def compute_and_serialize(width: int, height: int, n: int) -> str:
    """
    Layout string ready for `tmux select-layout`.

    Returns:
        "{checksum},{layout}", e.g. "aa7d,100x40,0,0,0".
    """
    return format_layout(compute_layout(width, height, n))
