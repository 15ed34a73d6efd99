"""
tmuxl type definitions.

Core data structures used throughout the library.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class Direction(Enum):
    """Axis a pane is divided along."""

    VERTICAL = "vertical"      # top / bottom, tmux "[...]"
    HORIZONTAL = "horizontal"  # left / right, tmux "{...}"


@dataclass(frozen=True)
class Ratio:
    """Proportional split p:q between the first and second child."""

    p: int
    q: int

    def __post_init__(self):
        if self.p <= 0 or self.q <= 0:
            raise ValueError(f"ratio parts must be positive, got {self.p}:{self.q}")

    def first(self, size: int) -> int:
        """Size of the first child when `size` cells are shared out."""
        return size * self.p // (self.p + self.q)


EQUAL = Ratio(50, 50)
SMALL_LARGE = Ratio(40, 60)
LARGE_SMALL = Ratio(60, 40)


@dataclass(frozen=True)
class Rect:
    """Rectangle in terminal cells, origin top-left."""

    x: int
    y: int
    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


@dataclass(frozen=True)
class Leaf:
    """A pane tmux shows. `id` is the pane index tmux assigns it."""

    id: int
    rect: Rect


@dataclass(frozen=True)
class Split:
    """A pane divided into two children along `direction`."""

    id: int
    rect: Rect
    direction: Direction
    ratio: Ratio
    first: "Pane"
    second: "Pane"


Pane = Union[Leaf, Split]


@dataclass
class AdjustResult:
    """Outcome of adjusting a window to a pane count."""

    width: int
    height: int
    current: int
    desired: int
    layout: str = ""
    split_targets: list[int] = field(default_factory=list)
    focused: Optional[int] = None
    dry_run: bool = False

    @property
    def created(self) -> int:
        return len(self.split_targets)

    def to_dict(self) -> dict:
        return {
            "status": "calculated" if self.dry_run else "applied",
            "window": {"width": self.width, "height": self.height},
            "current": self.current,
            "desired": self.desired,
            "created": self.created,
            "split_targets": list(self.split_targets),
            "layout": self.layout,
            "focused": self.focused,
        }
