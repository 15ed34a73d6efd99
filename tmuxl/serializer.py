"""
tmuxl layout serializer.

Renders a pane tree in tmux's layout description grammar:

    leaf:              {width}x{height},{x},{y},{id}
    top/bottom split:  {width}x{height},{x},{y}[{first},{second}]
    left/right split:  {width}x{height},{x},{y}{{first},{second}}

and prefixes it with the checksum `select-layout` expects.
"""

from .types import Direction, Leaf, Pane


def render(pane: Pane) -> str:
    """Render a pane tree as a tmux layout string (no checksum)."""
    rect = pane.rect
    head = f"{rect.width}x{rect.height},{rect.x},{rect.y}"
    if isinstance(pane, Leaf):
        return f"{head},{pane.id}"

    first, second = render(pane.first), render(pane.second)
    if pane.direction == Direction.VERTICAL:
        return f"{head}[{first},{second}]"
    return f"{head}{{{first},{second}}}"


def layout_checksum(layout: str) -> str:
    """
    Calculate tmux layout checksum.

    Same rotate-and-add over the string's bytes as layout_checksum() in
    tmux's layout-custom.c, e.g. "159x48,0,0{79x48,0,0,79x48,80,0}" -> "bb62".
    """
    csum = 0
    for b in layout.encode():
        csum = (csum >> 1) + ((csum & 1) << 15)
        csum = (csum + b) & 0xffff
    return f"{csum:04x}"


def format_layout(layout: str) -> str:
    """Prefix a layout string with its checksum."""
    return f"{layout_checksum(layout)},{layout}"
