"""Layout serializer tests"""

import pytest

from tmuxl import (
    Direction,
    Leaf,
    Rect,
    Split,
    compute_and_serialize,
    compute_layout,
    format_layout,
    layout_checksum,
    render,
    EQUAL,
)


class TestRender:
    """tmux layout grammar"""

    def test_leaf(self):
        assert render(Leaf(0, Rect(0, 0, 100, 40))) == "100x40,0,0,0"

    def test_vertical_uses_brackets(self):
        pane = Split(
            0, Rect(0, 0, 80, 24), Direction.VERTICAL, EQUAL,
            Leaf(1, Rect(0, 0, 80, 11)),
            Leaf(2, Rect(0, 12, 80, 12)),
        )
        assert render(pane) == "80x24,0,0[80x11,0,0,1,80x12,0,12,2]"

    def test_horizontal_uses_braces(self):
        pane = Split(
            0, Rect(0, 0, 159, 48), Direction.HORIZONTAL, EQUAL,
            Leaf(1, Rect(0, 0, 79, 48)),
            Leaf(2, Rect(80, 0, 79, 48)),
        )
        assert render(pane) == "159x48,0,0{79x48,0,0,1,79x48,80,0,2}"

    def test_nested(self):
        inner = Split(
            2, Rect(0, 20, 100, 20), Direction.HORIZONTAL, EQUAL,
            Leaf(5, Rect(0, 20, 49, 20)),
            Leaf(6, Rect(50, 20, 50, 20)),
        )
        pane = Split(
            0, Rect(0, 0, 100, 40), Direction.VERTICAL, EQUAL,
            Leaf(1, Rect(0, 0, 100, 19)),
            inner,
        )
        assert render(pane) == (
            "100x40,0,0[100x19,0,0,1,100x20,0,20{49x20,0,20,5,50x20,50,20,6}]"
        )


class TestChecksum:
    """tmux layout checksum"""

    def test_tmux_manual_example(self):
        # From the "select-layout" section of tmux(1)
        assert layout_checksum("159x48,0,0{79x48,0,0,79x48,80,0}") == "bb62"

    def test_empty(self):
        assert layout_checksum("") == "0000"

    def test_single_pane(self):
        assert layout_checksum("100x40,0,0,0") == "aa7d"

    def test_is_four_lowercase_hex_digits(self):
        for n in range(1, 6):
            csum = layout_checksum(compute_layout(123, 45, n))
            assert len(csum) == 4
            assert csum == csum.lower()
            int(csum, 16)

    def test_deterministic(self):
        layout = "100x40,0,0[100x19,0,0,1,100x20,0,20,2]"
        assert layout_checksum(layout) == layout_checksum(layout) == "350d"

    def test_order_sensitive(self):
        assert layout_checksum("ab") != layout_checksum("ba")

    def test_format_layout(self):
        assert format_layout("100x40,0,0,0") == "aa7d,100x40,0,0,0"


class TestComputeAndSerialize:
    """Strings handed to select-layout"""

    @pytest.mark.parametrize("n,expected", [
        (1, "aa7d,100x40,0,0,0"),
        (2, "350d,100x40,0,0[100x19,0,0,1,100x20,0,20,2]"),
        (3, "c4e4,100x40,0,0[100x19,0,0,1,"
            "100x20,0,20{39x20,0,20,5,60x20,40,20,6}]"),
        (4, "25ed,100x40,0,0[100x19,0,0{59x19,0,0,3,40x19,60,0,4},"
            "100x20,0,20{39x20,0,20,5,60x20,40,20,6}]"),
        (5, "a55a,100x40,0,0[100x19,0,0{59x19,0,0,3,40x19,60,0"
            "[40x9,60,0,9,40x9,60,10,10]},"
            "100x20,0,20{39x20,0,20,5,60x20,40,20,6}]"),
    ])
    def test_100x40(self, n, expected):
        assert compute_and_serialize(100, 40, n) == expected

    def test_checksum_prefix_matches_body(self):
        checksum, body = compute_and_serialize(211, 53, 4).split(",", 1)
        assert checksum == layout_checksum(body)
