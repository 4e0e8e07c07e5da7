import random
from dataclasses import FrozenInstanceError
from unittest.mock import patch

import pytest

from xmascard.config import CardConfig
from xmascard.scene import CHURCH, OVERLAYS, TREE, Overlay, draw_scene, render_scene
from xmascard.snow import Snowflake, generate_snow


def test_empty_scene_dimensions():
    rows = render_scene([])
    assert len(rows) == 18
    assert all(len(row) == 60 for row in rows)


def test_scene_dimensions_with_heavy_snow():
    rows = render_scene(generate_snow(2000, rng=random.Random(1)))
    assert len(rows) == 18
    assert all(len(row) == 60 for row in rows)


def test_snowflake_is_drawn_as_dot():
    rows = render_scene([Snowflake(0, 0), Snowflake(59, 17)])
    assert rows[0] == "." + " " * 59
    assert rows[17] == " " * 59 + "."


def test_duplicate_snowflakes_are_harmless():
    assert render_scene([(5, 2), (5, 2), (5, 2)]) == render_scene([(5, 2)])


def test_church_and_tree_positions():
    rows = render_scene([])
    assert rows[6][4:15] == "    ++     "
    assert rows[6][8:10] == "++"
    assert rows[12][4:15] == "  | __ |   "
    assert rows[12][40:50] == "/_/_/_/_\\ "
    assert rows[14][40:50] == "   /_\\    "
    for row_index in (0, 1, 2, 3, 4, 5, 15, 16, 17):
        assert rows[row_index] == " " * 60


def test_overlays_win_over_snow():
    # Fill every cell with snow, overlays must still be intact
    snow = [Snowflake(x, y) for x in range(60) for y in range(18)]
    rows = render_scene(snow)
    for overlay in OVERLAYS:
        for row_index, segment in overlay.rows:
            assert rows[row_index][overlay.column : overlay.column + overlay.width] == segment
    assert rows[0] == "." * 60
    assert rows[6][:4] == "...."
    assert rows[6][15:] == "." * 45


def test_overlay_cells_do_not_depend_on_snow():
    """Two different snowfalls give identical art cells."""
    first = render_scene(generate_snow(85, rng=random.Random(1)))
    second = render_scene(generate_snow(85, rng=random.Random(2)))
    for overlay in OVERLAYS:
        for row_index, _ in overlay.rows:
            span = slice(overlay.column, overlay.column + overlay.width)
            assert first[row_index][span] == second[row_index][span]


def test_overlay_segments_have_declared_width():
    for overlay in (CHURCH, TREE):
        assert all(len(segment) == overlay.width for _, segment in overlay.rows)
    assert [row for row, _ in CHURCH.rows] == list(range(6, 14))
    assert [row for row, _ in TREE.rows] == list(range(8, 15))


def test_overlay_apply_ignores_other_rows():
    cells = list("." * 20)
    Overlay(column=2, width=3, rows=((1, "abc"),)).apply(0, cells)
    assert cells == list("." * 20)
    Overlay(column=2, width=3, rows=((1, "abc"),)).apply(1, cells)
    assert "".join(cells) == "..abc" + "." * 15


def test_out_of_range_snowflakes_are_skipped():
    with patch("xmascard.scene.logger") as mock_logger:
        rows = render_scene([(60, 0), (-1, 3), (10, 18), (10, -2)])
    assert rows == render_scene([])
    assert mock_logger.warning.call_count == 4


def test_overlay_past_right_edge_is_clipped():
    config = CardConfig(width=45, height=15)
    rows = render_scene([], config)
    assert len(rows) == 15
    assert all(len(row) == 45 for row in rows)
    assert rows[12][40:] == "/_/_/"


def test_draw_scene_prints_every_row():
    printed = []
    snow = [Snowflake(1, 1)]
    draw_scene(snow, print_fct=printed.append)
    assert printed == render_scene(snow)


def test_overlays_are_immutable_and_hashable():
    assert len({CHURCH, TREE}) == 2
    with pytest.raises(FrozenInstanceError):
        CHURCH.rows = ()  # type: ignore[misc]
    with pytest.raises(TypeError):
        CHURCH.rows[0] = (6, "xxxxxxxxxxx")  # type: ignore[index]
