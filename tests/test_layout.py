import pytest

from tilemerge.constants import TILE_SIZE, TILE_SPACING, TILE_Z
from tilemerge.ui.layout import BoardGeometry, compute_board_geometry


def test_default_window_fits_full_size_tiles():
    geometry = compute_board_geometry(600, 600, 4)
    assert geometry.tile_size == TILE_SIZE
    assert geometry.spacing == TILE_SPACING
    assert geometry.extent == 4 * TILE_SIZE + 3 * TILE_SPACING
    assert geometry.left == pytest.approx((600 - geometry.extent) / 2)


def test_cell_centres_follow_grid_axes():
    geometry = BoardGeometry(size=4, tile_size=100, spacing=10, left=0, bottom=0)
    assert geometry.cell_center((0, 0)) == (50, 50, TILE_Z)
    assert geometry.cell_center((1, 0)) == (160, 50, TILE_Z)
    assert geometry.cell_center((0, 3)) == (50, 380, TILE_Z)
    assert geometry.cell_center((2, 2), z=0.0)[2] == 0.0


def test_off_grid_cells_extrapolate():
    geometry = BoardGeometry(size=4, tile_size=100, spacing=10, left=0, bottom=0)
    assert geometry.cell_center((-1, 0)) == (-60, 50, TILE_Z)
    assert geometry.cell_center((0, 4)) == (50, 490, TILE_Z)


def test_small_window_shrinks_tiles_to_minimum():
    geometry = compute_board_geometry(200, 200, 4)
    assert geometry.tile_size == 20
