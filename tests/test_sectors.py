"""Tests for the sector layout."""

import pytest

from nebula.engine import generate_sectors
from nebula.utils import MAP_SIZE_LY


def test_six_sectors_row_major():
    """Test sectors are labeled A-F in row-major order."""
    sectors = generate_sectors()

    assert [s.id for s in sectors] == ["A", "B", "C", "D", "E", "F"]
    assert [s.y for s in sectors[:3]] == [0, 0, 0]
    assert [s.y for s in sectors[3:]] == [MAP_SIZE_LY / 2] * 3
    assert sectors[0].x == 0
    assert sectors[1].x == pytest.approx(MAP_SIZE_LY / 3)
    assert sectors[2].x == pytest.approx(2 * MAP_SIZE_LY / 3)


def test_sectors_tile_galaxy():
    """Test sectors are equal and cover the whole extent."""
    sectors = generate_sectors()

    for sector in sectors:
        assert sector.width == MAP_SIZE_LY / 3
        assert sector.height == MAP_SIZE_LY / 2
    assert sum(s.width * s.height for s in sectors) == pytest.approx(MAP_SIZE_LY**2)


def test_sector_center():
    """Test sector center is the rectangle midpoint."""
    sector = generate_sectors()[4]  # E
    x, y = sector.center
    assert x == sector.x + sector.width / 2
    assert y == sector.y + sector.height / 2
    assert sector.contains(x, y)


def test_layout_is_stable():
    assert generate_sectors() == generate_sectors()
