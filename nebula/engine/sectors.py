"""Fixed 3x2 partition of the galaxy into sectors."""

from ..models.sector import Sector
from ..utils.constants import MAP_SIZE_LY, SECTOR_COLS, SECTOR_IDS, SECTOR_ROWS


def generate_sectors() -> list[Sector]:
    """Divide the galaxy evenly into six sectors labeled A-F in row-major order.

    Returns:
        Sectors A, B, C (top row) then D, E, F (bottom row)
    """
    width = MAP_SIZE_LY / SECTOR_COLS
    height = MAP_SIZE_LY / SECTOR_ROWS

    sectors = []
    for row in range(SECTOR_ROWS):
        for col in range(SECTOR_COLS):
            sectors.append(
                Sector(
                    id=SECTOR_IDS[row * SECTOR_COLS + col],
                    x=col * width,
                    y=row * height,
                    width=width,
                    height=height,
                )
            )
    return sectors
