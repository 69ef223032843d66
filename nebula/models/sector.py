"""Galaxy sector data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Sector:
    """One of the six rectangular partitions of the galaxy."""

    id: str  # "A".."F", row-major
    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height
