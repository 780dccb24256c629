"""Type definitions for shape-tools geometry."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence, Tuple

from .. import config


@dataclass(frozen=True)
class Coordinate:
    """2D point. Equality is exact; use coordinate_key() for same-point tests."""
    x: float = 0.0
    y: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y


def coordinate_key(coordinate: Coordinate,
                   precision: int = config.COORDINATE_PRECISION) -> Tuple[float, float]:
    """Quantized identity of a coordinate.

    Two coordinates that differ only by floating-point noise from independent
    intersection computations map to the same key.
    """
    # + 0.0 folds -0.0 into 0.0
    return (round(coordinate.x, precision) + 0.0,
            round(coordinate.y, precision) + 0.0)


@dataclass
class Segment:
    """A polygon edge between two coordinates."""
    start: Coordinate
    end: Coordinate


@dataclass
class Polygon:
    """An implicitly closed ring of coordinates.

    The edge from the last point back to the first is part of the boundary,
    so the first point is never repeated at the end. Point order defines the
    winding.
    """
    points: List[Coordinate] = field(default_factory=list)

    @classmethod
    def from_tuples(cls, points: Iterable[Sequence[float]]) -> "Polygon":
        return cls([Coordinate(float(p[0]), float(p[1])) for p in points])

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Coordinate:
        return self.points[index]

    def segments(self) -> Iterator[Segment]:
        """Yield every edge, including the closing edge."""
        n = len(self.points)
        for i in range(n):
            yield Segment(self.points[i], self.points[(i + 1) % n])

    def copy(self) -> "Polygon":
        return Polygon(list(self.points))

    def to_tuples(self) -> List[Tuple[float, float]]:
        return [(p.x, p.y) for p in self.points]
