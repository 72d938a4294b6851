# pathkernel/geometry/vector.py
from typing import Tuple
from pydantic import Field
import math
from pathkernel.geometry.constants import EPSILON, NORMALIZE_EPSILON
from pathkernel.utils.base_model import ImmutableModel


class Vector2(ImmutableModel):
    """
    A 2D coordinate pair, used both as a point and as a direction.

    No distinction between the two is enforced; callers track which one a
    given value means. Coordinates are not validated, so NaN and infinity
    flow through arithmetic the same way they do for plain floats.
    """
    x: float = Field(default=0.0, description="X coordinate")
    y: float = Field(default=0.0, description="Y coordinate")

    @property
    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def distance_to(self, other: "Vector2") -> float:
        """Calculate the Euclidean distance to another point."""
        dx = other.x - self.x
        dy = other.y - self.y
        return math.sqrt(dx * dx + dy * dy)

    def is_close_to(self, other: "Vector2", tolerance: float = None) -> bool:
        """
        Check if this point is within tolerance of another point.

        Args:
            other: The point to compare with
            tolerance: Maximum distance between points to be considered equal.
                      If None, uses the default EPSILON value.
        """
        if tolerance is None:
            tolerance = EPSILON
        return self.distance_to(other) <= tolerance

    def dot(self, other: "Vector2") -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(x=self.x - other.x, y=self.y - other.y)

    def scale(self, factor: float) -> "Vector2":
        """Scale both coordinates by a factor."""
        return Vector2(x=self.x * factor, y=self.y * factor)

    def normalized(self) -> Tuple["Vector2", float]:
        """
        Return the unit vector and the original length.

        Vectors of length NORMALIZE_EPSILON or less are returned unchanged,
        so callers check the returned length to detect degenerate input.
        """
        d = self.length
        if d > NORMALIZE_EPSILON:
            inv = 1.0 / d
            return Vector2(x=self.x * inv, y=self.y * inv), d
        return self, d

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
