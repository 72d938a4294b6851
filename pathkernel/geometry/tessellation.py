# pathkernel/geometry/tessellation.py
import math
from pydantic import Field, field_validator
from pathkernel.geometry.primitives import points_nearly_equal
from pathkernel.utils.base_model import ImmutableModel


def curve_subdivisions(radius: float, arc_span: float, tolerance: float) -> int:
    """
    Number of segments needed to approximate a circular arc.

    The angular step is the largest one whose chord stays within
    tolerance of the arc. At least 2 segments are always returned.

    Args:
        radius: Arc radius, must be > 0
        arc_span: Swept angle in radians
        tolerance: Maximum chord deviation, must be > 0

    Inputs are not validated and nothing raises. Division and acos follow
    IEEE semantics: a zero step gives an infinite quotient and out-of-domain
    input gives NaN. Any non-finite quotient falls back to the minimum of 2.
    """
    denom = radius + tolerance
    ratio = radius / denom if denom != 0 else math.nan
    da = math.acos(ratio) * 2.0 if -1.0 <= ratio <= 1.0 else math.nan
    steps = arc_span / da if da != 0 else math.inf
    if not math.isfinite(steps):
        return 2
    return max(2, int(math.ceil(steps)))


class Tolerances(ImmutableModel):
    """
    Flattening and merging tolerances for one rendering context.

    Tolerances are expressed in logical units and shrink as the device
    pixel ratio grows, so curves stay smooth on dense displays.
    """
    tess_tol: float = Field(default=0.25, description="Curve flatness tolerance")
    dist_tol: float = Field(default=0.01, description="Distance under which points are merged")
    fringe_width: float = Field(default=1.0, description="Anti-aliasing fringe width")

    @field_validator("tess_tol", "dist_tol", "fringe_width")
    @classmethod
    def validate_positive(cls, value: float) -> float:
        """Validate that tolerances are positive."""
        if not value > 0:
            raise ValueError(f"Tolerance must be positive, got {value}")
        return value

    @classmethod
    def from_device_pixel_ratio(cls, ratio: float) -> "Tolerances":
        """Create tolerances for a display with the given device pixel ratio."""
        if not ratio > 0:
            raise ValueError(f"Device pixel ratio must be positive, got {ratio}")
        return cls(
            tess_tol=0.25 / ratio,
            dist_tol=0.01 / ratio,
            fringe_width=1.0 / ratio,
        )

    def curve_subdivisions(self, radius: float, arc_span: float) -> int:
        """Segment count for an arc using this context's flatness tolerance."""
        return curve_subdivisions(radius, arc_span, self.tess_tol)

    def points_equal(self, x1: float, y1: float, x2: float, y2: float) -> bool:
        """Check whether two points should be merged in this context."""
        return points_nearly_equal(x1, y1, x2, y2, self.dist_tol)
