# pathkernel/transform/affine.py
"""
Affine transform algebra in the reduced 2x3 form.

Transforms act on row vectors [x y 1]:

    | m11 m12 0 |
    | m21 m22 0 |
    | m31 m32 1 |

Every operation returns a new Affine2D; nothing is modified in place.
"""
import logging
import math
from pydantic import Field
from pathkernel.geometry.constants import DET_EPSILON, EPSILON
from pathkernel.geometry.vector import Vector2
from pathkernel.utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


class Affine2D(ImmutableModel):
    """Six-coefficient affine transform. The defaults are the identity."""
    m11: float = Field(default=1.0, description="Linear part, row 1 column 1")
    m12: float = Field(default=0.0, description="Linear part, row 1 column 2")
    m21: float = Field(default=0.0, description="Linear part, row 2 column 1")
    m22: float = Field(default=1.0, description="Linear part, row 2 column 2")
    m31: float = Field(default=0.0, description="Translation x")
    m32: float = Field(default=0.0, description="Translation y")

    @property
    def determinant(self) -> float:
        """Determinant of the linear part."""
        return self.m11 * self.m22 - self.m21 * self.m12

    def is_close_to(self, other: "Affine2D", tolerance: float = None) -> bool:
        """
        Check whether every coefficient is within tolerance of other's.

        Args:
            other: The transform to compare with
            tolerance: Maximum per-coefficient difference. If None, uses EPSILON.
        """
        if tolerance is None:
            tolerance = EPSILON
        return all(abs(a - b) <= tolerance for a, b in zip(self.as_tuple(), other.as_tuple()))

    def __str__(self) -> str:
        return "Affine2D({}, {}, {}, {}, {}, {})".format(*self.as_tuple())


IDENTITY = Affine2D()


def identity() -> Affine2D:
    """The identity transform."""
    return IDENTITY


def multiply(first: Affine2D, second: Affine2D) -> Affine2D:
    """
    Row-vector product first * second.

    Applying the result to a point is the same as applying first and
    then second.
    """
    return Affine2D(
        m11=first.m11 * second.m11 + first.m12 * second.m21,
        m12=first.m11 * second.m12 + first.m12 * second.m22,
        m21=first.m21 * second.m11 + first.m22 * second.m21,
        m22=first.m21 * second.m12 + first.m22 * second.m22,
        m31=first.m31 * second.m11 + first.m32 * second.m21 + second.m31,
        m32=first.m31 * second.m12 + first.m32 * second.m22 + second.m32,
    )


def compose(outer: Affine2D, inner: Affine2D) -> Affine2D:
    """
    Compose two transforms so that inner is applied first, then outer.

    This is how a new transform is pushed onto the current transform:
    compose(current, new) maps local coordinates through new and then
    through current.
    """
    return multiply(inner, outer)


def invert(t: Affine2D) -> Affine2D:
    """
    Inverse of t.

    A transform whose determinant magnitude is below DET_EPSILON has no
    usable inverse; the identity is returned in that case instead of
    raising.
    """
    det = t.determinant
    if -DET_EPSILON < det < DET_EPSILON:
        logger.debug(f"Transform {t} is singular (det={det}), inverting to identity")
        return IDENTITY
    invdet = 1.0 / det
    return Affine2D(
        m11=t.m22 * invdet,
        m12=-t.m12 * invdet,
        m21=-t.m21 * invdet,
        m22=t.m11 * invdet,
        m31=(t.m21 * t.m32 - t.m22 * t.m31) * invdet,
        m32=(t.m12 * t.m31 - t.m11 * t.m32) * invdet,
    )


def translate(x: float, y: float) -> Affine2D:
    """Translation by (x, y)."""
    return Affine2D(m11=1.0, m12=0.0, m21=0.0, m22=1.0, m31=x, m32=y)


def scale(x: float, y: float) -> Affine2D:
    """Axis-aligned scale by (x, y)."""
    return Affine2D(m11=x, m12=0.0, m21=0.0, m22=y, m31=0.0, m32=0.0)


def rotate(angle: float) -> Affine2D:
    """
    Rotation by angle degrees.

    The second row is (-sin, -cos), not (-sin, cos): rotate(0) flips the
    y axis. Offset and winding code downstream expects this sign pattern.
    """
    rads = angle * math.pi / 180
    cs = math.cos(rads)
    sn = math.sin(rads)
    return Affine2D(m11=cs, m12=sn, m21=-sn, m22=-cs, m31=0.0, m32=0.0)


def apply_to_point(point: Vector2, t: Affine2D) -> Vector2:
    """Map a point through t."""
    return Vector2(
        x=point.x * t.m11 + point.y * t.m21 + t.m31,
        y=point.x * t.m12 + point.y * t.m22 + t.m32,
    )


def average_scale(t: Affine2D) -> float:
    """
    Approximate uniform scale factor of t.

    Mean length of the two columns of the linear part. Used to pick
    tessellation density for geometry drawn under t.
    """
    sx = math.sqrt(t.m11 * t.m11 + t.m21 * t.m21)
    sy = math.sqrt(t.m12 * t.m12 + t.m22 * t.m22)
    return (sx + sy) * 0.5
