# pathkernel/transform/adapters.py
"""Conversions from Affine2D to the layouts a rendering backend uploads."""
from typing import List
from pydantic import Field
from pathkernel.transform.affine import Affine2D
from pathkernel.utils.base_model import ImmutableModel

UNIFORM_BUFFER_SIZE = 12


class Mat3x4(ImmutableModel):
    """
    An affine transform widened to 3 rows by 4 columns.

    The extra column entries are zero except the homogeneous 1.0 in the
    third slot of row 3.
    """
    m11: float = 0.0
    m12: float = 0.0
    m13: float = 0.0
    m14: float = 0.0
    m21: float = 0.0
    m22: float = 0.0
    m23: float = 0.0
    m24: float = 0.0
    m31: float = 0.0
    m32: float = 0.0
    m33: float = Field(default=1.0, description="Homogeneous diagonal entry")
    m34: float = 0.0


def widen_to_3x4(t: Affine2D) -> Mat3x4:
    """Widen t into the 3x4 layout."""
    return Mat3x4(
        m11=t.m11, m12=t.m12, m13=0.0, m14=0.0,
        m21=t.m21, m22=t.m22, m23=0.0, m24=0.0,
        m31=t.m31, m32=t.m32, m33=1.0, m34=0.0,
    )


def flatten(wide: Mat3x4) -> List[float]:
    """
    Row-major linearization of a Mat3x4.

    Backends read this buffer with a fixed layout: row 1, row 2, row 3,
    four values each.
    """
    return [
        wide.m11, wide.m12, wide.m13, wide.m14,
        wide.m21, wide.m22, wide.m23, wide.m24,
        wide.m31, wide.m32, wide.m33, wide.m34,
    ]


def to_uniform_buffer(t: Affine2D) -> List[float]:
    """The 12 floats uploaded for a draw under transform t."""
    return flatten(widen_to_3x4(t))
