# pathkernel/geometry/constants.py
"""Constants for geometric calculations."""
import math

PI = math.pi

# Bezier handle length for approximating a quarter circle
KAPPA = 0.5522847493

# Default tolerance for floating-point comparisons
EPSILON = 1e-10

# Transforms with |det| below this are treated as singular
DET_EPSILON = 1e-6

# Vectors no longer than this are left unnormalized
NORMALIZE_EPSILON = 1e-6
