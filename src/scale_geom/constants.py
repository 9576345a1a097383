"""Common constants."""

# Absolute tolerance for floating point comparisons
TOLERANCE = 1e-7

# Dimensions of the 2D and 3D vector aliases
DIM2 = 2
DIM3 = 3

# Coordinate indices
X = 0
Y = 1
Z = 2
