"""Helper functions."""

import numpy as np

from scale_geom.constants import TOLERANCE

# Type hint for a 1-D coordinate array
COORD_ARRAY = np.ndarray[tuple[int], np.dtype[np.number]]

def is_equal(a: float, b: float) -> bool:
    """Check if two numbers are equal to within `TOLERANCE`."""
    return abs(a - b) < TOLERANCE

def check_coord_dtype(dtype) -> np.dtype:
    """
    Convert `dtype` to a numpy dtype and make sure it can hold coordinates.
    Only integer and floating point types are arithmetic here; bool and
    complex are rejected.
    """
    dtype = np.dtype(dtype)
    if not (np.issubdtype(dtype, np.integer)
            or np.issubdtype(dtype, np.floating)):
        raise TypeError(f"Coordinate type must be arithmetic, got {dtype}")
    return dtype
