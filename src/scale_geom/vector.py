import logging
import math
import operator

import numpy as np

from scale_geom.constants import DIM2, DIM3, X, Y, Z
from scale_geom.helpers import COORD_ARRAY, check_coord_dtype, is_equal

logger = logging.getLogger(__name__)


class Vector:
    """
    Fixed size vector of N arithmetic coordinates, representing a point or a
    direction in N-dimensional space.

    Subclasses can pin the dimension and coordinate type by setting
    `DIMENSION` and `DTYPE` (see `Vector2f` and `Vector3f`).
    """
    DIMENSION: int = None
    DTYPE: np.dtype = None

    def __init__(self, *coords, dimension: int=None, dtype=None):
        """
        Create a new vector.

        Parameters
        ----------
        *coords : numbers, or a single sequence of numbers
            Coordinates in index order. If empty, all N coordinates are zero.
        dimension : int
            Number of coordinates N. Required for an empty vector unless the
            class fixes `DIMENSION`.
        dtype : numpy dtype-like
            Coordinate type T. Inferred from `coords` if not given.
        """
        cls = type(self)
        if dimension is None:
            dimension = cls.DIMENSION
        elif cls.DIMENSION is not None and dimension != cls.DIMENSION:
            logger.debug(f"rejected {cls.__name__} {dimension=}")
            raise ValueError(f"{cls.__name__} is fixed to {cls.DIMENSION} "
                             f"dimensions, got {dimension}")
        if dtype is None:
            dtype = cls.DTYPE
        if dtype is not None:
            dtype = check_coord_dtype(dtype)
        if cls.DTYPE is not None and dtype != cls.DTYPE:
            logger.debug(f"rejected {cls.__name__} {dtype=}")
            raise ValueError(f"{cls.__name__} is fixed to "
                             f"{np.dtype(cls.DTYPE)} coordinates, got {dtype}")

        if len(coords) == 0:
            if dimension is None:
                raise ValueError("Dimension is required for a default vector")
            coords = np.zeros(dimension,
                              dtype=np.float64 if dtype is None else dtype)
        elif len(coords) == 1:
            (data,) = coords
            if isinstance(data, Vector):
                data = data._coords
            coords = np.array(data, dtype=dtype)
        else:
            coords = np.array(coords, dtype=dtype)

        if coords.ndim != 1:
            raise ValueError("Coordinates must be a flat sequence of numbers")
        check_coord_dtype(coords.dtype)
        if len(coords) < DIM2:
            raise ValueError("Vector dimensions must be at least 2D, "
                             f"got {len(coords)}")
        if dimension is not None and len(coords) != dimension:
            raise ValueError(f"Expected {dimension} coordinates, "
                             f"got {len(coords)}")

        self._coords: COORD_ARRAY = coords

    @classmethod
    def _from_array(cls, coords: COORD_ARRAY) -> "Vector":
        """Wrap an already validated array without copying it."""
        vec = cls.__new__(cls)
        vec._coords = coords
        return vec

    @property
    def dimension(self) -> int: return len(self._coords)

    @property
    def dtype(self) -> np.dtype: return self._coords.dtype

    @property
    def coords(self) -> COORD_ARRAY: return self._coords.copy()

    @property
    def x(self): return self.get(X)

    @property
    def y(self): return self.get(Y)

    @property
    def z(self): return self.get(Z)

    def _check_index(self, index) -> int:
        try:
            index = operator.index(index)
        except TypeError:
            raise TypeError("Vector indices must be integers, not "
                            f"{type(index).__name__}") from None
        # Negative indices do not wrap around
        if not 0 <= index < len(self._coords):
            logger.debug(f"rejected {index=} for {self.dimension}D vector")
            raise IndexError("Index out of range")
        return index

    def _check_compatible(self, other: "Vector"):
        if other.dimension != self.dimension or other.dtype != self.dtype:
            logger.debug(f"rejected operands {self!r} and {other!r}")
        if other.dimension != self.dimension:
            raise ValueError(f"Dimension mismatch: {self.dimension} "
                             f"and {other.dimension}")
        if other.dtype != self.dtype:
            raise ValueError(f"Coordinate type mismatch: {self.dtype} "
                             f"and {other.dtype}")

    def get(self, index: int):
        """Coordinate at `index`."""
        return self._coords[self._check_index(index)].item()

    def assign(self, index: int, value):
        """
        Set the coordinate at `index` to `value`, cast to the coordinate
        type.
        """
        index = self._check_index(index)
        self._coords[index] = value
        logger.debug(f"{index=} {value=} -> {self}")

    def __getitem__(self, index):
        return self.get(index)

    def __setitem__(self, index, value):
        self.assign(index, value)

    def __len__(self):
        return len(self._coords)

    def __iter__(self):
        return iter(self._coords.tolist())

    def copy(self) -> "Vector":
        return self._from_array(self._coords.copy())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if other.dimension != self.dimension:
            return False
        return all(is_equal(a, b) for a, b in zip(self._coords.tolist(),
                                                  other._coords.tolist()))

    # Mutable and compared with a tolerance
    __hash__ = None

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_compatible(other)
        return self._from_array(self._coords + other._coords)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_compatible(other)
        return self._from_array(self._coords - other._coords)

    def __neg__(self) -> "Vector":
        # Unsigned coordinates would wrap around
        if np.issubdtype(self.dtype, np.unsignedinteger):
            logger.debug(f"rejected negation of {self!r} ({self.dtype})")
            raise TypeError("Cannot negate a vector with unsigned "
                            f"coordinates ({self.dtype})")
        return self._from_array(-self._coords)

    def __lt__(self, other: "Vector") -> bool:
        """True if every coordinate is strictly less than in `other`."""
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_compatible(other)
        return bool(np.all(self._coords < other._coords))

    def __gt__(self, other: "Vector") -> bool:
        """True if every coordinate is strictly greater than in `other`."""
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_compatible(other)
        return bool(np.all(self._coords > other._coords))

    def magnitude(self) -> float:
        """Euclidean norm, always computed in double precision."""
        coords = self._coords.astype(np.float64)
        return math.sqrt(float(coords @ coords))

    def normalize(self):
        """
        In place, scale the vector to unit magnitude.

        Raises `TypeError` for integer coordinates and `ValueError` for a zero
        vector. The vector is left untouched in both cases.
        """
        if not np.issubdtype(self.dtype, np.floating):
            logger.debug(f"rejected normalize of {self!r} ({self.dtype})")
            raise TypeError("Cannot normalize a vector with integer "
                            f"coordinates ({self.dtype})")
        mag = self.magnitude()
        if mag == 0:
            logger.debug(f"rejected normalize of {self!r}, {mag=}")
            raise ValueError("Cannot normalize a zero-length vector.")
        self._coords /= mag
        logger.debug(f"{mag=} -> {self}")

    def __str__(self) -> str:
        if np.issubdtype(self.dtype, np.floating):
            parts = [format(c, "g") for c in self._coords.tolist()]
        else:
            parts = [str(c) for c in self._coords.tolist()]
        return "(" + ", ".join(parts) + ")"

    def __repr__(self) -> str:
        args = ", ".join(repr(c) for c in self._coords.tolist())
        return f"{type(self).__name__}({args})"


class Vector2f(Vector):
    """2D vector with float coordinates."""
    DIMENSION = DIM2
    DTYPE = np.float64


class Vector3f(Vector):
    """3D vector with float coordinates."""
    DIMENSION = DIM3
    DTYPE = np.float64


def dot_product(v1: Vector, v2: Vector):
    """
    Sum of the products of corresponding coordinates, accumulated in the
    coordinate type of the operands.
    """
    if not (isinstance(v1, Vector) and isinstance(v2, Vector)):
        logger.debug(f"rejected dot product operands {v1!r} and {v2!r}")
        raise TypeError("Dot product is only defined for vectors")
    v1._check_compatible(v2)
    return np.dot(v1._coords, v2._coords).item()

def _check_cross_operands(dimension: int, *vectors):
    for v in vectors:
        if not (isinstance(v, Vector) and v.dimension == dimension
                and np.issubdtype(v.dtype, np.floating)):
            logger.debug(f"rejected cross product operand {v!r}")
        if not isinstance(v, Vector):
            raise TypeError("Cross products are only defined for vectors, "
                            f"got {type(v).__name__}")
        if not np.issubdtype(v.dtype, np.floating):
            raise TypeError("Cross products need float coordinates, "
                            f"got {v.dtype}")
        if v.dimension != dimension:
            raise ValueError(f"Expected a {dimension}D vector, "
                             f"got {v.dimension}D")

def cross_product_2d(v1: Vector2f, v2: Vector2f) -> float:
    """Cross product of 2D vectors which returns a scalar (signed area)."""
    _check_cross_operands(DIM2, v1, v2)
    a, b = v1._coords, v2._coords
    return float(a[X]*b[Y] - a[Y]*b[X])

def cross_product_3d(v1: Vector3f, v2: Vector3f) -> Vector3f:
    _check_cross_operands(DIM3, v1, v2)
    a, b = v1._coords, v2._coords
    x = a[Y]*b[Z] - a[Z]*b[Y]
    y = a[Z]*b[X] - a[X]*b[Z]
    z = a[X]*b[Y] - a[Y]*b[X]
    return Vector3f(x, y, z)

def scalar_triple_product(v1: Vector3f, v2: Vector3f, v3: Vector3f) -> float:
    """
    Signed volume of the parallelepiped spanned by three 3D vectors,
    (v1 x v2) . v3.
    """
    _check_cross_operands(DIM3, v1, v2, v3)
    return float(dot_product(cross_product_3d(v1, v2), Vector3f(v3)))
