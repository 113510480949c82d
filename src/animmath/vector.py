# animmath/vector.py
import logging
import math
from numbers import Real
from typing import ClassVar, Generic, Iterator, Sequence, TypeVar, Union

import numpy as np

from animmath.config import EPSILON

logger = logging.getLogger(__name__)

T = TypeVar("T", np.float32, np.float64, np.int64)


def dot(lhs: "Vector3D[T]", rhs: "Vector3D[T]") -> T:
    """
    Dot product of two vectors.

    Positive result: the vectors point in similar directions.
    Negative result: the vectors point in opposite directions.
    Zero result: the vectors are perpendicular.
    """
    return (lhs.x * rhs.x) + (lhs.y * rhs.y) + (lhs.z * rhs.z)


def cross(lhs: "Vector3D", rhs: "Vector3D") -> "Vector3D":
    """
    Right-handed cross product. The result has the class of lhs.
    """
    return lhs.__class__(
        (lhs.y * rhs.z) - (lhs.z * rhs.y),
        (lhs.z * rhs.x) - (lhs.x * rhs.z),
        (lhs.x * rhs.y) - (lhs.y * rhs.x)
    )


class Vector3D(Generic[T]):
    """
    A 3D vector over a scalar type T supporting arithmetic, dot and cross
    products, and normalization.

    Components are stored as ``scalar``, a numpy scalar type fixed by each
    subclass. Results of arithmetic take the class of the left operand.
    """
    scalar: ClassVar[type] = np.float64

    __slots__ = ("x", "y", "z")

    # Keep numpy scalars on the left from broadcasting over us; Python then
    # falls back to __rmul__.
    __array_ufunc__ = None

    # Mutable value type
    __hash__ = None

    def __init__(self, *components):
        # Either the zero vector or all three components
        if not components:
            components = (0, 0, 0)
        elif len(components) != 3:
            raise TypeError(
                f"{self.__class__.__name__}() takes 0 or 3 components, got {len(components)}"
            )
        x, y, z = components
        self.x = self.scalar(x)
        self.y = self.scalar(y)
        self.z = self.scalar(z)

    @classmethod
    def from_array(cls, values: Union[Sequence, np.ndarray]) -> "Vector3D":
        arr = np.asarray(values)
        if arr.shape != (3,):
            raise ValueError(f"Expected 3 components, got shape {arr.shape}.")
        return cls(arr[0], arr[1], arr[2])

    def _assign(self, x, y, z) -> "Vector3D":
        self.x = self.scalar(x)
        self.y = self.scalar(y)
        self.z = self.scalar(z)
        return self

    def copy(self) -> "Vector3D":
        return self.__class__(self.x, self.y, self.z)

    def __add__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.__class__(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iadd__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self._assign(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.__class__(self.x - other.x, self.y - other.y, self.z - other.z)

    def __isub__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self._assign(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3D":
        return self.__class__(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        # Vector operand: non-uniform scale. Scalar operand: uniform scale.
        if isinstance(other, Vector3D):
            return self.__class__(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            return self.__class__(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other) -> "Vector3D":
        if not isinstance(other, Real):
            return NotImplemented
        return self.__class__(other * self.x, other * self.y, other * self.z)

    def __imul__(self, other):
        if isinstance(other, Vector3D):
            return self._assign(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            return self._assign(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, t) -> "Vector3D":
        if not isinstance(t, Real):
            return NotImplemented
        return self.__class__(self.x / t, self.y / t, self.z / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return bool(self.x == other.x and self.y == other.y and self.z == other.z)

    def isclose(self, other: "Vector3D", rel_tol: float = 1e-05, abs_tol: float = 1e-08) -> bool:
        return bool(np.allclose(self.to_array(), other.to_array(), rtol=rel_tol, atol=abs_tol))

    def __iter__(self) -> Iterator:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def length_squared(self) -> T:
        return (self.x * self.x) + (self.y * self.y) + (self.z * self.z)

    def length(self) -> T:
        return self.scalar(math.sqrt(self.length_squared()))

    def get_normalized(self) -> "Vector3D":
        """
        Returns a unit-length copy, or the zero vector when the length is
        not above EPSILON.
        """
        size = self.length()
        if size > self.scalar(EPSILON):
            return self * (self.scalar(1.0) / size)
        return self.__class__()

    def normalize(self) -> "Vector3D":
        """
        Normalizes in place and returns self. A vector whose length is not
        above EPSILON is left unchanged.
        """
        size = self.length()
        if size > self.scalar(EPSILON):
            self *= self.scalar(1.0) / size
        else:
            logger.debug("normalize skipped for %r: length %s <= %s", self, size, EPSILON)
        return self

    def dot(self, other: "Vector3D[T]") -> T:
        return dot(self, other)

    def cross(self, other: "Vector3D") -> "Vector3D":
        return cross(self, other)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=self.scalar)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.x}, {self.y}, {self.z})"


class Vector3DF(Vector3D[np.float32]):
    """Single-precision vector."""
    scalar = np.float32
    __slots__ = ()


class Vector3DD(Vector3D[np.float64]):
    """Double-precision vector."""
    scalar = np.float64
    __slots__ = ()


class Vector3DI(Vector3D[np.int64]):
    """
    Integer vector. length() and the normalize family truncate to int64,
    so a normalized integer vector is only unit length along an axis.
    """
    scalar = np.int64
    __slots__ = ()
