"""
3D Vector Math

A Vector3 is three single-precision components (x, y, z) and nothing else:
no identity, no shared state. Every operation returns a NEW vector.

KEY CONCEPTS:

1. VALUE SEMANTICS
   - Frozen dataclass, components stored as numpy.float32
   - Equality is exact component-wise comparison (no epsilon)
   - Callers that need "close enough" must apply their own tolerance

2. IEEE-754 ALL THE WAY DOWN
   - Normalizing or projecting onto the zero vector divides by zero
   - That produces inf/NaN components, never an exception
   - checked_unit() / checked_proj_onto() return None instead, for callers
     that want an explicit "undefined" outcome

3. RIGHT-HAND SCALARS ONLY
   - v * 2.0 works, 2.0 * v raises TypeError
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple
import logging
import numbers
import numpy as np

logger = logging.getLogger(__name__)


def _as_component(value) -> np.float32:
    """Explicit conversion of a real number to a float32 component."""
    if not isinstance(value, numbers.Real):
        raise TypeError(
            f"Vector3 components must be real numbers, got {type(value).__name__}"
        )
    return np.float32(value)


def _sin_cos(angle: float) -> Tuple[np.float32, np.float32]:
    theta = _as_component(angle)
    return np.sin(theta), np.cos(theta)


@dataclass(frozen=True)
class Vector3:
    """
    A 3D vector in right-handed Euclidean space.

    Components may be any real number, including zero, negative,
    NaN or infinity. They are converted to float32 on construction.
    """
    x: float
    y: float
    z: float

    # Make numpy scalars on the left defer to us (and then fail): no scalar * vector
    __array_ufunc__ = None

    def __post_init__(self):
        object.__setattr__(self, "x", _as_component(self.x))
        object.__setattr__(self, "y", _as_component(self.y))
        object.__setattr__(self, "z", _as_component(self.z))

    # ------------------------------------------------------------
    # Construction & conversion
    # ------------------------------------------------------------

    @classmethod
    def new(cls, x, y, z) -> Vector3:
        """Build from any three real numbers."""
        return cls(x, y, z)

    @classmethod
    def from_tuple(cls, values: Sequence[float]) -> Vector3:
        """Create from an (x, y, z) tuple."""
        if len(values) != 3:
            raise ValueError(f"Expected 3 components, got {len(values)}")
        return cls(values[0], values[1], values[2])

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vector3:
        """Create from a length-3 numpy array."""
        arr = np.asarray(arr)
        if arr.shape != (3,):
            raise ValueError(f"Expected array of shape (3,), got {arr.shape}")
        return cls(arr[0].item(), arr[1].item(), arr[2].item())

    @classmethod
    def zero(cls) -> Vector3:
        """The origin."""
        return cls(0.0, 0.0, 0.0)

    def to_tuple(self) -> Tuple[np.float32, np.float32, np.float32]:
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        """Convert to a float32 numpy array."""
        return np.array([self.x, self.y, self.z], dtype=np.float32)

    def __iter__(self) -> Iterator[np.float32]:
        return iter(self.to_tuple())

    # ------------------------------------------------------------
    # Formatting & comparison
    # ------------------------------------------------------------

    def __str__(self) -> str:
        return f"<{self.x}, {self.y}, {self.z}>"

    def __repr__(self) -> str:
        return str(self)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return bool(self.x == other.x and self.y == other.y and self.z == other.z)

    # ------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------

    def scale(self, scalar: float) -> Vector3:
        """Component-wise multiplication by a scalar."""
        s = _as_component(scalar)
        return Vector3(self.x * s, self.y * s, self.z * s)

    def add(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def negate(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar) -> Vector3:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.scale(scalar)

    def __add__(self, other) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other.negate())

    def __neg__(self) -> Vector3:
        return self.negate()

    # ------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------

    def magnitude(self) -> np.float32:
        """Length of the vector (Euclidean norm)."""
        return np.sqrt(self.x**2 + self.y**2 + self.z**2)

    def unit(self) -> Vector3:
        """
        Unit vector (same direction, length = 1).

        No zero guard: the zero vector yields non-finite components.
        Use checked_unit() for an explicit outcome.
        """
        mag = self.magnitude()
        if mag == 0:
            logger.debug(f"Normalizing zero-magnitude vector {self}")
        with np.errstate(divide="ignore", invalid="ignore"):
            return self * (np.float32(1.0) / mag)

    def checked_unit(self) -> Optional[Vector3]:
        """Unit vector, or None if the magnitude is zero."""
        if self.magnitude() == 0:
            return None
        return self.unit()

    def dot_product(self, rhs: Vector3) -> np.float32:
        """Dot product: measures how aligned two vectors are."""
        return (self.x * rhs.x) + (self.y * rhs.y) + (self.z * rhs.z)

    def cross_product(self, rhs: Vector3) -> Vector3:
        """Cross product: right-handed, perpendicular to both inputs."""
        return Vector3(
            (self.y * rhs.z) - (self.z * rhs.y),
            (self.z * rhs.x) - (self.x * rhs.z),
            (self.x * rhs.y) - (self.y * rhs.x),
        )

    @staticmethod
    def proj(lhs: Vector3, rhs: Vector3) -> Vector3:
        """
        Projection of rhs onto lhs:

            lhs * (rhs·lhs / lhs·lhs)

        A zero lhs divides by zero and gives non-finite components.
        """
        denom = lhs.dot_product(lhs)
        if denom == 0:
            logger.debug(f"Projecting {rhs} onto zero vector")
        with np.errstate(divide="ignore", invalid="ignore"):
            return lhs * (rhs.dot_product(lhs) / denom)

    def proj_onto(self, rhs: Vector3) -> Vector3:
        """Project self onto rhs (note the argument order vs proj)."""
        return Vector3.proj(rhs, self)

    def checked_proj_onto(self, rhs: Vector3) -> Optional[Vector3]:
        """Project self onto rhs, or None if rhs is the zero vector."""
        if rhs.dot_product(rhs) == 0:
            return None
        return self.proj_onto(rhs)

    def angle(self, rhs: Vector3) -> np.float32:
        """
        Angle in radians, using |self|² as the denominator.

        Kept for compatibility: only correct when |self| == |rhs|.
        New code should call angle_between().
        """
        mag = self.magnitude()
        with np.errstate(divide="ignore", invalid="ignore"):
            return np.arccos(self.dot_product(rhs) / (mag * mag))

    def angle_between(self, rhs: Vector3) -> np.float32:
        """Angle in radians between self and rhs. NaN if either is zero."""
        with np.errstate(divide="ignore", invalid="ignore"):
            cos_theta = self.dot_product(rhs) / (self.magnitude() * rhs.magnitude())
            return np.arccos(np.clip(cos_theta, np.float32(-1.0), np.float32(1.0)))

    # ------------------------------------------------------------
    # Rotations (angle in radians, standard rotation matrices)
    # ------------------------------------------------------------

    def rotate_x(self, angle: float) -> Vector3:
        """Rotate about the x axis."""
        sin, cos = _sin_cos(angle)
        return Vector3(
            self.x,
            (self.y * cos) - (self.z * sin),
            (self.y * sin) + (self.z * cos),
        )

    def rotate_y(self, angle: float) -> Vector3:
        """Rotate about the y axis."""
        sin, cos = _sin_cos(angle)
        return Vector3(
            (self.x * cos) + (self.z * sin),
            self.y,
            (-self.x * sin) + (self.z * cos),
        )

    def rotate_z(self, angle: float) -> Vector3:
        """Rotate about the z axis."""
        sin, cos = _sin_cos(angle)
        return Vector3(
            (self.x * cos) - (self.y * sin),
            (self.x * sin) + (self.y * cos),
            self.z,
        )


def proj(lhs: Vector3, rhs: Vector3) -> Vector3:
    """Module-level alias for Vector3.proj."""
    return Vector3.proj(lhs, rhs)
