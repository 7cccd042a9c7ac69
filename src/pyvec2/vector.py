from __future__ import annotations

import math
from typing import Any, Iterator

from pyvec2.logging import vector_logger
from pyvec2.types import Float2, Number, Operand
from pyvec2.utils.numeric import ieee_div
from pyvec2.utils.validation import (is_number, validate_argument_types,
                                     validate_component)


def is_vector(value: Any) -> bool:
    """
    Checks whether ``value`` is a :class:`Vector2` with two numeric components.

    Tuples and lists are not vectors, even with two numbers in them: every
    operation reads ``.x``/``.y`` and returns a :class:`Vector2`, so sequences
    have to be converted explicitly, e.g. ``Vector2(*pair)``.

    Args:
        value: Any object.

    Returns:
        True if ``value`` can be used as a vector operand.
    """
    return isinstance(value, Vector2) and is_number(value.x) and is_number(value.y)


class Vector2:
    """
    A class for storing vectors in R^2.

    Vectors behave like values: every operation returns a new instance, except
    for the explicitly named in-place operations (:meth:`normalize_inplace`,
    :meth:`rotate_inplace` and :meth:`trim_inplace`), which mutate the vector
    and return it. Operands are validated and a wrong type raises
    :class:`pyvec2.logging.Vec2ArgumentError`.

    Division never raises on a zero divisor; it follows IEEE 754 and produces
    ``inf`` or ``nan`` components.
    """

    # let numpy scalars defer to the reflected operators below
    __array_ufunc__ = None

    def __init__(self, x: Number | None = 0, y: Number | None = 0):
        """
        Creates a Vector2 instance.

        Args:
            x: The x component. Defaults to 0.
            y: The y component. Defaults to 0.
        """
        x = 0 if x is None else x
        y = 0 if y is None else y
        validate_component(x, "x")
        validate_component(y, "y")
        self.x = x
        self.y = y

    @classmethod
    def new(cls, x: Number | None = 0, y: Number | None = 0) -> Vector2:
        """
        Alternative constructor, equivalent to ``Vector2(x, y)``.
        """
        return cls(x, y)

    is_vector = staticmethod(is_vector)
    isVector = is_vector

    def clone(self) -> Vector2:
        """
        Returns:
            An independent copy of this vector.
        """
        return Vector2(self.x, self.y)

    def unpack(self) -> Float2:
        """
        Returns:
            The components as an ``(x, y)`` tuple.
        """
        return self.x, self.y

    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y

    def to_string(self) -> str:
        """
        Formats the vector as ``(x,y)``. Components use the ``%.14g`` format,
        so integral values print without a fractional part.
        """
        return f"({self.x:.14g},{self.y:.14g})"

    toString = to_string
    __str__ = to_string

    def __repr__(self) -> str:
        return f"Vector2({self.x!r}, {self.y!r})"

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def add(self, b: Vector2) -> Vector2:
        """
        Adds a given vector to this vector.

        Args:
            b: the vector to add to this vector.

        Returns:
            The addition of the two vectors.
        """
        validate_argument_types(
            is_vector(self) and is_vector(b),
            "Add: wrong argument types (<vector> expected)",
        )
        return Vector2(self.x + b.x, self.y + b.y)

    def sub(self, b: Vector2) -> Vector2:
        """
        Subtracts a given vector from this vector.

        Args:
            b: the vector to be subtracted from this vector.

        Returns:
            The subtraction of the two vectors.
        """
        validate_argument_types(
            is_vector(self) and is_vector(b),
            "Sub: wrong argument types (<vector> expected)",
        )
        return Vector2(self.x - b.x, self.y - b.y)

    __add__ = add
    __sub__ = sub

    def __radd__(self, a: Any) -> Vector2:
        return Vector2.add(a, self)

    def __rsub__(self, a: Any) -> Vector2:
        return Vector2.sub(a, self)

    def scale(self, s: Number) -> Vector2:
        """
        Scalar multiplies this vector.

        Args:
            s: the scalar value to be multiplied to this vector.

        Returns:
            The vector * scalar product.
        """
        validate_argument_types(
            is_vector(self) and is_number(s),
            "Scale: wrong argument types (expected <vector> * <number>)",
        )
        return Vector2(s * self.x, s * self.y)

    def dot(self, b: Vector2) -> Number:
        """
        Computes the dot product between this vector and a given vector.

        Args:
            b: the given second vector with which to compute the dot product.

        Returns:
            The scalar-valued dot product.
        """
        validate_argument_types(
            is_vector(self) and is_vector(b),
            "Dot: wrong argument types (<vector> expected)",
        )
        return self.x * b.x + self.y * b.y

    def mul(self, b: Operand) -> Vector2 | Number:
        """
        Polymorphic multiplication, also available as the ``*`` operator.

        ``number * vector`` and ``vector * number`` scale the vector,
        ``vector * vector`` is the dot product. Can be called unbound with a
        number first, e.g. ``Vector2.mul(2, v)``.

        Args:
            b: the right-hand operand.

        Returns:
            The scaled vector, or the dot product as a number.
        """
        if is_number(self):
            validate_argument_types(
                is_vector(b),
                "Mul: wrong argument types (<vector> or <number> expected)",
            )
            return Vector2(self * b.x, self * b.y)
        if is_number(b):
            validate_argument_types(
                is_vector(self),
                "Mul: wrong argument types (<vector> or <number> expected)",
            )
            return Vector2(b * self.x, b * self.y)
        validate_argument_types(
            is_vector(self) and is_vector(b),
            "Mul: wrong argument types (<vector> or <number> expected)",
        )
        return self.x * b.x + self.y * b.y

    __mul__ = mul

    def __rmul__(self, a: Any) -> Vector2 | Number:
        return Vector2.mul(a, self)

    def div(self, b: Number) -> Vector2:
        """
        Scalar divides this vector. A zero divisor is not an error: the
        components become ``±inf``, or ``nan`` where they are zero themselves.

        Args:
            b: the scalar value by which this vector is to be divided.

        Returns:
            The vector / scalar quotient.
        """
        validate_argument_types(
            is_vector(self) and is_number(b),
            "Div: wrong argument types (expected <vector> / <number>)",
        )
        if b == 0:
            vector_logger.debug(f"Dividing {self} by zero.")
        return Vector2(ieee_div(self.x, b), ieee_div(self.y, b))

    __truediv__ = div

    def __rtruediv__(self, a: Any) -> Vector2:
        return Vector2.div(a, self)

    def eq(self, b: Any) -> bool:
        """
        Structural equality: True if both components are equal. Comparing
        with anything that is not a vector is False.
        """
        if not (is_vector(self) and is_vector(b)):
            return False
        return self.x == b.x and self.y == b.y

    def __eq__(self, b: Any) -> bool:
        if not is_vector(b):
            return NotImplemented
        return self.eq(b)

    def __ne__(self, b: Any) -> bool:
        if not is_vector(b):
            return NotImplemented
        return not self.eq(b)

    __hash__ = None

    def lt(self, b: Vector2) -> bool:
        """
        Lexicographic ordering: compares x first, then y.
        """
        validate_argument_types(
            is_vector(self) and is_vector(b),
            "Lt: wrong argument types (<vector> expected)",
        )
        return self.x < b.x or (self.x == b.x and self.y < b.y)

    def le(self, b: Vector2) -> bool:
        """
        True if *both* components of this vector are less than or equal to the
        ones of ``b``.

        This is not ``lt(a, b) or eq(a, b)``: for ``a = (1, 2)`` and
        ``b = (2, 1)`` both ``a <= b`` and ``b <= a`` are False, while
        ``a < b`` is True. Callers rely on this, keep it.
        """
        validate_argument_types(
            is_vector(self) and is_vector(b),
            "Le: wrong argument types (<vector> expected)",
        )
        return self.x <= b.x and self.y <= b.y

    __lt__ = lt
    __le__ = le

    def __gt__(self, b: Vector2) -> bool:
        return Vector2.lt(b, self)

    def __ge__(self, b: Vector2) -> bool:
        return Vector2.le(b, self)

    def permul(self, b: Vector2) -> Vector2:
        """
        Componentwise product ``(a.x * b.x, a.y * b.y)``.
        """
        validate_argument_types(
            is_vector(self) and is_vector(b),
            "Permul: wrong argument types (<vector> expected)",
        )
        return Vector2(self.x * b.x, self.y * b.y)

    def len2(self) -> Number:
        """
        Returns:
            The squared magnitude of this vector.
        """
        return self.x * self.x + self.y * self.y

    def len(self) -> float:
        """
        Computes the magnitude of this vector |v|.

        Returns:
            The magnitude (scalar) of this vector.
        """
        return math.sqrt(self.x * self.x + self.y * self.y)

    __abs__ = len

    def dist(self, b: Vector2) -> float:
        """
        Computes the L^2 (Euclidean) distance between this vector and a second
        given vector.

        Args:
            b: the given second vector.

        Returns:
            The distance between the two vectors.
        """
        validate_argument_types(
            is_vector(self) and is_vector(b),
            "Dist: wrong argument types (<vector> expected)",
        )
        dx = self.x - b.x
        dy = self.y - b.y
        return math.sqrt(dx * dx + dy * dy)

    def dist2(self, b: Vector2) -> Number:
        """
        Squared Euclidean distance, see :meth:`dist`.
        """
        validate_argument_types(
            is_vector(self) and is_vector(b),
            "Dist2: wrong argument types (<vector> expected)",
        )
        dx = self.x - b.x
        dy = self.y - b.y
        return dx * dx + dy * dy

    def normalize_inplace(self) -> Vector2:
        """
        Normalizes this vector so that it becomes unit length (magnitude = 1).
        A zero-length vector is left unchanged.

        Returns:
            This vector.
        """
        length = self.len()
        if length > 0:
            self.x, self.y = self.x / length, self.y / length
        else:
            vector_logger.debug("Zero-length vector left unnormalized.")
        return self

    normalizeInPlace = normalize_inplace

    def normalized(self) -> Vector2:
        """
        Returns:
            A unit length copy of this vector, see :meth:`normalize_inplace`.
        """
        return self.clone().normalize_inplace()

    def rotate_inplace(self, phi: Number) -> Vector2:
        """
        Rotates this vector counter-clockwise (for a y-axis pointing up).

        Args:
            phi: the rotation angle, in radians.

        Returns:
            This vector.
        """
        validate_argument_types(
            is_number(phi), "Rotate: wrong argument types (<number> expected)"
        )
        c, s = math.cos(phi), math.sin(phi)
        self.x, self.y = c * self.x - s * self.y, s * self.x + c * self.y
        return self

    rotateInPlace = rotate_inplace

    def rotated(self, phi: Number) -> Vector2:
        """
        Returns:
            A rotated copy of this vector, see :meth:`rotate_inplace`.
        """
        return self.clone().rotate_inplace(phi)

    def perpendicular(self) -> Vector2:
        """
        Returns:
            This vector rotated by 90 degrees counter-clockwise, ``(-y, x)``.
        """
        return Vector2(-self.y, self.x)

    def project_on(self, v: Vector2) -> Vector2:
        """
        Projects this vector onto ``v``.

        Args:
            v: the vector to project onto. A zero vector yields ``nan``
                components.

        Returns:
            The component of this vector parallel to ``v``.
        """
        validate_argument_types(
            is_vector(v),
            f"Invalid argument: cannot project vector on {type(v).__name__}",
        )
        s = ieee_div(self.x * v.x + self.y * v.y, v.x * v.x + v.y * v.y)
        return Vector2(s * v.x, s * v.y)

    projectOn = project_on

    def mirror_on(self, v: Vector2) -> Vector2:
        """
        Mirrors this vector on the line spanned by ``v``, i.e.
        ``2 * self.project_on(v) - self``.

        Args:
            v: the mirror axis.

        Returns:
            The reflected vector.
        """
        validate_argument_types(
            is_vector(v),
            f"Invalid argument: cannot mirror vector on {type(v).__name__}",
        )
        s = ieee_div(2 * (self.x * v.x + self.y * v.y), v.x * v.x + v.y * v.y)
        return Vector2(s * v.x - self.x, s * v.y - self.y)

    mirrorOn = mirror_on

    def cross(self, v: Vector2) -> Number:
        """
        Computes the cross product between this vector and a given vector.

        Args:
            v: the given second vector with which to compute the cross product.

        Returns:
            The scalar valued cross product (cross products are scalar in R^2).
        """
        validate_argument_types(
            is_vector(v), "Cross: wrong argument types (<vector> expected)"
        )
        return self.x * v.y - self.y * v.x

    def trim_inplace(self, max_len: Number) -> Vector2:
        """
        Clamps the magnitude of this vector to ``max_len``. Vectors that are
        already short enough are left unchanged.

        A zero vector is not special-cased: the scale factor becomes ``inf``
        and the vector stays zero, unless ``max_len`` is zero as well, in which
        case the components become ``nan``.

        Args:
            max_len: the maximum magnitude.

        Returns:
            This vector.
        """
        validate_argument_types(
            is_number(max_len), "Trim: wrong argument types (<number> expected)"
        )
        len2 = self.len2()
        if len2 == 0:
            vector_logger.debug(f"Trimming zero-length vector to {max_len}.")
        s = ieee_div(max_len * max_len, len2)
        if s > 1:
            return self
        s = math.sqrt(s)
        self.x, self.y = self.x * s, self.y * s
        return self

    trimInPlace = trim_inplace

    def trimmed(self, max_len: Number) -> Vector2:
        """
        Returns:
            A copy of this vector with its magnitude clamped, see
            :meth:`trim_inplace`.
        """
        return self.clone().trim_inplace(max_len)

    def angle_to(self, other: Vector2 | None = None) -> float:
        """
        Computes the heading angle of this vector, in radians, or the angle
        between this vector and ``other``.

        Args:
            other: optional second vector.

        Returns:
            ``atan2(y, x)`` of this vector, minus the one of ``other`` if given.
            The difference is not wrapped and lies in ``[-2 pi, 2 pi]``.
        """
        if other is not None:
            validate_argument_types(
                is_vector(other), "AngleTo: wrong argument types (<vector> expected)"
            )
            return math.atan2(self.y, self.x) - math.atan2(other.y, other.x)
        return math.atan2(self.y, self.x)

    angleTo = angle_to


new = Vector2.new
isVector = is_vector

# a single shared instance; in-place operations on it are visible everywhere
zero = Vector2(0, 0)
Vector2.zero = zero
