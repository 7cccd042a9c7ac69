from __future__ import annotations

from typing import TYPE_CHECKING, Tuple, Union

if TYPE_CHECKING:
    from pyvec2.vector import Vector2

# these empty comments are because of the autodocumentation

Number = Union[int, float]
""
Float2 = Tuple[float, float]
""
Operand = Union["Vector2", Number]
"""
Operand of the polymorphic multiplication. Can be either:

    - a :class:`Vector2`, which makes the product a dot product,
    - an ``int`` or ``float`` (or a NumPy scalar), which scales the other operand.
"""
