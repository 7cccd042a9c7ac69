from __future__ import annotations

from numbers import Real
from typing import Any

from pyvec2.logging import Vec2ArgumentError


def is_number(value: Any) -> bool:
    """
    Checks whether ``value`` is a real number. Booleans are not numbers here,
    NumPy scalars are.
    """
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_argument_types(valid: bool, message: str) -> None:
    if not valid:
        raise Vec2ArgumentError(message)


def validate_component(value: Any, name: str) -> None:
    if not is_number(value):
        raise Vec2ArgumentError(
            f"Vector component '{name}' must be a <number>, got {type(value).__name__}"
        )
