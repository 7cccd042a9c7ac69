import os

from pyvec2.logging import (Vec2ArgumentError, Vec2Error, config_logging,
                            remove_handlers, set_up_simple_logging)
from pyvec2.vector import Vector2, is_vector, isVector, new, zero


def read(fil):
    fil = os.path.join(os.path.dirname(__file__), fil)
    with open(fil, encoding="utf-8") as f:
        return f.read()


__version__ = read("version.txt")
