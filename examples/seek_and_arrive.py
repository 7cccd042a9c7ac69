import logging
import math

import matplotlib.pyplot as plt

from pyvec2 import Vector2, set_up_simple_logging

MAX_SPEED = 4.0
MAX_FORCE = 0.3
SLOWING_RADIUS = 20.0
STEPS = 300


# Classic "arrive" steering: head for the target, slow down inside a radius.
def steer(pos, vel, target):
    desired = target - pos
    distance = desired.len()
    speed = MAX_SPEED
    if distance < SLOWING_RADIUS:
        speed = MAX_SPEED * distance / SLOWING_RADIUS
    desired = desired.normalized() * speed
    return (desired - vel).trim_inplace(MAX_FORCE)


def main():
    set_up_simple_logging(level=logging.INFO)
    target = Vector2(100, 60)
    pos = Vector2(0, 0)
    vel = Vector2(0, 3).rotated(math.radians(-30))

    xs, ys = [], []
    for _ in range(STEPS):
        vel = (vel + steer(pos, vel, target)).trim_inplace(MAX_SPEED)
        pos = pos + vel
        xs.append(pos.x)
        ys.append(pos.y)

    logging.getLogger("pyvec2.examples").info(
        f"Final position {pos}, {pos.dist(target):.3f} away from {target}."
    )

    fig, ax = plt.subplots()
    ax.plot(xs, ys, label="path")
    ax.scatter([target.x], [target.y], color="red", label="target")
    ax.set(xlabel="x", ylabel="y", title="Seek and arrive")
    ax.set_aspect("equal", adjustable="box")
    ax.legend()
    plt.show()


if __name__ == "__main__":
    main()
