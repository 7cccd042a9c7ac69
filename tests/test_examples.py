from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest

from pyvec2 import Vector2

EXAMPLES = Path(__file__).resolve().parent.parent / "examples"


@pytest.fixture
def seek_and_arrive(monkeypatch):
    spec = importlib.util.spec_from_file_location(
        "seek_and_arrive", EXAMPLES / "seek_and_arrive.py"
    )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    monkeypatch.setattr(module, "set_up_simple_logging", lambda **kwargs: None)
    monkeypatch.setattr(module.plt, "show", lambda: None)
    return module


def test_steering_force_is_trimmed(seek_and_arrive):
    force = seek_and_arrive.steer(Vector2(0, 0), Vector2(0, 0), Vector2(100, 0))
    assert force.len() == pytest.approx(seek_and_arrive.MAX_FORCE)
    assert force.angle_to() == pytest.approx(0)


def test_steering_at_target_is_zero(seek_and_arrive):
    target = Vector2(5, 5)
    force = seek_and_arrive.steer(target.clone(), Vector2(0, 0), target)
    assert force == Vector2(0, 0)


def test_example_runs(seek_and_arrive):
    seek_and_arrive.main()
