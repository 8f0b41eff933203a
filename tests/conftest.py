"""Pytest configuration for nextweek tests.

Provides shared fixtures for all test modules. Every test starts with the
task random generator reseeded so sampled results are reproducible.
"""

import pytest

from nextweek.core import utils
from nextweek.core.vector import Color, Vector3
from nextweek.geometry.hittable import HitRecord
from nextweek.materials.lambertian import Lambertian


@pytest.fixture(autouse=True)
def seeded_rng():
    """Reseed the current thread's generator before each test."""
    return utils.seed_task(1234)


@pytest.fixture
def grey():
    """A mid-grey Lambertian material."""
    return Lambertian(Color(0.5, 0.5, 0.5))


@pytest.fixture
def make_record():
    """Build a HitRecord on the plane y=0 with an upward normal."""

    def _make(material=None, front_face=True, normal=None):
        return HitRecord(
            p=Vector3(0.0, 0.0, 0.0),
            normal=normal if normal is not None else Vector3(0.0, 1.0, 0.0),
            t=1.0,
            front_face=front_face,
            material=material,
        )

    return _make
