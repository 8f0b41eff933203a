"""Unit tests for the bounding volume hierarchy.

The BVH must be a pure acceleration structure: for every ray and every
[t_min, t_max] window it reports the same hit distance as a linear scan
over the same primitives.
"""

import logging
import math
import random

import pytest

from nextweek.core.ray import Ray
from nextweek.core.vector import Vector3
from nextweek.geometry.box import Box
from nextweek.geometry.bvh import BVHNode
from nextweek.geometry.hittable import Hittable
from nextweek.geometry.rect import XYRect
from nextweek.geometry.sphere import MovingSphere, Sphere
from nextweek.geometry.world import HittableList


class Unbounded(Hittable):
    """A hittable that never reports a bounding box."""

    def hit(self, ray, t_min, t_max):
        return None

    def bounding_box(self, time0, time1):
        return None


def random_world(gen, grey, count=60):
    world = HittableList()
    for _ in range(count):
        center = Vector3(gen.uniform(-10, 10), gen.uniform(-10, 10), gen.uniform(-10, 10))
        kind = gen.random()
        if kind < 0.5:
            world.add(Sphere(center, gen.uniform(0.2, 1.5), grey))
        elif kind < 0.7:
            world.add(MovingSphere(center, center + Vector3(0.0, gen.uniform(0.0, 2.0), 0.0),
                                   0.0, 1.0, gen.uniform(0.2, 1.0), grey))
        elif kind < 0.85:
            world.add(Box(center, center + Vector3(1.0, 2.0, 0.5), grey))
        else:
            world.add(XYRect(center.x, center.x + 2.0, center.y, center.y + 1.0, center.z, grey))
    return world


class TestBVHEquivalence:
    """Tests that the tree and the list agree."""

    @pytest.mark.parametrize("world_seed", [1, 2, 3])
    def test_same_hits_as_list(self, grey, world_seed):
        """Test identical t for random rays and random intervals."""
        gen = random.Random(world_seed)
        world = random_world(gen, grey)
        tree = world.build_bvh(0.0, 1.0, rng=random.Random(world_seed + 100))
        assert isinstance(tree, BVHNode)

        for _ in range(300):
            origin = Vector3(gen.uniform(-15, 15), gen.uniform(-15, 15), gen.uniform(-15, 15))
            direction = Vector3(gen.uniform(-1, 1), gen.uniform(-1, 1), gen.uniform(-1, 1))
            ray = Ray(origin, direction, gen.random())
            t_min = gen.choice([0.001, gen.uniform(0.0, 5.0)])
            t_max = gen.choice([math.inf, t_min + gen.uniform(0.0, 20.0)])

            expected = world.hit(ray, t_min, t_max)
            actual = tree.hit(ray, t_min, t_max)
            assert (expected is None) == (actual is None)
            if expected is not None:
                assert actual.t == pytest.approx(expected.t)

    def test_single_object(self, grey):
        """Test a one-object tree holds the object on both sides."""
        sphere = Sphere(Vector3(0.0, 0.0, -2.0), 0.5, grey)
        node = BVHNode([sphere], 0, 1)
        assert node.left is sphere
        assert node.right is sphere
        rec = node.hit(Ray(Vector3(), Vector3(0.0, 0.0, -1.0)), 0.001, math.inf)
        assert rec.t == pytest.approx(1.5)

    def test_box_encloses_children(self, grey):
        """Test the root box contains every primitive's box."""
        world = random_world(random.Random(9), grey, count=25)
        tree = world.build_bvh(0.0, 1.0)
        root = tree.bounding_box(0.0, 1.0)
        for obj in world:
            assert root.contains(obj.bounding_box(0.0, 1.0))


class TestBVHConstruction:
    """Tests for building the tree."""

    def test_source_list_not_reordered(self, grey):
        """Test building a tree leaves the list order alone."""
        world = random_world(random.Random(4), grey, count=20)
        before = list(world)
        world.build_bvh(0.0, 1.0)
        assert list(world) == before

    def test_empty_list_builds_nothing(self):
        """Test an empty list is returned as-is and never hits."""
        world = HittableList()
        assert world.build_bvh(0.0, 1.0) is world
        assert world.hit(Ray(Vector3(), Vector3(0.0, 0.0, -1.0)), 0.001, math.inf) is None

    def test_empty_range_rejected(self):
        """Test a node cannot be built over no objects."""
        with pytest.raises(ValueError):
            BVHNode([], 0, 0)

    def test_missing_bounding_box_warns(self, grey, caplog):
        """Test an unbounded primitive is logged and does not break the build."""
        sphere = Sphere(Vector3(0.0, 0.0, -2.0), 0.5, grey)
        with caplog.at_level(logging.WARNING, logger="nextweek.geometry.bvh"):
            tree = HittableList([Unbounded(), sphere, Unbounded()]).build_bvh(0.0, 1.0)
        assert "No bounding box" in caplog.text
        assert tree.bounding_box(0.0, 1.0) is not None

    def test_seeded_build_is_reproducible(self, grey):
        """Test the same generator gives the same split axes."""
        world = random_world(random.Random(5), grey, count=30)
        a = world.build_bvh(0.0, 1.0, rng=random.Random(0))
        b = world.build_bvh(0.0, 1.0, rng=random.Random(0))
        assert a.box.minimum == b.box.minimum
        assert a.box.maximum == b.box.maximum
        assert a.left.box.minimum == b.left.box.minimum
