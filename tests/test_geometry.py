"""Unit tests for rectangles, boxes, instancing transforms and lists.

Tests cover:
- Axis-aligned rectangles in the three planes
- Boxes made of six rectangles
- Translate and RotateY instances
- HittableList closest-hit search and bounds
"""

import math

import pytest

from nextweek.core.ray import Ray
from nextweek.core.vector import Vector3
from nextweek.geometry.box import Box
from nextweek.geometry.rect import PADDING, XY, XZ, YZ, XYRect, XZRect, YZRect
from nextweek.geometry.sphere import Sphere
from nextweek.geometry.transform import RotateY, Translate
from nextweek.geometry.world import HittableList


def approx_vec(v, expected, abs_tol=1e-9):
    return all(a == pytest.approx(b, abs=abs_tol) for a, b in zip(v, expected))


class TestRect:
    """Tests for axis-aligned rectangles."""

    def test_xy_rect_hit(self, grey):
        """Test a ray hitting an XY rectangle head-on."""
        rect = XYRect(0.0, 1.0, 0.0, 1.0, -1.0, grey)
        rec = rect.hit(Ray(Vector3(0.5, 0.25, 0.0), Vector3(0.0, 0.0, -1.0)), 0.001, math.inf)
        assert rec.t == pytest.approx(1.0)
        assert rec.u == pytest.approx(0.5)
        assert rec.v == pytest.approx(0.25)
        assert rec.front_face
        assert rec.normal == Vector3(0.0, 0.0, 1.0)
        assert rec.material is grey

    def test_back_side_hit(self, grey):
        """Test the normal faces the ray when hit from behind."""
        rect = XYRect(0.0, 1.0, 0.0, 1.0, -1.0, grey)
        rec = rect.hit(Ray(Vector3(0.5, 0.5, -3.0), Vector3(0.0, 0.0, 1.0)), 0.001, math.inf)
        assert not rec.front_face
        assert rec.normal == Vector3(0.0, 0.0, -1.0)

    def test_outside_extent(self, grey):
        """Test a ray crossing the plane outside the rectangle."""
        rect = XYRect(0.0, 1.0, 0.0, 1.0, -1.0, grey)
        assert rect.hit(Ray(Vector3(2.0, 0.5, 0.0), Vector3(0.0, 0.0, -1.0)), 0.001, math.inf) is None

    def test_parallel_ray_misses(self, grey):
        """Test a ray running parallel to the plane."""
        rect = XYRect(0.0, 1.0, 0.0, 1.0, -1.0, grey)
        assert rect.hit(Ray(Vector3(0.5, 0.5, -1.0), Vector3(1.0, 0.0, 0.0)), 0.001, math.inf) is None

    @pytest.mark.parametrize("plane, normal", [
        (XY, Vector3(0.0, 0.0, 1.0)),
        (XZ, Vector3(0.0, 1.0, 0.0)),
        (YZ, Vector3(1.0, 0.0, 0.0)),
    ])
    def test_plane_normals(self, plane, normal):
        """Test each plane's normal is its constant axis."""
        assert plane.point(0.0, 0.0, 1.0) == normal

    def test_xz_and_yz_rects(self, grey):
        """Test hits on the other two orientations."""
        floor = XZRect(-1.0, 1.0, -1.0, 1.0, 0.0, grey)
        rec = floor.hit(Ray(Vector3(0.0, 2.0, 0.0), Vector3(0.0, -1.0, 0.0)), 0.001, math.inf)
        assert rec.t == pytest.approx(2.0)
        assert rec.normal == Vector3(0.0, 1.0, 0.0)

        wall = YZRect(-1.0, 1.0, -1.0, 1.0, 3.0, grey)
        rec = wall.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0)), 0.001, math.inf)
        assert rec.t == pytest.approx(3.0)
        assert rec.p == Vector3(3.0, 0.0, 0.0)

    def test_bounding_box_is_padded(self, grey):
        """Test the flat axis gets a small thickness."""
        box = XZRect(0.0, 2.0, 0.0, 3.0, 5.0, grey).bounding_box(0.0, 1.0)
        assert box.minimum == Vector3(0.0, 5.0 - PADDING, 0.0)
        assert box.maximum == Vector3(2.0, 5.0 + PADDING, 3.0)
        assert box.maximum.y > box.minimum.y


class TestBox:
    """Tests for six-sided boxes."""

    def test_hit_nearest_face(self, grey):
        """Test the first face along the ray is reported."""
        box = Box(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 1.0, 1.0), grey)
        rec = box.hit(Ray(Vector3(0.5, 0.5, 5.0), Vector3(0.0, 0.0, -1.0)), 0.001, math.inf)
        assert rec.t == pytest.approx(4.0)
        assert rec.normal == Vector3(0.0, 0.0, 1.0)

    def test_miss(self, grey):
        """Test a ray passing over the box."""
        box = Box(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 1.0, 1.0), grey)
        assert box.hit(Ray(Vector3(0.5, 2.0, 5.0), Vector3(0.0, 0.0, -1.0)), 0.001, math.inf) is None

    def test_bounding_box(self, grey):
        """Test the box bounds itself exactly."""
        bound = Box(Vector3(-1.0, 0.0, 2.0), Vector3(1.0, 3.0, 4.0), grey).bounding_box(0.0, 1.0)
        assert bound.minimum == Vector3(-1.0, 0.0, 2.0)
        assert bound.maximum == Vector3(1.0, 3.0, 4.0)


class TestTranslate:
    """Tests for translated instances."""

    def test_hit_moves_with_offset(self, grey):
        """Test the hit point is reported in world space."""
        moved = Translate(Sphere(Vector3(0.0, 0.0, 0.0), 1.0, grey), Vector3(0.0, 0.0, -5.0))
        rec = moved.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0)), 0.001, math.inf)
        assert rec.t == pytest.approx(4.0)
        assert rec.p == Vector3(0.0, 0.0, -4.0)
        assert rec.normal == Vector3(0.0, 0.0, 1.0)

    def test_bounding_box_moves(self, grey):
        """Test the box is shifted by the offset."""
        moved = Sphere(Vector3(0.0, 0.0, 0.0), 1.0, grey).translate(Vector3(1.0, 2.0, 3.0))
        box = moved.bounding_box(0.0, 1.0)
        assert box.minimum == Vector3(0.0, 1.0, 2.0)
        assert box.maximum == Vector3(2.0, 3.0, 4.0)

    def test_keeps_front_face(self, grey):
        """Test a hit from inside the child stays a back face."""
        moved = Translate(Sphere(Vector3(0.0, 0.0, 0.0), 1.0, grey), Vector3(3.0, 0.0, 0.0))
        rec = moved.hit(Ray(Vector3(3.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0)), 0.001, math.inf)
        assert not rec.front_face


class TestRotateY:
    """Tests for instances rotated about the Y axis."""

    def test_quarter_turn_box(self, grey):
        """Test a unit box turned 90 degrees occupies x in [0,1], z in [-1,0]."""
        turned = RotateY(Box(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 1.0, 1.0), grey), 90.0)
        rec = turned.hit(Ray(Vector3(0.5, 0.5, 5.0), Vector3(0.0, 0.0, -1.0)), 0.001, math.inf)
        assert rec.t == pytest.approx(5.0)
        assert approx_vec(rec.p, (0.5, 0.5, 0.0))
        assert approx_vec(rec.normal, (0.0, 0.0, 1.0))

        box = turned.bounding_box(0.0, 1.0)
        assert approx_vec(box.minimum, (0.0, 0.0, -1.0))
        assert approx_vec(box.maximum, (1.0, 1.0, 0.0))

    def test_sphere_at_origin_is_unchanged(self, grey):
        """Test rotating a centered sphere does not change its hits."""
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 1.0, grey)
        ray = Ray(Vector3(0.3, 0.2, 5.0), Vector3(0.0, 0.0, -1.0))
        direct = sphere.hit(ray, 0.001, math.inf)
        turned = sphere.rotate_y(37.0).hit(ray, 0.001, math.inf)
        assert turned.t == pytest.approx(direct.t)
        assert approx_vec(turned.p, tuple(direct.p))
        assert approx_vec(turned.normal, tuple(direct.normal))
        assert turned.front_face == direct.front_face

    def test_box_encloses_rotated_child(self, grey):
        """Test the rotated box contains every rotated corner."""
        turned = RotateY(Box(Vector3(1.0, 0.0, 1.0), Vector3(2.0, 1.0, 3.0), grey), 30.0)
        box = turned.bounding_box(0.0, 1.0)
        theta = math.radians(30.0)
        for x in (1.0, 2.0):
            for z in (1.0, 3.0):
                rx = math.cos(theta) * x + math.sin(theta) * z
                rz = -math.sin(theta) * x + math.cos(theta) * z
                assert box.minimum.x - 1e-9 <= rx <= box.maximum.x + 1e-9
                assert box.minimum.z - 1e-9 <= rz <= box.maximum.z + 1e-9

    def test_unbounded_child_logs(self, caplog):
        """Test a child without a box leaves the rotation unbounded."""
        turned = RotateY(HittableList(), 45.0)
        assert turned.bounding_box(0.0, 1.0) is None
        assert "has no bounding box" in caplog.text


class TestHittableList:
    """Tests for the linear-scan list."""

    def test_closest_hit_wins(self, grey):
        """Test the nearest object is reported regardless of insertion order."""
        far = Sphere(Vector3(0.0, 0.0, -10.0), 1.0, grey)
        near = Sphere(Vector3(0.0, 0.0, -3.0), 1.0, grey)
        world = HittableList([far, near])
        rec = world.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0)), 0.001, math.inf)
        assert rec.t == pytest.approx(2.0)

    def test_empty_list(self):
        """Test an empty list never hits and has no box."""
        world = HittableList()
        assert len(world) == 0
        assert world.hit(Ray(Vector3(), Vector3(0.0, 0.0, -1.0)), 0.001, math.inf) is None
        assert world.bounding_box(0.0, 1.0) is None

    def test_bounding_box_is_union(self, grey):
        """Test the list box spans all members."""
        world = HittableList()
        world.add(Sphere(Vector3(0.0, 0.0, 0.0), 1.0, grey))
        world.add(Sphere(Vector3(5.0, 0.0, 0.0), 1.0, grey))
        box = world.bounding_box(0.0, 1.0)
        assert box.minimum == Vector3(-1.0, -1.0, -1.0)
        assert box.maximum == Vector3(6.0, 1.0, 1.0)

    def test_clear(self, grey):
        """Test clearing removes every object."""
        world = HittableList([Sphere(Vector3(), 1.0, grey)])
        world.clear()
        assert list(world) == []
