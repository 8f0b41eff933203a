# camera/camera.py
import math
from nextweek.core.vector import Vector3
from nextweek.core.ray import Ray
from nextweek.core.utils import rng

class Camera:
    """
    Thin-lens camera looking from `lookfrom` towards `lookat`.

    vfov is the vertical field of view in degrees. Rays start on a lens disk
    of diameter `aperture` and are focused on the plane `focus_dist` away.
    Each ray carries a random time in [time0, time1] (the shutter interval).
    """
    def __init__(self, lookfrom: Vector3, lookat: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 10.0, time0: float = 0.0, time1: float = 0.0):
        self.lookfrom = lookfrom
        self.lookat = lookat
        self.vup = vup
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.time0 = time0
        self.time1 = time1
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        theta = math.radians(self.vfov)
        viewport_height = 2.0 * math.tan(theta / 2)
        viewport_width = self.aspect_ratio * viewport_height

        # Orthonormal basis: w points backwards, u right, v up
        self.w = (self.lookfrom - self.lookat).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        self.origin = self.lookfrom
        # Scale by focus distance
        self.horizontal = self.u * (viewport_width * self.focus_dist)
        self.vertical = self.v * (viewport_height * self.focus_dist)
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * self.focus_dist)
        self.lens_radius = self.aperture / 2.0

    def get_ray(self, s: float, t: float) -> Ray:
        """Generates a ray through viewport coordinates (s, t) in [0, 1]."""
        gen = rng()
        if self.lens_radius > 0:
            rd = random_in_unit_disk() * self.lens_radius
            offset = self.u * rd.x + self.v * rd.y
        else:
            offset = Vector3(0.0, 0.0, 0.0)

        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        time = self.time0 + (self.time1 - self.time0) * gen.random()
        return Ray(ray_origin, ray_direction, time)

def random_in_unit_disk() -> Vector3:
    """Generate random point in unit disk for DOF."""
    uniform = rng().uniform
    while True:
        p = Vector3(
            uniform(-1, 1),
            uniform(-1, 1),
            0.0
        )
        if p.dot(p) < 1:
            return p
