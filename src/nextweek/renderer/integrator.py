# renderer/integrator.py
import math
from typing import Callable, Union
from nextweek.core.ray import Ray
from nextweek.core.vector import Color
from nextweek.geometry.hittable import Hittable

# Lower bound on hit distance, avoids shadow acne from self-intersection.
T_MIN = 0.001
MAX_DEPTH = 50

Background = Union[Color, Callable[[Ray], Color]]

class SkyGradient:
    """
    Background that blends from `bottom` to `top` with the ray's height.
    """
    def __init__(self, bottom: Color = Color(1.0, 1.0, 1.0), top: Color = Color(0.5, 0.7, 1.0)):
        self.bottom = bottom
        self.top = top

    def __call__(self, ray: Ray) -> Color:
        t = 0.5 * (ray.direction.normalize().y + 1.0)
        return self.bottom * (1.0 - t) + self.top * t

def background_color(background: Background, ray: Ray) -> Color:
    if isinstance(background, Color):
        return background
    return background(ray)

def ray_color(ray: Ray, background: Background, world: Hittable, depth: int = MAX_DEPTH) -> Color:
    """
    Radiance arriving along `ray`.

    Iterative form of emitted + attenuation * ray_color(scattered, depth - 1):
    the product of attenuations so far is carried in `throughput`. Bounces
    stop when the ray escapes to the background, is absorbed, or `depth`
    runs out (which contributes black).
    """
    color = Color(0.0, 0.0, 0.0)
    throughput = Color(1.0, 1.0, 1.0)
    while depth > 0:
        rec = world.hit(ray, T_MIN, math.inf)
        if rec is None:
            return color + throughput * background_color(background, ray)

        material = rec.material
        color = color + throughput * material.emitted(rec.u, rec.v, rec.p)

        scattered = material.scatter(ray, rec)
        if scattered is None:
            return color
        ray, attenuation = scattered
        throughput = throughput * attenuation
        depth -= 1
    return color
