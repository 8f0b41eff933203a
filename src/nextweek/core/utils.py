# core/utils.py
import math
import random
import threading
from typing import Optional, Union
from nextweek.core.vector import Vector3

# One generator per thread. Render tasks reseed it with seed_task() so that
# sampling never goes through a shared, lock-protected generator.
_local = threading.local()

def rng() -> random.Random:
    """
    Returns the random generator owned by the current thread.
    """
    gen = getattr(_local, "rng", None)
    if gen is None:
        gen = _local.rng = random.Random()
    return gen

def seed_task(seed: Union[int, str, None]) -> random.Random:
    """
    Reseeds the current thread's generator and returns it.
    """
    gen = rng()
    gen.seed(seed)
    return gen

def random_double(lo: float = 0.0, hi: float = 1.0) -> float:
    return lo + (hi - lo) * rng().random()

def random_in_unit_sphere() -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    uniform = rng().uniform
    while True:
        p = Vector3(uniform(-1, 1),
                    uniform(-1, 1),
                    uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p

def random_unit_vector() -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere().normalize()

def reflect(v, n):
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(v: Vector3, n: Vector3, ni_over_nt: float) -> Optional[Vector3]:
    """
    Refracts v through a surface with normal n. Returns None on total
    internal reflection.
    """
    unit_v = v.normalize()
    dt = unit_v.dot(n)
    discriminant = 1.0 - ni_over_nt * ni_over_nt * (1.0 - dt * dt)
    if discriminant <= 0.0:
        return None
    return (unit_v - n * dt) * ni_over_nt - n * math.sqrt(discriminant)

def schlick(cos_theta: float, ref_idx: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cos_theta), 5)
