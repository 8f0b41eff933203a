# materials/perlin.py
import math
from typing import List, Optional
import numpy as np
from nextweek.core.vector import Vector3
from nextweek.core import utils

class Perlin:
    """
    Gradient (Perlin) noise over 3D points.

    Tables are generated once with numpy and stored as plain lists, which
    are faster than numpy arrays for the scalar lookups done per sample.
    """
    POINT_COUNT = 256

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = utils.rng().getrandbits(64)
        gen = np.random.default_rng(seed)

        vectors = gen.uniform(-1.0, 1.0, size=(self.POINT_COUNT, 3))
        vectors /= np.linalg.norm(vectors, axis=1, keepdims=True)
        self.ranvec: List[Vector3] = [Vector3(*row) for row in vectors.tolist()]

        self.perm_x: List[int] = gen.permutation(self.POINT_COUNT).tolist()
        self.perm_y: List[int] = gen.permutation(self.POINT_COUNT).tolist()
        self.perm_z: List[int] = gen.permutation(self.POINT_COUNT).tolist()

    def noise(self, p: Vector3) -> float:
        fx = math.floor(p.x)
        fy = math.floor(p.y)
        fz = math.floor(p.z)
        u = p.x - fx
        v = p.y - fy
        w = p.z - fz
        i = int(fx)
        j = int(fy)
        k = int(fz)

        # Hermite cubic smoothing
        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)

        accum = 0.0
        for di in (0, 1):
            px = self.perm_x[(i + di) & 255]
            wi = uu if di else 1 - uu
            for dj in (0, 1):
                py = self.perm_y[(j + dj) & 255]
                wj = vv if dj else 1 - vv
                for dk in (0, 1):
                    c = self.ranvec[px ^ py ^ self.perm_z[(k + dk) & 255]]
                    wk = ww if dk else 1 - ww
                    weight = Vector3(u - di, v - dj, w - dk)
                    accum += wi * wj * wk * c.dot(weight)
        return accum

    def turbulence(self, p: Vector3, depth: int = 7) -> float:
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2.0
        return abs(accum)
