# scenes.py
"""
Built-in scenes from "Ray Tracing: The Next Week".

Each builder returns a Scene: the list of objects plus the camera and
background settings it was designed for.
"""
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional
from nextweek.camera.camera import Camera
from nextweek.core.vector import Color, Vector3
from nextweek.core.utils import rng
from nextweek.geometry.box import Box
from nextweek.geometry.medium import ConstantMedium
from nextweek.geometry.rect import XYRect, XZRect, YZRect
from nextweek.geometry.sphere import MovingSphere, Sphere
from nextweek.geometry.world import HittableList
from nextweek.materials.dielectric import Dielectric
from nextweek.materials.diffuse_light import DiffuseLight
from nextweek.materials.lambertian import Lambertian
from nextweek.materials.metal import Metal
from nextweek.materials.textures import CheckerTexture, ImageTexture, NoiseTexture
from nextweek.renderer.integrator import Background

EARTH_TEXTURE = "assets/earth.png"
SKY = Color(0.7, 0.8, 1.0)
BLACK = Color(0.0, 0.0, 0.0)

@dataclass
class Scene:
    world: HittableList
    background: Background = SKY
    lookfrom: Vector3 = field(default_factory=lambda: Vector3(13.0, 2.0, 3.0))
    lookat: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, 0.0))
    vfov: float = 20.0
    aperture: float = 0.0
    # Overrides of the command line defaults
    width: Optional[int] = None
    aspect_ratio: Optional[float] = None
    samples: Optional[int] = None

    def camera(self, aspect_ratio: float) -> Camera:
        return Camera(self.lookfrom, self.lookat, Vector3(0.0, 1.0, 0.0),
                      self.vfov, aspect_ratio, self.aperture,
                      focus_dist=10.0, time0=0.0, time1=1.0)

def random_scene() -> Scene:
    """The book cover: many small random spheres around three big ones."""
    gen = rng()
    world = HittableList()
    checker = CheckerTexture(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9))
    world.add(Sphere(Vector3(0.0, -1000.0, 0.0), 1000.0, Lambertian(checker)))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = gen.random()
            center = Vector3(a + 0.9 * gen.random(), 0.2, b + 0.9 * gen.random())
            if (center - Vector3(4.0, 0.2, 0.0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                # diffuse, bouncing during the shutter interval
                albedo = Color(gen.random() * gen.random(),
                               gen.random() * gen.random(),
                               gen.random() * gen.random())
                center1 = center + Vector3(0.0, gen.uniform(0.0, 0.5), 0.0)
                world.add(MovingSphere(center, center1, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                # metal
                albedo = Color(gen.uniform(0.5, 1.0), gen.uniform(0.5, 1.0), gen.uniform(0.5, 1.0))
                world.add(Sphere(center, 0.2, Metal(albedo, gen.uniform(0.0, 0.5))))
            else:
                # glass
                world.add(Sphere(center, 0.2, Dielectric(1.5)))

    world.add(Sphere(Vector3(0.0, 1.0, 0.0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vector3(-4.0, 1.0, 0.0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4.0, 1.0, 0.0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))
    return Scene(world, aperture=0.1)

def two_spheres() -> Scene:
    world = HittableList()
    checker = CheckerTexture(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9))
    material = Lambertian(checker)
    world.add(Sphere(Vector3(0.0, -10.0, 0.0), 10.0, material))
    world.add(Sphere(Vector3(0.0, 10.0, 0.0), 10.0, material))
    return Scene(world)

def _perlin_spheres() -> HittableList:
    world = HittableList()
    material = Lambertian(NoiseTexture(4.0))
    world.add(Sphere(Vector3(0.0, -1000.0, 0.0), 1000.0, material))
    world.add(Sphere(Vector3(0.0, 2.0, 0.0), 2.0, material))
    return world

def two_perlin_spheres() -> Scene:
    return Scene(_perlin_spheres())

def earth() -> Scene:
    world = HittableList()
    world.add(Sphere(Vector3(0.0, 0.0, 0.0), 2.0, Lambertian(ImageTexture(EARTH_TEXTURE))))
    return Scene(world)

def simple_light() -> Scene:
    world = _perlin_spheres()
    world.add(XYRect(3.0, 5.0, 1.0, 3.0, -2.0, DiffuseLight(Color(4.0, 4.0, 4.0))))
    return Scene(world, background=BLACK,
                 lookfrom=Vector3(26.0, 3.0, 6.0), lookat=Vector3(0.0, 2.0, 0.0),
                 samples=400)

def _cornell_walls(light_intensity: float, light_extent) -> HittableList:
    world = HittableList()
    red = Lambertian(Color(0.65, 0.05, 0.05))
    white = Lambertian(Color(0.73, 0.73, 0.73))
    green = Lambertian(Color(0.12, 0.45, 0.15))
    light = DiffuseLight(Color.repeat(light_intensity))

    world.add(YZRect(0.0, 555.0, 0.0, 555.0, 555.0, green))
    world.add(YZRect(0.0, 555.0, 0.0, 555.0, 0.0, red))
    world.add(XZRect(*light_extent, 554.0, light))
    world.add(XZRect(0.0, 555.0, 0.0, 555.0, 555.0, white))
    world.add(XZRect(0.0, 555.0, 0.0, 555.0, 0.0, white))
    world.add(XYRect(0.0, 555.0, 0.0, 555.0, 555.0, white))
    return world

def _cornell_scene(world: HittableList) -> Scene:
    return Scene(world, background=BLACK,
                 lookfrom=Vector3(278.0, 278.0, -800.0), lookat=Vector3(278.0, 278.0, 0.0),
                 vfov=40.0, width=600, aspect_ratio=1.0, samples=200)

def _cornell_blocks():
    white = Lambertian(Color(0.73, 0.73, 0.73))
    tall = Box(Vector3(0.0, 0.0, 0.0), Vector3(165.0, 330.0, 165.0), white)
    tall = tall.rotate_y(15.0).translate(Vector3(265.0, 0.0, 295.0))
    short = Box(Vector3(0.0, 0.0, 0.0), Vector3(165.0, 165.0, 165.0), white)
    short = short.rotate_y(-18.0).translate(Vector3(130.0, 0.0, 65.0))
    return tall, short

def empty_cornell_box() -> Scene:
    return _cornell_scene(_cornell_walls(15.0, (213.0, 343.0, 227.0, 332.0)))

def cornell_box() -> Scene:
    world = _cornell_walls(15.0, (213.0, 343.0, 227.0, 332.0))
    for block in _cornell_blocks():
        world.add(block)
    return _cornell_scene(world)

def smoke_cornell_box() -> Scene:
    world = _cornell_walls(7.0, (113.0, 443.0, 127.0, 432.0))
    tall, short = _cornell_blocks()
    world.add(ConstantMedium(tall, 0.01, Color(0.0, 0.0, 0.0)))
    world.add(ConstantMedium(short, 0.01, Color(1.0, 1.0, 1.0)))
    return _cornell_scene(world)

def final_scene() -> Scene:
    """Everything from the book in one image."""
    gen = rng()
    boxes = HittableList()
    ground = Lambertian(Color(0.48, 0.83, 0.53))
    boxes_per_side = 20
    for i in range(boxes_per_side):
        for j in range(boxes_per_side):
            w = 100.0
            x0 = -1000.0 + i * w
            z0 = -1000.0 + j * w
            y1 = gen.uniform(1.0, 101.0)
            boxes.add(Box(Vector3(x0, 0.0, z0), Vector3(x0 + w, y1, z0 + w), ground))

    world = HittableList()
    world.add(boxes.build_bvh(0.0, 1.0))

    world.add(XZRect(123.0, 423.0, 147.0, 412.0, 554.0, DiffuseLight(Color(7.0, 7.0, 7.0))))

    center0 = Vector3(400.0, 400.0, 200.0)
    center1 = center0 + Vector3(30.0, 0.0, 0.0)
    world.add(MovingSphere(center0, center1, 0.0, 1.0, 50.0, Lambertian(Color(0.7, 0.3, 0.1))))

    world.add(Sphere(Vector3(260.0, 150.0, 45.0), 50.0, Dielectric(1.5)))
    world.add(Sphere(Vector3(0.0, 150.0, 145.0), 50.0, Metal(Color(0.8, 0.8, 0.9), 1.0)))

    boundary = Sphere(Vector3(360.0, 150.0, 145.0), 70.0, Dielectric(1.5))
    world.add(boundary)
    world.add(ConstantMedium(boundary, 0.2, Color(0.2, 0.4, 0.9)))
    mist = Sphere(Vector3(0.0, 0.0, 0.0), 5000.0, Dielectric(1.5))
    world.add(ConstantMedium(mist, 0.0001, Color(1.0, 1.0, 1.0)))

    world.add(Sphere(Vector3(400.0, 200.0, 400.0), 100.0, Lambertian(ImageTexture(EARTH_TEXTURE))))
    world.add(Sphere(Vector3(220.0, 280.0, 300.0), 80.0, Lambertian(NoiseTexture(0.1))))

    cluster = HittableList()
    white = Lambertian(Color(0.73, 0.73, 0.73))
    for _ in range(1000):
        center = Vector3(gen.uniform(0.0, 165.0), gen.uniform(0.0, 165.0), gen.uniform(0.0, 165.0))
        cluster.add(Sphere(center, 10.0, white))
    world.add(cluster.build_bvh(0.0, 1.0).rotate_y(15.0).translate(Vector3(-100.0, 270.0, 395.0)))

    return Scene(world, background=BLACK,
                 lookfrom=Vector3(478.0, 278.0, -600.0), lookat=Vector3(278.0, 278.0, 0.0),
                 vfov=40.0, width=800, aspect_ratio=1.0, samples=10000)

SCENES: Dict[int, Callable[[], Scene]] = {
    1: random_scene,
    2: two_spheres,
    3: two_perlin_spheres,
    4: earth,
    5: simple_light,
    6: empty_cornell_box,
    7: cornell_box,
    8: smoke_cornell_box,
    9: final_scene,
}

def get_scene(scene_id: int) -> Scene:
    """Build the scene registered under `scene_id`. Raises KeyError if unknown."""
    return SCENES[scene_id]()
