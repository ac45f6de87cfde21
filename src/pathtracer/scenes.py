# scenes.py
import logging
from random import Random

from pathtracer.camera.camera import Camera
from pathtracer.core.color import Color
from pathtracer.core.vector import Vector3
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import World
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal

logger = logging.getLogger(__name__)

LARGE_RADIUS = 1.0
SMALL_RADIUS = 0.2
# Vertical travel of the small spheres over the [0, 1] motion window
SMALL_SPHERE_RISE = Vector3(0.0, 9.8, 0.0)


def feature_spheres(world: World):
    """
    Ground plus the three large spheres (glass, diffuse, metal). Returns their
    centers so callers can keep other objects clear of them.
    """
    world.add(Sphere(Vector3(0.0, -1000.0, 0.0), 1000.0), Lambertian(Color(0.5, 0.5, 0.5)))

    glass = Vector3(0.0, LARGE_RADIUS, 0.0)
    world.add(Sphere(glass, LARGE_RADIUS), Dielectric(1.5))

    diffuse = Vector3(-4.0, LARGE_RADIUS, 0.0)
    world.add(Sphere(diffuse, LARGE_RADIUS), Lambertian(Color(0.4, 0.2, 0.1)))

    metal = Vector3(4.0, LARGE_RADIUS, 0.0)
    world.add(Sphere(metal, LARGE_RADIUS), Metal(Color(0.7, 0.6, 0.5), 0.0))

    return [glass, diffuse, metal]


def simple_scene() -> World:
    world = World()
    feature_spheres(world)
    return world


def random_scene(rng: Random) -> World:
    """
    The cover scene: a ground sphere, three large feature spheres and a
    22x22 grid of small randomly placed spheres rising over the shutter.

    Small spheres whose footprint comes within LARGE_RADIUS + SMALL_RADIUS
    of a feature sphere's footprint (distance measured in the xz plane) are
    skipped.
    """
    world = World()
    features = feature_spheres(world)
    features_xz = [Vector3(p.x, 0.0, p.z) for p in features]

    min_distance = LARGE_RADIUS + SMALL_RADIUS
    min_distance_squared = min_distance * min_distance

    rejected = 0
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center0 = Vector3(a + rng.uniform(0.0, 0.9),
                              SMALL_RADIUS + rng.uniform(0.0, 0.5),
                              b + rng.uniform(0.0, 0.9))
            center0_xz = Vector3(center0.x, 0.0, center0.z)

            if any((p - center0_xz).length_squared() < min_distance_squared for p in features_xz):
                rejected += 1
                continue

            center1 = center0 + SMALL_SPHERE_RISE
            if choose_mat < 0.8:
                # diffuse
                albedo = Color.random_unit(rng) * Color.random_unit(rng)
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                # metal
                albedo = Color.random_range(rng, 0.5, 1.0)
                fuzz = rng.uniform(0.0, 0.5)
                material = Metal(albedo, fuzz)
            else:
                # glass
                material = Dielectric(1.5)

            world.add(Sphere(center0, SMALL_RADIUS, center1, 0.0, 1.0), material)

    logger.debug("Random scene: %d objects, %d placements rejected", len(world), rejected)
    return world


def default_camera(aspect_ratio: float) -> Camera:
    """
    Camera for the cover scene: 20 degree field of view, small aperture
    focused at 10 units, shutter open for 1/60.
    """
    return Camera(
        look_from=Vector3(13.0, 2.0, 3.0),
        look_at=Vector3(0.0, 0.0, 0.0),
        vup=Vector3(0.0, 1.0, 0.0),
        vfov=20.0,
        aspect_ratio=aspect_ratio,
        aperture=0.1,
        focus_dist=10.0,
        time0=0.0,
        time1=1.0 / 60.0,
    )


SCENES = {
    "random": random_scene,
    "simple": lambda rng: simple_scene(),
}
