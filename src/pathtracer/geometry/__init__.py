from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import Entity, SceneHit, World

__all__ = ["Hittable", "HitRecord", "Sphere", "Entity", "SceneHit", "World"]
