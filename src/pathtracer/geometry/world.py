# geometry/world.py
from typing import Iterator, List, Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.errors import MissingMaterialError
from pathtracer.geometry.hittable import Hittable, HitRecord

class SceneHit:
    """
    A geometric hit plus the material of the entity that was struck.
    """
    def __init__(self, record: HitRecord, material):
        self.record = record
        self.material = material

    @property
    def t(self) -> float:
        return self.record.t

    def __repr__(self) -> str:
        return f"SceneHit({self.record!r}, material={self.material!r})"

class Entity:
    """
    A piece of geometry owned by the world, paired with a material that may
    be shared with any number of other entities.
    """
    def __init__(self, geometry: Hittable, material):
        self.geometry = geometry
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[SceneHit]:
        rec = self.geometry.hit(ray, t_min, t_max)
        if rec is None:
            return None
        if self.material is None:
            raise MissingMaterialError(f"{self.geometry!r} was hit but has no material")
        return SceneHit(rec, self.material)

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.geometry.bounding_box(time0, time1)

class World:
    """
    An ordered list of entities searched linearly for the closest hit.
    """
    def __init__(self):
        self.objects: List[Entity] = []

    def add(self, geometry: Hittable, material) -> Entity:
        entity = Entity(geometry, material)
        self.objects.append(entity)
        return entity

    def add_entity(self, entity: Entity):
        self.objects.append(entity)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[SceneHit]:
        # Only strictly closer hits replace the record, so on equal t the
        # entity added first wins.
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        """
        Box around every entity over [time0, time1]; None for an empty world
        or if any entity is unbounded.
        """
        box = None
        for obj in self.objects:
            obj_box = obj.bounding_box(time0, time1)
            if obj_box is None:
                return None
            box = obj_box if box is None else AABB.surrounding_box(box, obj_box)
        return box
