"""Sphere generator."""

import cadquery as cq

from ..config import GenerationOptions
from ..models.archetypes import SphereParams
from ..models.geometry import Archetype, PartMetadata
from .primitives import make_sphere


class SphereGenerator:
    """Generator for spheres (diameter-only parameter sets)."""

    def generate(self, params: SphereParams, options: GenerationOptions) -> cq.Workplane:
        return make_sphere(params.diameter).translate((0, 0, params.diameter / 2))

    def get_metadata(self, params: SphereParams, options: GenerationOptions) -> PartMetadata:
        return PartMetadata(
            part_id=Archetype.SPHERE.value,
            archetype=Archetype.SPHERE,
            name="Sphere",
            dimensions={"diameter": params.diameter},
        )
