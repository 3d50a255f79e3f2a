"""Solid cylinder generator (knobs, rods, height-only fallback)."""

import cadquery as cq

from ..config import GenerationOptions
from ..models.archetypes import CylinderParams
from ..models.geometry import Archetype, PartMetadata
from .primitives import make_cylinder


class CylinderGenerator:
    """Generator for plain solid cylinders."""

    def __init__(self, archetype: Archetype = Archetype.KNOB):
        """Initialize generator.

        Args:
            archetype: KNOB when a diameter was given, FALLBACK_CYLINDER when
                the diameter was synthesized from the height
        """
        self.archetype = archetype

    def generate(self, params: CylinderParams, options: GenerationOptions) -> cq.Workplane:
        """Generate a cylinder standing on z=0."""
        return make_cylinder(params.diameter, params.height).translate((0, 0, params.height / 2))

    def get_metadata(self, params: CylinderParams, options: GenerationOptions) -> PartMetadata:
        is_fallback = self.archetype is Archetype.FALLBACK_CYLINDER
        return PartMetadata(
            part_id=self.archetype.value,
            archetype=self.archetype,
            name="Cylinder" if is_fallback else "Knob",
            dimensions={
                "diameter": params.diameter,
                "height": params.height,
            },
            notes="Diameter derived from height" if is_fallback else None,
        )
