"""Washer generator."""

import cadquery as cq

from ..config import GenerationOptions
from ..models.archetypes import WasherParams
from ..models.geometry import Archetype, PartMetadata
from .primitives import make_ring


class WasherGenerator:
    """Generator for flat washers."""

    def generate(self, params: WasherParams, options: GenerationOptions) -> cq.Workplane:
        """Generate a washer lying flat on z=0.

        The bore is part of the sketch profile, so it is present in both
        exact and approximate modes.
        """
        if params.inner_diameter >= params.outer_diameter:
            raise ValueError(
                f"Washer inner diameter {params.inner_diameter} must be smaller "
                f"than outer diameter {params.outer_diameter}"
            )
        return make_ring(
            params.outer_diameter, params.inner_diameter, params.thickness
        ).translate((0, 0, params.thickness / 2))

    def get_metadata(self, params: WasherParams, options: GenerationOptions) -> PartMetadata:
        return PartMetadata(
            part_id=Archetype.WASHER.value,
            archetype=Archetype.WASHER,
            name="Washer",
            dimensions={
                "outer_diameter": params.outer_diameter,
                "inner_diameter": params.inner_diameter,
                "thickness": params.thickness,
            },
        )
