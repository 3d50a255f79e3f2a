"""C-clip generator."""

import math

import cadquery as cq

from ..config import GenerationOptions
from ..models.archetypes import ClipParams
from ..models.geometry import Archetype, PartMetadata
from .booleans import BooleanOp, evaluate
from .primitives import make_ring


class ClipGenerator:
    """Generator for C-shaped spring clips: a ring with a wedge-shaped gap on +X."""

    def generate(self, params: ClipParams, options: GenerationOptions) -> cq.Workplane:
        if params.inner_diameter >= params.outer_diameter:
            raise ValueError(
                f"Clip inner diameter {params.inner_diameter} must be smaller "
                f"than outer diameter {params.outer_diameter}"
            )
        if not 0 < params.gap_angle < 180:
            raise ValueError(f"Clip gap angle must be between 0 and 180, got {params.gap_angle}")

        ring = make_ring(
            params.outer_diameter, params.inner_diameter, params.thickness
        ).translate((0, 0, params.thickness / 2))

        half = math.radians(params.gap_angle / 2)
        # Reach chosen so the wedge edge at x=reach*cos(half) clears the outer wall
        reach = params.outer_diameter / math.cos(half)
        x = reach * math.cos(half)
        y = reach * math.sin(half)
        wedge = (
            cq.Workplane("XY")
            .polyline([(0, 0), (x, y), (x, -y)])
            .close()
            .extrude(params.thickness + 2)
            .translate((0, 0, -1))
        )
        return evaluate(ring, wedge, BooleanOp.SUBTRACT)

    def get_metadata(self, params: ClipParams, options: GenerationOptions) -> PartMetadata:
        return PartMetadata(
            part_id=Archetype.CLIP.value,
            archetype=Archetype.CLIP,
            name="Clip",
            material="PETG",
            dimensions={
                "outer_diameter": params.outer_diameter,
                "inner_diameter": params.inner_diameter,
                "thickness": params.thickness,
                "gap_angle": params.gap_angle,
            },
        )
