"""U-clamp generator."""

import cadquery as cq

from ..config import GenerationOptions
from ..models.archetypes import UClampParams
from ..models.geometry import Archetype, PartMetadata
from .primitives import extrude_profile


class UClampGenerator:
    """Generator for U-shaped clamps.

    The U profile lies in XZ with its base on z=0 and the opening facing +Z;
    depth is the extrusion along Y.
    """

    def generate(self, params: UClampParams, options: GenerationOptions) -> cq.Workplane:
        w = params.width / 2
        h = params.height
        t = params.thickness
        if 2 * t >= params.width or t >= h:
            raise ValueError(
                f"U-clamp thickness {t} leaves no opening in a {params.width}x{h} profile"
            )

        profile = [
            (-w, 0), (w, 0), (w, h), (w - t, h),
            (w - t, t), (-w + t, t), (-w + t, h), (-w, h),
        ]
        return extrude_profile(profile, params.depth, plane="XZ")

    def get_metadata(self, params: UClampParams, options: GenerationOptions) -> PartMetadata:
        return PartMetadata(
            part_id=Archetype.U_CLAMP.value,
            archetype=Archetype.U_CLAMP,
            name="U-Clamp",
            dimensions={
                "width": params.width,
                "height": params.height,
                "depth": params.depth,
                "thickness": params.thickness,
                "opening": params.width - 2 * params.thickness,
            },
        )
