"""Face plate generator."""

import cadquery as cq

from ..config import GenerationOptions
from ..models.archetypes import FacePlateParams
from ..models.geometry import Archetype, PartMetadata


class FacePlateGenerator:
    """Generator for flat plates with through-holes.

    Hole offsets are measured from the plate center along X (offset_a) and
    Y (offset_b).
    """

    def generate(self, params: FacePlateParams, options: GenerationOptions) -> cq.Workplane:
        plate = cq.Workplane("XY").box(
            params.length, params.width, params.thickness, centered=(True, True, False)
        )

        if not options.exact_boolean:
            return plate

        for hole in params.holes:
            plate = (
                plate.faces(">Z")
                .workplane(centerOption="CenterOfBoundBox")
                .center(hole.offset_a, hole.offset_b)
                .hole(hole.diameter)
            )
        return plate

    def get_metadata(self, params: FacePlateParams, options: GenerationOptions) -> PartMetadata:
        holes = len(params.holes) if options.exact_boolean else 0
        return PartMetadata(
            part_id=Archetype.FACE_PLATE.value,
            archetype=Archetype.FACE_PLATE,
            name="Face Plate",
            dimensions={
                "length": params.length,
                "width": params.width,
                "thickness": params.thickness,
                "hole_count": float(holes),
            },
        )
