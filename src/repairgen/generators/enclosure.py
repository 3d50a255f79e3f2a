"""Phone case / enclosure generator."""

import cadquery as cq

from ..config import GenerationOptions
from ..models.archetypes import EnclosureParams
from ..models.geometry import Archetype, PartMetadata
from .booleans import BooleanOp, evaluate

# How far the cavity is pushed through the open front
FRONT_OVERSHOOT = 1.0


class EnclosureGenerator:
    """Generator for open-front shells around a device.

    Width runs along X, height along Y and depth along Z. The closed back
    rests on z=0 and the open front faces +Z.
    """

    def corner_radius(self, params: EnclosureParams) -> float:
        """Fillet radius actually applied to the outer vertical edges.

        A radius reaching half the smaller outer side cannot be built and
        is dropped, leaving sharp corners.
        """
        if params.corner_radius >= min(params.outer_width, params.outer_height) / 2:
            return 0.0
        return max(0.0, params.corner_radius)

    def generate(self, params: EnclosureParams, options: GenerationOptions) -> cq.Workplane:
        """Generate an enclosure.

        The outer shell is a box of inner dimensions plus walls on the
        sides and the back. With ``options.exact_boolean`` the device cavity
        is subtracted, running from the top of the back wall out through the
        front face so the front is left open.
        """
        shell = cq.Workplane("XY").box(
            params.outer_width,
            params.outer_height,
            params.outer_depth,
            centered=(True, True, False),
        )

        radius = self.corner_radius(params)
        if radius > 0:
            shell = shell.edges("|Z").fillet(radius)

        if not options.exact_boolean:
            return shell

        cavity = (
            cq.Workplane("XY")
            .box(
                params.inner_width,
                params.inner_height,
                params.inner_depth + FRONT_OVERSHOOT,
                centered=(True, True, False),
            )
            .translate((0, 0, params.back_thickness))
        )
        return evaluate(shell, cavity, BooleanOp.SUBTRACT)

    def get_metadata(self, params: EnclosureParams, options: GenerationOptions) -> PartMetadata:
        return PartMetadata(
            part_id=Archetype.ENCLOSURE.value,
            archetype=Archetype.ENCLOSURE,
            name="Phone Case",
            material="TPU",
            dimensions={
                "inner_width": params.inner_width,
                "inner_height": params.inner_height,
                "inner_depth": params.inner_depth,
                "outer_width": params.outer_width,
                "outer_height": params.outer_height,
                "outer_depth": params.outer_depth,
                "wall_thickness": params.wall_thickness,
                "back_thickness": params.back_thickness,
                "corner_radius": self.corner_radius(params),
                "hollow": float(options.exact_boolean),
            },
            notes=None if options.exact_boolean else "Preview only: device cavity not cut",
        )
