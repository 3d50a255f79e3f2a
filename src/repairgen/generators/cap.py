"""Cap / lid generator."""

import cadquery as cq

from ..config import GenerationOptions
from ..models.archetypes import CapParams
from ..models.geometry import Archetype, PartMetadata
from .booleans import BooleanOp, evaluate
from .primitives import make_cylinder


class CapGenerator:
    """Generator for caps: a cylindrical wall closed by a solid top disc.

    The open end faces -Z and rests on z=0; the top disc sits above the wall.
    """

    def generate(self, params: CapParams, options: GenerationOptions) -> cq.Workplane:
        """Generate a cap.

        With ``options.exact_boolean`` the inner cavity is cut out of the
        wall. Without it the wall stays solid, which is enough for a quick
        preview of the outer envelope. A cavity as wide as the cap removes
        the whole wall and leaves only the top disc.
        """
        height = params.height
        top = params.top_thickness

        wall = make_cylinder(params.outer_diameter, height).translate((0, 0, height / 2))
        disc = make_cylinder(params.outer_diameter, top).translate((0, 0, height + top / 2))

        if not options.exact_boolean:
            return evaluate(wall, disc, BooleanOp.ADD)

        if params.inner_diameter >= params.outer_diameter:
            return disc

        cap = evaluate(wall, disc, BooleanOp.ADD)

        # Cavity overshoots the open end so no skin is left at z=0
        cavity = make_cylinder(params.inner_diameter, height + 1).translate(
            (0, 0, (height - 1) / 2)
        )
        return evaluate(cap, cavity, BooleanOp.SUBTRACT)

    def get_metadata(self, params: CapParams, options: GenerationOptions) -> PartMetadata:
        return PartMetadata(
            part_id=Archetype.CAP.value,
            archetype=Archetype.CAP,
            name="Cap",
            dimensions={
                "outer_diameter": params.outer_diameter,
                "inner_diameter": params.inner_diameter,
                "height": params.height,
                "top_thickness": params.top_thickness,
                "wall_thickness": params.wall_thickness,
                "total_height": params.height + params.top_thickness,
                "hollow": float(options.exact_boolean),
            },
            notes=None if options.exact_boolean else "Preview only: inner cavity not cut",
        )
