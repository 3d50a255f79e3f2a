"""L-bracket generator."""

import math

import cadquery as cq

from ..config import GenerationOptions
from ..models.archetypes import BracketParams
from ..models.geometry import Archetype, PartMetadata
from .booleans import BooleanOp, evaluate
from .primitives import extrude_profile, make_cylinder


class BracketGenerator:
    """Generator for L-profile brackets.

    The inner corner runs along X. Leg 1 lies on z=0 extending along +Y,
    leg 2 stands at y=0 extending along +Z. The bracket is centered on X.
    """

    def _fits_fillet(self, params: BracketParams) -> bool:
        r = params.fillet
        t = params.thickness
        return r > 0 and r <= min(params.leg_length_1, params.leg_length_2) - t

    def hole_positions(self, params: BracketParams) -> list[tuple[int, float]]:
        """Legs that get a mounting hole at their midpoint.

        A hole is only placed where it clears the corner and its fillet.

        Returns:
            (leg number, midpoint distance from the outer corner) pairs
        """
        corner = params.thickness + (params.fillet if self._fits_fillet(params) else 0.0)
        positions = []
        for leg, length in ((1, params.leg_length_1), (2, params.leg_length_2)):
            midpoint = length / 2
            if midpoint - params.hole_diameter / 2 >= corner:
                positions.append((leg, midpoint))
        return positions

    def _fillet_solid(self, params: BracketParams) -> cq.Workplane:
        t = params.thickness
        r = params.fillet
        # Concave quarter: square in the inner corner minus a circle of radius r
        mid = t + r - r / math.sqrt(2)
        return (
            cq.Workplane("YZ")
            .moveTo(t, t)
            .lineTo(t + r, t)
            .threePointArc((mid, mid), (t, t + r))
            .close()
            .extrude(params.width / 2, both=True)
        )

    def generate(self, params: BracketParams, options: GenerationOptions) -> cq.Workplane:
        """Generate an L-bracket.

        Mounting holes are cut only with ``options.exact_boolean``.
        """
        t = params.thickness
        l1 = params.leg_length_1
        l2 = params.leg_length_2
        if t < min(l1, l2):
            # YZ plane: local x is global Y, local y is global Z
            profile = [(0, 0), (l1, 0), (l1, t), (t, t), (t, l2), (0, l2)]
            bracket = extrude_profile(profile, params.width, plane="YZ")
        else:
            # A leg no longer than the thickness has no L profile, join two plates
            leg1 = cq.Workplane("XY").box(params.width, l1, t, centered=(True, False, False))
            leg2 = cq.Workplane("XY").box(params.width, t, l2, centered=(True, False, False))
            bracket = evaluate(leg1, leg2, BooleanOp.ADD)

        if self._fits_fillet(params):
            bracket = evaluate(bracket, self._fillet_solid(params), BooleanOp.ADD)

        if not options.exact_boolean:
            return bracket

        drill_length = 2 * t + 2
        for leg, midpoint in self.hole_positions(params):
            if leg == 1:
                drill = make_cylinder(params.hole_diameter, drill_length).translate(
                    (0, midpoint, t / 2)
                )
            else:
                drill = (
                    cq.Workplane("XZ")
                    .cylinder(drill_length, params.hole_diameter / 2)
                    .translate((0, t / 2, midpoint))
                )
            bracket = evaluate(bracket, drill, BooleanOp.SUBTRACT)

        return bracket

    def get_metadata(self, params: BracketParams, options: GenerationOptions) -> PartMetadata:
        holes = len(self.hole_positions(params)) if options.exact_boolean else 0
        return PartMetadata(
            part_id=Archetype.BRACKET.value,
            archetype=Archetype.BRACKET,
            name="L-Bracket",
            material="PETG",
            dimensions={
                "leg_length_1": params.leg_length_1,
                "leg_length_2": params.leg_length_2,
                "thickness": params.thickness,
                "width": params.width,
                "hole_diameter": params.hole_diameter,
                "fillet": params.fillet if self._fits_fillet(params) else 0.0,
                "hole_count": float(holes),
            },
        )
