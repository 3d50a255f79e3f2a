"""Classification of parameter bags into part archetypes.

Rules are checked in a fixed order and the first match wins; a bag can satisfy
several rules (a cap bag also satisfies the knob rule), so the order is part of
the contract.
"""

from __future__ import annotations

from typing import Any

from .models.archetypes import (
    BlockParams,
    BracketParams,
    CapParams,
    Classification,
    ClipParams,
    CylinderParams,
    EnclosureParams,
    FacePlateParams,
    SphereParams,
    UClampParams,
    WasherParams,
)
from .models.geometry import Archetype
from .models.spec import HoleSpec
from .errors import UnknownPartTypeError
from .params import (
    BACK_THICKNESS,
    BRACKET_WIDTH,
    CORNER_RADIUS,
    DIAMETER,
    FILLET,
    FIT_CLEARANCE,
    HEIGHT,
    HOLE_DIAMETER,
    INNER_DIAMETER,
    LEG_1,
    LEG_2,
    LENGTH,
    PHONE_DEPTH,
    PHONE_HEIGHT,
    PHONE_WIDTH,
    THICKNESS,
    TOP_THICKNESS,
    WALL,
    WIDTH,
    ParameterBag,
    require,
    resolve,
)

DEFAULT_SHIM = BlockParams(length=30.0, width=30.0, height=2.0)
FALLBACK_DIAMETER_RATIO = 1.5


def _holes(bag: ParameterBag) -> tuple[HoleSpec, ...]:
    raw: Any = bag.get("holes") or ()
    return tuple(HoleSpec.model_validate(hole) for hole in raw)


def classify(bag: ParameterBag) -> Classification:
    """Pick the archetype for a parameter bag and resolve its parameters.

    Total over any bag: the last rule is an unconditional default shim.
    """
    phone_width = resolve(bag, PHONE_WIDTH)
    phone_height = resolve(bag, PHONE_HEIGHT)
    phone_depth = resolve(bag, PHONE_DEPTH)
    if phone_width is not None and phone_height is not None and phone_depth is not None:
        return Classification(Archetype.ENCLOSURE, EnclosureParams(
            phone_width=phone_width,
            phone_height=phone_height,
            phone_depth=phone_depth,
            fit_clearance=resolve(bag, FIT_CLEARANCE, 0.8),
            wall_thickness=resolve(bag, WALL, 2.0),
            back_thickness=resolve(bag, BACK_THICKNESS, 2.5),
            corner_radius=resolve(bag, CORNER_RADIUS, 0.0),
        ))

    leg1 = resolve(bag, LEG_1)
    leg2 = resolve(bag, LEG_2)
    if leg1 is not None and leg2 is not None:
        return Classification(Archetype.BRACKET, BracketParams(
            leg_length_1=leg1,
            leg_length_2=leg2,
            thickness=resolve(bag, THICKNESS, 3.0),
            width=resolve(bag, BRACKET_WIDTH, 20.0),
            hole_diameter=resolve(bag, HOLE_DIAMETER, 4.2),
            fillet=resolve(bag, FILLET, 5.0),
        ))

    diameter = resolve(bag, DIAMETER)
    inner_diameter = resolve(bag, INNER_DIAMETER)
    height = resolve(bag, HEIGHT)
    if diameter is not None:
        if inner_diameter is not None and height is not None:
            return Classification(Archetype.CAP, CapParams(
                outer_diameter=diameter,
                inner_diameter=inner_diameter,
                height=height,
                top_thickness=resolve(bag, TOP_THICKNESS, 2.0),
            ))
        if height is not None:
            return Classification(Archetype.KNOB, CylinderParams(diameter=diameter, height=height))
        return Classification(Archetype.SPHERE, SphereParams(diameter=diameter))

    length = resolve(bag, LENGTH)
    width = resolve(bag, WIDTH)
    if length is not None and width is not None:
        holes = _holes(bag)
        if holes:
            return Classification(Archetype.FACE_PLATE, FacePlateParams(
                length=length,
                width=width,
                thickness=2.0 if height is None else height,
                holes=holes,
            ))
        return Classification(Archetype.BLOCK, BlockParams(
            length=length,
            width=width,
            height=2.0 if height is None else height,
        ))

    if height is not None:
        return Classification(Archetype.FALLBACK_CYLINDER, CylinderParams(
            diameter=height * FALLBACK_DIAMETER_RATIO,
            height=height,
        ))

    return Classification(Archetype.DEFAULT_SHIM, DEFAULT_SHIM)


# Catalogue of named part types and their own parameter vocabulary
PART_TYPES: dict[str, dict[str, Any]] = {
    "shim": {
        "name": "Shim",
        "description": "Rectangular spacer/pad",
        "required": ("length", "width", "thickness"),
        "optional": (),
    },
    "washer": {
        "name": "Washer",
        "description": "Disc with center hole",
        "required": ("outer_d", "inner_d", "thickness"),
        "optional": (),
    },
    "l_bracket": {
        "name": "L-Bracket",
        "description": "L-shaped support with mounting holes",
        "required": ("leg_a", "leg_b", "thickness"),
        "optional": ("fillet", "hole_diameter", "width"),
    },
    "u_clamp": {
        "name": "U-Clamp",
        "description": "U shape for clamping around a bar",
        "required": ("width", "height", "depth", "thickness"),
        "optional": (),
    },
    "face_plate": {
        "name": "Face Plate",
        "description": "Flat plate with hole pattern",
        "required": ("length", "width", "thickness"),
        "optional": ("holes",),
    },
    "clip": {
        "name": "Clip",
        "description": "C-shaped spring clip",
        "required": ("outer_d", "inner_d", "thickness"),
        "optional": ("gap_angle",),
    },
}


def classify_part_type(part_type: str, bag: ParameterBag) -> Classification:
    """Resolve parameters for an explicitly chosen part type.

    Raises:
        UnknownPartTypeError: part_type is not in PART_TYPES
        MissingParameterError: a required parameter is absent
    """
    if part_type not in PART_TYPES:
        raise UnknownPartTypeError(part_type)

    if part_type == "shim":
        return Classification(Archetype.BLOCK, BlockParams(
            length=require(bag, ("length",), part_type),
            width=require(bag, ("width",), part_type),
            height=require(bag, ("thickness",), part_type),
        ))

    if part_type == "washer":
        return Classification(Archetype.WASHER, WasherParams(
            outer_diameter=require(bag, ("outer_d", "outer_diameter"), part_type),
            inner_diameter=require(bag, ("inner_d", "inner_diameter"), part_type),
            thickness=require(bag, ("thickness",), part_type),
        ))

    if part_type == "l_bracket":
        return Classification(Archetype.BRACKET, BracketParams(
            leg_length_1=require(bag, ("leg_a",) + LEG_1, part_type),
            leg_length_2=require(bag, ("leg_b",) + LEG_2, part_type),
            thickness=require(bag, ("thickness",), part_type),
            width=resolve(bag, BRACKET_WIDTH, 20.0),
            hole_diameter=resolve(bag, HOLE_DIAMETER, 4.2),
            fillet=resolve(bag, FILLET, 5.0),
        ))

    if part_type == "u_clamp":
        return Classification(Archetype.U_CLAMP, UClampParams(
            width=require(bag, ("width",), part_type),
            height=require(bag, ("height",), part_type),
            depth=require(bag, ("depth",), part_type),
            thickness=require(bag, ("thickness",), part_type),
        ))

    if part_type == "face_plate":
        return Classification(Archetype.FACE_PLATE, FacePlateParams(
            length=require(bag, ("length",), part_type),
            width=require(bag, ("width",), part_type),
            thickness=require(bag, ("thickness",), part_type),
            holes=_holes(bag),
        ))

    # clip
    return Classification(Archetype.CLIP, ClipParams(
        outer_diameter=require(bag, ("outer_d", "outer_diameter"), part_type),
        inner_diameter=require(bag, ("inner_d", "inner_diameter"), part_type),
        thickness=require(bag, ("thickness",), part_type),
        gap_angle=resolve(bag, ("gap_angle",), 60.0),
    ))
