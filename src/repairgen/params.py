"""Synonym resolution for loosely named parameter bags."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from .errors import MissingParameterError
from .models.spec import Measurement, MeasurementType

ParameterBag = Mapping[str, Any]

# Ordered synonym lists; the first key present in a bag wins.
DIAMETER = ("outer_diameter", "diameter", "base_diameter")
INNER_DIAMETER = ("inner_diameter", "inner_d")
HEIGHT = ("height", "thickness", "depth", "h")
LENGTH = ("length", "l")
WIDTH = ("width", "w")
LEG_1 = ("leg_length_1", "leg1")
LEG_2 = ("leg_length_2", "leg2")
PHONE_WIDTH = ("phone_width",)
PHONE_HEIGHT = ("phone_height",)
PHONE_DEPTH = ("phone_depth",)
WALL = ("wall_thickness", "wall")
FIT_CLEARANCE = ("fit_clearance",)
BACK_THICKNESS = ("back_thickness",)
CORNER_RADIUS = ("corner_radius",)
TOP_THICKNESS = ("top_thickness",)
HOLE_DIAMETER = ("hole_diameter", "hole_d")
FILLET = ("corner_fillet", "fillet")
BRACKET_WIDTH = ("bracket_width", "width", "w")
THICKNESS = ("thickness",)


def resolve(bag: ParameterBag, names: Sequence[str], default: Optional[float] = None) -> Optional[float]:
    """Return the value of the first key in ``names`` present in ``bag``.

    Keys mapped to None count as absent. Values of several present synonyms
    are never merged.
    """
    for name in names:
        value = bag.get(name)
        if value is not None:
            return float(value)
    return default


def require(bag: ParameterBag, names: Sequence[str], context: str) -> float:
    """Like :func:`resolve` but raise MissingParameterError when nothing matches."""
    value = resolve(bag, names)
    if value is None:
        raise MissingParameterError(context, tuple(names))
    return value


_CATEGORY_KEYS = {
    MeasurementType.WIDTH: "width",
    MeasurementType.HEIGHT: "height",
    MeasurementType.DEPTH: "depth",
    MeasurementType.DIAMETER: "diameter",
    MeasurementType.THICKNESS: "thickness",
}

# Order in which unlabelled measurements fill parameters
_POSITIONAL_KEYS = ("length", "width", "thickness", "hole_diameter")


def parameters_from_measurements(measurements: Sequence[Measurement]) -> dict[str, float]:
    """Turn measurements into a parameter bag.

    Labelled measurements map to their category key, first of each category
    wins. If nothing is labelled, measurements fill length, width, thickness
    and hole_diameter by position, length/width only once there are two.
    """
    labelled = [m for m in measurements if m.type is not MeasurementType.OTHER]
    params: dict[str, float] = {}

    if labelled:
        for m in labelled:
            params.setdefault(_CATEGORY_KEYS[m.type], m.distance_mm)
        return params

    if len(measurements) < 2:
        return params

    for key, m in zip(_POSITIONAL_KEYS, measurements):
        params[key] = m.distance_mm
    return params
