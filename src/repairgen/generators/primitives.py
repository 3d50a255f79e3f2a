"""Primitive solids: the building blocks of every part and recipe.

All primitives are centered at the origin; round ones have their axis along Z.
"""

from __future__ import annotations

import math
from typing import Callable, Optional, Sequence

import cadquery as cq

from ..config import GenerationOptions
from ..errors import UnknownShapeError
from ..export.tessellate import tessellate
from ..models.geometry import Mesh
from ..params import ParameterBag, require, resolve

PRIMITIVE_SHAPES = ("box", "cylinder", "sphere", "cone", "torus")


def make_box(length: float, depth: float, height: float) -> cq.Workplane:
    """Box with X=length, Y=depth, Z=height."""
    return cq.Workplane("XY").box(length, depth, height)


def make_cylinder(diameter: float, height: float) -> cq.Workplane:
    return cq.Workplane("XY").cylinder(height, diameter / 2)


def make_sphere(diameter: float) -> cq.Workplane:
    return cq.Workplane("XY").sphere(diameter / 2)


def make_cone(bottom_diameter: float, top_diameter: float, height: float) -> cq.Workplane:
    """Frustum; equal diameters give a plain cylinder."""
    if math.isclose(bottom_diameter, top_diameter):
        return make_cylinder(bottom_diameter, height)

    cone = cq.Solid.makeCone(
        bottom_diameter / 2,
        top_diameter / 2,
        height,
        cq.Vector(0, 0, -height / 2),
        cq.Vector(0, 0, 1),
    )
    return cq.Workplane("XY").add(cone)


def make_torus(major_radius: float, minor_radius: float) -> cq.Workplane:
    """Torus lying in the XY plane."""
    # XZ local Y is global Z, so revolving about it sweeps the tube around Z
    return (
        cq.Workplane("XZ")
        .moveTo(major_radius, 0)
        .circle(minor_radius)
        .revolve(360, (0, 0, 0), (0, 1, 0))
    )


def make_ring(outer_diameter: float, inner_diameter: float, height: float) -> cq.Workplane:
    """Flat ring (washer) centered on the origin."""
    return (
        cq.Workplane("XY")
        .circle(outer_diameter / 2)
        .circle(inner_diameter / 2)
        .extrude(height / 2, both=True)
    )


def extrude_profile(
    points: Sequence[tuple[float, float]],
    thickness: float,
    holes: Sequence[tuple[float, float, float]] = (),
    plane: str = "XY",
) -> cq.Workplane:
    """Extrude a closed polyline symmetrically about its plane.

    Args:
        points: Profile corners in workplane coordinates
        thickness: Total extrusion length
        holes: (x, y, diameter) of circular holes through the profile
        plane: CadQuery named plane holding the profile

    Returns:
        Extruded solid
    """
    sketch = cq.Workplane(plane).polyline(list(points)).close()
    for x, y, diameter in holes:
        sketch = sketch.moveTo(x, y).circle(diameter / 2)
    return sketch.extrude(thickness / 2, both=True)


def _box(params: ParameterBag) -> cq.Workplane:
    return make_box(
        require(params, ("length", "width"), "box"),
        require(params, ("depth", "width"), "box"),
        require(params, ("height",), "box"),
    )


def _cylinder(params: ParameterBag) -> cq.Workplane:
    return make_cylinder(
        require(params, ("diameter",), "cylinder"),
        require(params, ("height",), "cylinder"),
    )


def _sphere(params: ParameterBag) -> cq.Workplane:
    return make_sphere(require(params, ("diameter",), "sphere"))


def _cone(params: ParameterBag) -> cq.Workplane:
    return make_cone(
        require(params, ("bottom_diameter", "bottom_d"), "cone"),
        require(params, ("top_diameter", "top_d"), "cone"),
        require(params, ("height",), "cone"),
    )


def _torus(params: ParameterBag) -> cq.Workplane:
    major = resolve(params, ("major_radius",))
    if major is None:
        major = require(params, ("major_radius", "diameter"), "torus") / 2

    minor = resolve(params, ("minor_radius",))
    if minor is None:
        minor = require(params, ("minor_radius", "tube_diameter"), "torus") / 2

    return make_torus(major, minor)


_BUILDERS: dict[str, Callable[[ParameterBag], cq.Workplane]] = {
    "box": _box,
    "cylinder": _cylinder,
    "sphere": _sphere,
    "cone": _cone,
    "torus": _torus,
}


def make_primitive(shape: str, params: ParameterBag) -> cq.Workplane:
    """Build a primitive solid by shape name.

    Raises:
        UnknownShapeError: shape is not one of PRIMITIVE_SHAPES
        MissingParameterError: a required parameter is absent
    """
    builder = _BUILDERS.get(shape)
    if builder is None:
        raise UnknownShapeError(shape)
    return builder(params)


def create_primitive(
    shape: str,
    params: ParameterBag,
    options: Optional[GenerationOptions] = None,
) -> Mesh:
    """Build a primitive by shape name and return its mesh."""
    return tessellate(make_primitive(shape, params), options)
