"""Tessellation of CadQuery solids into triangle meshes."""

from __future__ import annotations

from typing import Optional, Union

import cadquery as cq

from ..config import GenerationOptions
from ..models.geometry import Mesh


def _as_shape(part: Union[cq.Workplane, cq.Shape]) -> Optional[cq.Shape]:
    if isinstance(part, cq.Shape):
        return part

    shapes = [obj for obj in part.vals() if isinstance(obj, cq.Shape)]
    if not shapes:
        return None
    if len(shapes) == 1:
        return shapes[0]
    return cq.Compound.makeCompound(shapes)


def tessellate(
    part: Union[cq.Workplane, cq.Shape],
    options: Optional[GenerationOptions] = None,
) -> Mesh:
    """Triangulate a solid.

    Face orientation is handled by the kernel, so triangles wind
    counter-clockwise seen from outside the solid.

    Args:
        part: Workplane or shape to triangulate
        options: Tessellation tolerances; defaults when None

    Returns:
        Mesh in the solid's own coordinates (mm). Empty when the workplane
        holds no shape, e.g. after intersecting disjoint solids.
    """
    options = options or GenerationOptions()
    shape = _as_shape(part)
    if shape is None:
        return Mesh()

    vertices, triangles = shape.tessellate(
        options.linear_tolerance, options.angular_tolerance
    )
    return Mesh(
        vertices=tuple(v.toTuple() for v in vertices),
        triangles=tuple((int(i), int(j), int(k)) for i, j, k in triangles),
    )
