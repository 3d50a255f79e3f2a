"""Internal geometric models: meshes, transforms and part metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

import cadquery as cq

Point3 = tuple[float, float, float]
TriangleIndices = tuple[int, int, int]

_IDENTITY = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


class Archetype(Enum):
    """Geometry classes the part builder can produce.

    RECIPE marks solids composed from an explicit recipe rather than a
    classified parameter bag.
    """

    ENCLOSURE = "enclosure"
    BRACKET = "bracket"
    CAP = "cap"
    KNOB = "knob"
    SPHERE = "sphere"
    BLOCK = "block"
    FACE_PLATE = "face_plate"
    FALLBACK_CYLINDER = "fallback_cylinder"
    DEFAULT_SHIM = "default_shim"
    WASHER = "washer"
    U_CLAMP = "u_clamp"
    CLIP = "clip"
    RECIPE = "recipe"


@dataclass(frozen=True)
class Transform:
    """Affine 4x4 transform, row-major, applied to column vectors."""

    matrix: tuple[tuple[float, ...], ...] = _IDENTITY

    def __post_init__(self):
        if len(self.matrix) != 4 or any(len(row) != 4 for row in self.matrix):
            raise ValueError("Transform matrix must be 4x4")
        object.__setattr__(
            self, "matrix", tuple(tuple(float(v) for v in row) for row in self.matrix)
        )

    @classmethod
    def identity(cls) -> "Transform":
        return cls()

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> "Transform":
        return cls((
            (1.0, 0.0, 0.0, x),
            (0.0, 1.0, 0.0, y),
            (0.0, 0.0, 1.0, z),
            (0.0, 0.0, 0.0, 1.0),
        ))

    @classmethod
    def scaling(cls, sx: float, sy: Optional[float] = None, sz: Optional[float] = None) -> "Transform":
        sy = sx if sy is None else sy
        sz = sx if sz is None else sz
        return cls((
            (sx, 0.0, 0.0, 0.0),
            (0.0, sy, 0.0, 0.0),
            (0.0, 0.0, sz, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        ))

    @property
    def is_identity(self) -> bool:
        return self.matrix == _IDENTITY

    def apply(self, point: Point3) -> Point3:
        m = self.matrix
        x, y, z = point
        tx = m[0][0] * x + m[0][1] * y + m[0][2] * z + m[0][3]
        ty = m[1][0] * x + m[1][1] * y + m[1][2] * z + m[1][3]
        tz = m[2][0] * x + m[2][1] * y + m[2][2] * z + m[2][3]
        w = m[3][0] * x + m[3][1] * y + m[3][2] * z + m[3][3]
        if w not in (0.0, 1.0):
            return (tx / w, ty / w, tz / w)
        return (tx, ty, tz)


@dataclass(frozen=True)
class Mesh:
    """Triangle mesh: vertex positions in mm plus index triples.

    Meshes are values; every operation returns a new mesh.
    """

    vertices: tuple[Point3, ...] = ()
    triangles: tuple[TriangleIndices, ...] = ()

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles)

    @property
    def is_empty(self) -> bool:
        return not self.triangles

    def facets(self) -> Iterator[tuple[Point3, Point3, Point3]]:
        """Yield the corner positions of each triangle in winding order."""
        verts = self.vertices
        for i, j, k in self.triangles:
            yield verts[i], verts[j], verts[k]

    def bounds(self) -> tuple[Point3, Point3]:
        """Return (min corner, max corner) of the vertices."""
        if not self.vertices:
            raise ValueError("Empty mesh has no bounds")
        xs, ys, zs = zip(*self.vertices)
        return (min(xs), min(ys), min(zs)), (max(xs), max(ys), max(zs))

    def extents(self) -> Point3:
        """Return the bounding box size along X, Y and Z."""
        lo, hi = self.bounds()
        return (hi[0] - lo[0], hi[1] - lo[1], hi[2] - lo[2])

    def volume(self) -> float:
        """Enclosed volume in mm^3 (divergence theorem; assumes closed, outward winding)."""
        total = 0.0
        for (x1, y1, z1), (x2, y2, z2), (x3, y3, z3) in self.facets():
            total += (
                x1 * (y2 * z3 - z2 * y3)
                - y1 * (x2 * z3 - z2 * x3)
                + z1 * (x2 * y3 - y2 * x3)
            )
        return total / 6.0

    def transformed(self, transform: Transform) -> "Mesh":
        if transform.is_identity:
            return self
        return Mesh(
            vertices=tuple(transform.apply(v) for v in self.vertices),
            triangles=self.triangles,
        )

    def translated(self, x: float, y: float, z: float) -> "Mesh":
        return self.transformed(Transform.translation(x, y, z))


@dataclass
class PartMetadata:
    """Metadata describing a generated part."""

    part_id: str
    archetype: Archetype
    name: str
    material: str = "PLA"
    dimensions: dict[str, float] = field(default_factory=dict)
    notes: Optional[str] = None


@dataclass
class GeneratedPart:
    """A generated part: the CadQuery solid, its mesh and its metadata."""

    archetype: Archetype
    solid: cq.Workplane
    mesh: Mesh
    metadata: PartMetadata
