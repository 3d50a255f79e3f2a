"""Binary and ASCII STL encoding of meshes."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import Iterator, Optional

from ..errors import EmptyGeometryError
from ..models.geometry import Mesh, Point3, Transform

HEADER_SIZE = 80
TRIANGLE_SIZE = 50
DEFAULT_HEADER = "Binary STL exported from repairgen"

_COUNT = struct.Struct("<I")
_TRIANGLE = struct.Struct("<12fH")


@dataclass(frozen=True)
class Facet:
    """One STL triangle: unit normal plus three corners."""

    normal: Point3
    v1: Point3
    v2: Point3
    v3: Point3


def triangle_normal(v1: Point3, v2: Point3, v3: Point3) -> Point3:
    """Unit normal of (v2 - v1) x (v3 - v1); zero vector for degenerate triangles."""
    ux, uy, uz = v2[0] - v1[0], v2[1] - v1[1], v2[2] - v1[2]
    wx, wy, wz = v3[0] - v1[0], v3[1] - v1[1], v3[2] - v1[2]

    nx = uy * wz - uz * wy
    ny = uz * wx - ux * wz
    nz = ux * wy - uy * wx

    length = math.sqrt(nx * nx + ny * ny + nz * nz)
    if length == 0.0:
        return (0.0, 0.0, 0.0)
    return (nx / length, ny / length, nz / length)


def iter_facets(mesh: Mesh, transform: Optional[Transform] = None) -> Iterator[Facet]:
    """Yield facets of ``mesh`` after applying ``transform``, in original winding."""
    if mesh.is_empty:
        raise EmptyGeometryError()

    if transform is not None:
        mesh = mesh.transformed(transform)

    for v1, v2, v3 in mesh.facets():
        yield Facet(triangle_normal(v1, v2, v3), v1, v2, v3)


def _header_bytes(header: str) -> bytes:
    data = header.encode("ascii", errors="replace")[:HEADER_SIZE]
    return data.ljust(HEADER_SIZE, b"\0")


def export_binary(
    mesh: Mesh,
    transform: Optional[Transform] = None,
    header: str = DEFAULT_HEADER,
) -> bytes:
    """Encode ``mesh`` as binary STL.

    Layout: 80-byte header, uint32 triangle count, then per triangle the
    normal, three vertices (float32) and a zero uint16 attribute count. All
    values little-endian.

    Raises:
        EmptyGeometryError: the mesh has no triangles
    """
    facets = list(iter_facets(mesh, transform))

    buffer = bytearray(HEADER_SIZE + _COUNT.size + TRIANGLE_SIZE * len(facets))
    buffer[:HEADER_SIZE] = _header_bytes(header)
    _COUNT.pack_into(buffer, HEADER_SIZE, len(facets))

    offset = HEADER_SIZE + _COUNT.size
    for facet in facets:
        _TRIANGLE.pack_into(buffer, offset, *facet.normal, *facet.v1, *facet.v2, *facet.v3, 0)
        offset += TRIANGLE_SIZE

    return bytes(buffer)


def export_ascii(
    mesh: Mesh,
    transform: Optional[Transform] = None,
    name: str = "repairgen",
) -> str:
    """Encode ``mesh`` as ASCII STL.

    Raises:
        EmptyGeometryError: the mesh has no triangles
    """
    lines = [f"solid {name}"]
    for facet in iter_facets(mesh, transform):
        n = facet.normal
        lines.append(f"  facet normal {n[0]:e} {n[1]:e} {n[2]:e}")
        lines.append("    outer loop")
        for v in (facet.v1, facet.v2, facet.v3):
            lines.append(f"      vertex {v[0]:e} {v[1]:e} {v[2]:e}")
        lines.append("    endloop")
        lines.append("  endfacet")
    lines.append(f"endsolid {name}")
    return "\n".join(lines) + "\n"


def read_binary(data: bytes) -> list[Facet]:
    """Decode binary STL data.

    Raises:
        ValueError: data is shorter than its triangle count promises
    """
    if len(data) < HEADER_SIZE + _COUNT.size:
        raise ValueError("Invalid binary STL: file too small")

    (count,) = _COUNT.unpack_from(data, HEADER_SIZE)
    expected = HEADER_SIZE + _COUNT.size + count * TRIANGLE_SIZE
    if len(data) < expected:
        raise ValueError(
            f"Invalid binary STL: {count} triangles need {expected} bytes, got {len(data)}"
        )

    facets = []
    offset = HEADER_SIZE + _COUNT.size
    for _ in range(count):
        values = _TRIANGLE.unpack_from(data, offset)
        facets.append(Facet(
            normal=values[0:3],
            v1=values[3:6],
            v2=values[6:9],
            v3=values[9:12],
        ))
        offset += TRIANGLE_SIZE

    return facets
