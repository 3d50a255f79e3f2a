"""Resolved parameters for each part archetype.

The classifier turns a loosely named parameter bag into exactly one of these
dataclasses, so generators work with named fields instead of string lookups.
"""

from dataclasses import dataclass, field
from typing import Union

from .geometry import Archetype
from .spec import HoleSpec


@dataclass(frozen=True)
class EnclosureParams:
    """Open-front shell around a phone or similar device."""

    phone_width: float
    phone_height: float
    phone_depth: float
    fit_clearance: float = 0.8   # Gap so the device slides in
    wall_thickness: float = 2.0  # Side walls
    back_thickness: float = 2.5  # Closed back face
    corner_radius: float = 0.0   # Rounding of the outer vertical edges

    @property
    def inner_width(self) -> float:
        return self.phone_width + self.fit_clearance

    @property
    def inner_height(self) -> float:
        return self.phone_height + self.fit_clearance

    @property
    def inner_depth(self) -> float:
        return self.phone_depth + self.fit_clearance

    @property
    def outer_width(self) -> float:
        return self.inner_width + 2 * self.wall_thickness

    @property
    def outer_height(self) -> float:
        return self.inner_height + 2 * self.wall_thickness

    @property
    def outer_depth(self) -> float:
        # Front is open, only the back adds material
        return self.inner_depth + self.back_thickness


@dataclass(frozen=True)
class BracketParams:
    """L-profile bracket with a corner fillet and mounting holes."""

    leg_length_1: float           # Horizontal leg, along +Y
    leg_length_2: float           # Vertical leg, along +Z
    thickness: float = 3.0
    width: float = 20.0           # Extent along X
    hole_diameter: float = 4.2    # M4 clearance
    fillet: float = 5.0           # Inner corner fillet radius


@dataclass(frozen=True)
class CapParams:
    """Cap/lid: cylindrical wall with a solid top."""

    outer_diameter: float
    inner_diameter: float
    height: float                 # Wall height, excluding the top
    top_thickness: float = 2.0

    @property
    def wall_thickness(self) -> float:
        return max(0.0, (self.outer_diameter - self.inner_diameter) / 2)


@dataclass(frozen=True)
class CylinderParams:
    """Solid cylinder (knob, rod, fallback)."""

    diameter: float
    height: float


@dataclass(frozen=True)
class SphereParams:
    diameter: float


@dataclass(frozen=True)
class BlockParams:
    """Rectangular block, shim or spacer."""

    length: float                 # Along X
    width: float                  # Along Y
    height: float = 2.0           # Along Z


@dataclass(frozen=True)
class FacePlateParams:
    """Flat plate with a pattern of through-holes."""

    length: float
    width: float
    thickness: float = 2.0
    holes: tuple[HoleSpec, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class WasherParams:
    outer_diameter: float
    inner_diameter: float
    thickness: float


@dataclass(frozen=True)
class UClampParams:
    """U-shaped clamp; the opening faces +Z."""

    width: float
    height: float
    depth: float
    thickness: float


@dataclass(frozen=True)
class ClipParams:
    """C-shaped spring clip; the gap faces +X."""

    outer_diameter: float
    inner_diameter: float
    thickness: float
    gap_angle: float = 60.0       # Degrees


ArchetypeParams = Union[
    EnclosureParams,
    BracketParams,
    CapParams,
    CylinderParams,
    SphereParams,
    BlockParams,
    FacePlateParams,
    WasherParams,
    UClampParams,
    ClipParams,
]


@dataclass(frozen=True)
class Classification:
    """Archetype chosen for a parameter bag, with its resolved parameters."""

    archetype: Archetype
    params: ArchetypeParams
