"""Primitive factory and archetype generators."""

from .base import PartGenerator
from .booleans import BooleanOp, evaluate
from .primitives import PRIMITIVE_SHAPES, create_primitive, make_primitive

# Archetype generators
from .block import BlockGenerator
from .bracket import BracketGenerator
from .cap import CapGenerator
from .clip import ClipGenerator
from .cylinder import CylinderGenerator
from .enclosure import EnclosureGenerator
from .face_plate import FacePlateGenerator
from .sphere import SphereGenerator
from .u_clamp import UClampGenerator
from .washer import WasherGenerator

__all__ = [
    "PartGenerator",
    # Primitive factory
    "PRIMITIVE_SHAPES",
    "create_primitive",
    "make_primitive",
    "BooleanOp",
    "evaluate",
    # Archetype generators
    "BlockGenerator",
    "BracketGenerator",
    "CapGenerator",
    "ClipGenerator",
    "CylinderGenerator",
    "EnclosureGenerator",
    "FacePlateGenerator",
    "SphereGenerator",
    "UClampGenerator",
    "WasherGenerator",
]
