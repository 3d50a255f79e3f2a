"""Data models for the part generator."""

from .spec import GeometryStep, HoleSpec, Measurement, MeasurementType, PartRequest, ShapeRecipe
from .geometry import Archetype, GeneratedPart, Mesh, PartMetadata, Transform
from .archetypes import Classification

__all__ = [
    "GeometryStep",
    "HoleSpec",
    "Measurement",
    "MeasurementType",
    "PartRequest",
    "ShapeRecipe",
    "Archetype",
    "GeneratedPart",
    "Mesh",
    "PartMetadata",
    "Transform",
    "Classification",
]
