"""Configuration models for generation, export and manufacturing limits."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


class GenerationOptions(BaseModel):
    """Options that control how solids are built and tessellated."""

    exact_boolean: bool = Field(
        default=True,
        description="Cut cavities and holes; False skips feature subtractions for fast previews",
    )
    radial_segments: int = Field(
        default=32, ge=3, description="Segments used to approximate a full circle"
    )
    linear_tolerance: float = Field(
        default=0.05, gt=0, description="Maximum chord deviation of the tessellation in mm"
    )
    stl_header: str = Field(
        default="Binary STL exported from repairgen",
        description="Text written into the 80-byte binary STL header",
    )
    solid_name: str = Field(
        default="repairgen", min_length=1, description="Solid name used in ASCII STL"
    )

    @property
    def angular_tolerance(self) -> float:
        """Angular tessellation tolerance in radians."""
        return 2 * math.pi / self.radial_segments


class ManufacturingConstraints(BaseModel):
    """Printer limits used to sanity check parameters."""

    min_thickness: float = Field(default=0.8, gt=0, description="Thinnest printable wall in mm")
    min_hole_diameter: float = Field(default=2.0, gt=0, description="Smallest printable hole in mm")
    max_dimension: float = Field(default=200.0, gt=0, description="Largest dimension that fits the bed in mm")


class RepairGenConfig(BaseModel):
    """Top-level configuration file."""

    generation: GenerationOptions = Field(default_factory=GenerationOptions)
    constraints: ManufacturingConstraints = Field(default_factory=ManufacturingConstraints)


def load_config(path: Optional[Path] = None) -> RepairGenConfig:
    """Load configuration from a YAML file.

    Args:
        path: YAML file to read. None returns the defaults.

    Returns:
        Validated configuration
    """
    if path is None:
        return RepairGenConfig()

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return RepairGenConfig.model_validate(data)
