"""Pydantic models for measurements, recipes and part requests."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


class MeasurementType(str, Enum):
    """Semantic category a user can attach to a measurement."""

    WIDTH = "Width"
    HEIGHT = "Height"
    DEPTH = "Depth"
    DIAMETER = "Diameter"
    THICKNESS = "Thickness"
    OTHER = "Other"


class Measurement(BaseModel):
    """A single measured distance."""

    model_config = ConfigDict(frozen=True)

    distance_mm: float = Field(gt=0, description="Measured distance in mm")
    type: MeasurementType = Field(default=MeasurementType.OTHER, description="Measurement category")

    @property
    def label(self) -> str:
        return f"{self.distance_mm:.1f}mm"


class HoleSpec(BaseModel):
    """A circular through-hole in a plate, offset from the plate center."""

    model_config = ConfigDict(frozen=True)

    diameter: float = Field(gt=0, description="Hole diameter in mm")
    offset_a: float = Field(
        default=0.0,
        validation_alias=AliasChoices("offset_a", "position_x"),
        description="Offset along the plate length in mm",
    )
    offset_b: float = Field(
        default=0.0,
        validation_alias=AliasChoices("offset_b", "position_y"),
        description="Offset along the plate width in mm",
    )


class GeometryStep(BaseModel):
    """One primitive of a shape recipe.

    ``operation`` and ``shape`` stay plain strings so that unknown values reach
    the recipe engine, which reports them with its own errors.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0, description="Sequence number")
    operation: str = Field(default="add", description="add, subtract or intersect")
    shape: str = Field(min_length=1, description="cylinder, box, sphere, cone or torus")
    params: dict[str, float] = Field(default_factory=dict, description="Primitive parameters in mm")
    position: tuple[float, float, float] = Field(
        default=(0.0, 0.0, 0.0), description="Offset of the primitive in mm"
    )
    note: str = Field(default="", description="Free text")

    @field_validator("position", mode="before")
    @classmethod
    def pad_position(cls, value: Any) -> Any:
        if value is None:
            return (0.0, 0.0, 0.0)
        if isinstance(value, (list, tuple)) and len(value) < 3:
            return tuple(value) + (0.0,) * (3 - len(value))
        return value

    @field_validator("operation", mode="before")
    @classmethod
    def default_operation(cls, value: Any) -> Any:
        return "add" if value in (None, "") else value


class ShapeRecipe(BaseModel):
    """An ordered list of geometry steps describing one composite solid."""

    model_config = ConfigDict(frozen=True)

    description: str = Field(default="", description="What the recipe builds")
    steps: list[GeometryStep] = Field(description="Steps, applied in order")

    @model_validator(mode="before")
    @classmethod
    def fill_step_ids(cls, data: Any) -> Any:
        if not isinstance(data, dict) or not isinstance(data.get("steps"), list):
            return data

        steps = []
        for index, step in enumerate(data["steps"]):
            if isinstance(step, dict) and step.get("id") is None:
                step = {**step, "id": index + 1}
            steps.append(step)
        return {**data, "steps": steps}


ParameterValue = Union[float, list[HoleSpec]]


class PartRequest(BaseModel):
    """Everything needed to generate one part.

    Either a recipe, or a parameter bag with an optional named part type.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="part", min_length=1, description="Base name for output files")
    description: str = Field(default="", description="Free text")
    part_type: Optional[str] = Field(default=None, description="Catalogued part type, if chosen")
    parameters: dict[str, ParameterValue] = Field(
        default_factory=dict, description="Loosely named parameters in mm"
    )
    recipe: Optional[ShapeRecipe] = Field(default=None, description="Explicit shape recipe")
    measurements: list[Measurement] = Field(
        default_factory=list, description="Raw measurements, merged under explicit parameters"
    )

    @model_validator(mode="after")
    def validate_single_source(self) -> "PartRequest":
        if self.recipe is not None and self.part_type is not None:
            raise ValueError("part_type cannot be combined with a recipe")
        return self
