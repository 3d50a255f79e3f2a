"""Sanity checks on parameters and recipes before generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence

from .config import ManufacturingConstraints
from .generators.booleans import BooleanOp
from .generators.primitives import PRIMITIVE_SHAPES
from .models.spec import HoleSpec

# Keys each primitive needs, as alternatives: one name per tuple must be present
_PRIMITIVE_KEYS: dict[str, tuple[tuple[str, ...], ...]] = {
    "box": (("length", "width"), ("depth", "width"), ("height",)),
    "cylinder": (("diameter",), ("height",)),
    "sphere": (("diameter",),),
    "cone": (("bottom_diameter", "bottom_d"), ("top_diameter", "top_d"), ("height",)),
    "torus": (("major_radius", "diameter"), ("minor_radius", "tube_diameter")),
}


@dataclass
class ValidationReport:
    """Result of a validation pass."""

    errors: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


def validate_parameters(
    params: Mapping[str, Any],
    constraints: Optional[ManufacturingConstraints] = None,
) -> ValidationReport:
    """Check a parameter bag against printer limits.

    Every number must be positive and within the bed size, ``thickness``
    must reach the minimum printable wall and holes the minimum printable
    diameter.
    """
    constraints = constraints or ManufacturingConstraints()
    report = ValidationReport()

    for key, value in params.items():
        if key == "holes":
            continue
        if value is None:
            continue
        value = float(value)
        if value <= 0:
            report.errors.append(f"{key} must be positive, got {value}")
        elif value > constraints.max_dimension:
            report.errors.append(
                f"{key} = {value}mm exceeds the maximum dimension of {constraints.max_dimension}mm"
            )

    thickness = params.get("thickness")
    if thickness is not None and 0 < float(thickness) < constraints.min_thickness:
        report.errors.append(
            f"thickness = {float(thickness)}mm is below the minimum printable "
            f"wall of {constraints.min_thickness}mm"
        )

    hole_diameters = []
    if params.get("hole_diameter") is not None:
        hole_diameters.append(float(params["hole_diameter"]))
    for hole in params.get("holes") or ():
        hole_diameters.append(HoleSpec.model_validate(hole).diameter)

    for diameter in hole_diameters:
        if 0 < diameter < constraints.min_hole_diameter:
            report.errors.append(
                f"hole diameter {diameter}mm is below the minimum printable "
                f"hole of {constraints.min_hole_diameter}mm"
            )

    return report


def validate_recipe(steps: Sequence[Any]) -> list[str]:
    """List the problems in a recipe without building it.

    Accepts GeometryStep models or plain mappings. An empty list means the
    recipe can be executed.
    """
    if not steps:
        return ["Recipe has no steps"]

    errors = []
    last_id = None
    for index, step in enumerate(steps):
        if not isinstance(step, Mapping):
            step = step.model_dump()

        step_id = step.get("id")
        label = f"Step {step_id if step_id is not None else index + 1}"

        if step_id is not None:
            if last_id is not None and step_id <= last_id:
                errors.append(f"{label}: id must be greater than {last_id}")
            last_id = step_id

        shape = step.get("shape")
        if shape not in PRIMITIVE_SHAPES:
            errors.append(f"{label}: unknown shape {shape!r}")
        else:
            params = step.get("params") or {}
            for names in _PRIMITIVE_KEYS[shape]:
                if not any(params.get(name) is not None for name in names):
                    errors.append(f"{label}: {shape} requires one of: {', '.join(names)}")

        operation = step.get("operation") or BooleanOp.ADD.value
        if index > 0 and operation not in {op.value for op in BooleanOp}:
            errors.append(f"{label}: unknown operation {operation!r}")

    return errors
