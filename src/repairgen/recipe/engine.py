"""Recipe execution - folds an ordered list of primitives into one solid."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence, Union

import cadquery as cq

from ..config import GenerationOptions
from ..errors import EmptyRecipeError
from ..export.tessellate import tessellate
from ..generators.booleans import BooleanOp, evaluate
from ..generators.primitives import make_primitive
from ..models.geometry import Mesh
from ..models.spec import GeometryStep, ShapeRecipe

logger = logging.getLogger(__name__)

RecipeInput = Union[ShapeRecipe, Mapping[str, Any], Sequence[Union[GeometryStep, Mapping[str, Any]]]]


def _normalize_step(step: Mapping[str, Any], index: int) -> dict[str, Any]:
    step = dict(step)
    if step.get("id") is None:
        step["id"] = index + 1
    step["operation"] = step.get("operation") or "add"
    step["params"] = step.get("params") or {}
    step["note"] = step.get("note") or ""

    position = list(step.get("position") or ())
    if len(position) < 3:
        position += [0.0] * (3 - len(position))
    step["position"] = position
    return step


def normalize_recipe(data: Mapping[str, Any]) -> dict[str, Any]:
    """Fill in the fields a loosely written recipe may leave out.

    Missing ids become the 1-based step index, missing operations ``add``,
    missing or short positions are padded with zeros, and the first step
    always adds.

    Args:
        data: Raw recipe mapping with a ``steps`` list

    Returns:
        New mapping ready for ``ShapeRecipe.model_validate``
    """
    steps = [_normalize_step(step, i) for i, step in enumerate(data.get("steps") or [])]
    if steps:
        steps[0]["operation"] = BooleanOp.ADD.value
    return {**data, "steps": steps}


def _as_steps(recipe: RecipeInput) -> list[GeometryStep]:
    if isinstance(recipe, ShapeRecipe):
        return list(recipe.steps)
    if isinstance(recipe, Mapping):
        return list(ShapeRecipe.model_validate(normalize_recipe(recipe)).steps)

    steps = []
    for index, step in enumerate(recipe):
        if isinstance(step, GeometryStep):
            steps.append(step)
        else:
            steps.append(GeometryStep.model_validate(_normalize_step(step, index)))
    return steps


class RecipeEngine:
    """Evaluates shape recipes step by step."""

    def __init__(self, options: Optional[GenerationOptions] = None):
        self.options = options or GenerationOptions()

    def build(self, recipe: RecipeInput) -> cq.Workplane:
        """Build the solid a recipe describes.

        Steps are applied strictly in the given order, each one against the
        accumulated result. The first step always adds, whatever operation it
        names.

        Args:
            recipe: ShapeRecipe, sequence of GeometryStep, or plain mappings

        Returns:
            CadQuery Workplane with the composed solid

        Raises:
            EmptyRecipeError: recipe has no steps
            UnknownShapeError: a step names an unknown primitive
            UnknownOperationError: a later step names an unknown operation
            MissingParameterError: a primitive parameter is absent
        """
        steps = _as_steps(recipe)
        if not steps:
            raise EmptyRecipeError()

        result: Optional[cq.Workplane] = None
        for index, step in enumerate(steps):
            solid = make_primitive(step.shape, step.params).translate(step.position)

            if index == 0:
                if step.operation != BooleanOp.ADD.value:
                    logger.debug("Step %d: first operation %r treated as add", step.id, step.operation)
                logger.debug("Step %d: add %s at %s", step.id, step.shape, step.position)
                result = solid
                continue

            op = BooleanOp.parse(step.operation, step.id)
            logger.debug("Step %d: %s %s at %s", step.id, op.value, step.shape, step.position)
            result = evaluate(result, solid, op)

        return result

    def execute(self, recipe: RecipeInput) -> Mesh:
        """Build a recipe and tessellate the result."""
        return tessellate(self.build(recipe), self.options)


def execute_recipe(recipe: RecipeInput, options: Optional[GenerationOptions] = None) -> Mesh:
    """Evaluate a recipe into a single mesh."""
    return RecipeEngine(options).execute(recipe)
