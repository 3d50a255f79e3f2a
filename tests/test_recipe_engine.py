"""Tests for recipe execution."""

import math

import pytest

from repairgen.errors import EmptyRecipeError, UnknownOperationError, UnknownShapeError
from repairgen.models.spec import GeometryStep, ShapeRecipe
from repairgen.recipe import EXAMPLE_RECIPES, RecipeEngine, execute_recipe, normalize_recipe


@pytest.fixture
def engine():
    return RecipeEngine()


def _steps(*steps):
    return [{"id": i + 1, **step} for i, step in enumerate(steps)]


DISC = {"shape": "cylinder", "params": {"diameter": 20, "height": 10}}
BORE = {"shape": "cylinder", "params": {"diameter": 10, "height": 20}}
BALL = {"shape": "sphere", "params": {"diameter": 8}}


class TestRecipeEngine:
    """Tests for folding steps into one solid."""

    def test_empty_recipe(self, engine):
        with pytest.raises(EmptyRecipeError):
            engine.build([])

    def test_empty_shape_recipe(self, engine):
        with pytest.raises(EmptyRecipeError):
            engine.build(ShapeRecipe(steps=[]))

    def test_single_step(self, engine):
        solid = engine.build(_steps({"operation": "add", **DISC}))
        assert solid.val().Volume() == pytest.approx(math.pi * 100 * 10, rel=1e-6)

    def test_first_step_forced_to_add(self, engine):
        solid = engine.build(_steps({"operation": "subtract", **DISC}))
        assert solid.val().Volume() == pytest.approx(math.pi * 100 * 10, rel=1e-6)

    def test_unknown_first_operation_treated_as_add(self, engine):
        mesh = engine.execute(_steps({"operation": "explode", **DISC}))
        assert not mesh.is_empty

    def test_subtract(self, engine):
        solid = engine.build(_steps(
            {"operation": "add", **DISC},
            {"operation": "subtract", **BORE},
        ))
        assert solid.val().Volume() == pytest.approx(math.pi * (100 - 25) * 10, rel=1e-6)

    def test_intersect(self, engine):
        solid = engine.build(_steps(
            {"operation": "add", "shape": "box", "params": {"length": 20, "width": 20, "height": 20}},
            {"operation": "intersect", "shape": "cylinder", "params": {"diameter": 10, "height": 30}},
        ))
        assert solid.val().Volume() == pytest.approx(math.pi * 25 * 20, rel=1e-6)

    def test_order_matters(self, engine):
        """Subtracting before or after adding an inner ball changes the result."""
        bore_then_ball = engine.build(_steps(
            {"operation": "add", **DISC},
            {"operation": "subtract", **BORE},
            {"operation": "add", **BALL},
        ))
        ball_then_bore = engine.build(_steps(
            {"operation": "add", **DISC},
            {"operation": "add", **BALL},
            {"operation": "subtract", **BORE},
        ))

        ring = math.pi * (100 - 25) * 10
        ball = 4 / 3 * math.pi * 4 ** 3
        assert bore_then_ball.val().Volume() == pytest.approx(ring + ball, rel=1e-4)
        assert ball_then_bore.val().Volume() == pytest.approx(ring, rel=1e-4)

    def test_position_translates_step(self, engine):
        solid = engine.build(_steps({
            "operation": "add",
            "shape": "box",
            "params": {"length": 10, "width": 10, "height": 10},
            "position": [5, 0, 5],
        }))
        bb = solid.val().BoundingBox()
        assert bb.xmin == pytest.approx(0, abs=1e-6)
        assert bb.zmin == pytest.approx(0, abs=1e-6)

    def test_short_position_padded(self, engine):
        solid = engine.build([{"shape": "sphere", "params": {"diameter": 2}, "position": [3]}])
        assert solid.val().BoundingBox().center.x == pytest.approx(3, abs=1e-6)

    def test_unknown_operation(self, engine):
        with pytest.raises(UnknownOperationError, match="step 2"):
            engine.build(_steps(
                {"operation": "add", **DISC},
                {"operation": "merge", **BORE},
            ))

    def test_unknown_shape(self, engine):
        with pytest.raises(UnknownShapeError):
            engine.build(_steps({"operation": "add", "shape": "hexagon", "params": {}}))

    def test_accepts_geometry_steps(self, engine):
        steps = [GeometryStep(id=1, shape="sphere", params={"diameter": 10})]
        assert engine.build(steps).val().Volume() == pytest.approx(
            4 / 3 * math.pi * 125, rel=1e-6
        )

    def test_accepts_recipe_mapping(self, engine):
        solid = engine.build({"steps": [{"shape": "sphere", "params": {"diameter": 10}}]})
        assert solid.val().Volume() > 0

    def test_disjoint_intersection_is_empty(self, engine):
        mesh = engine.execute(_steps(
            {"operation": "add", **BALL},
            {"operation": "intersect", **BALL, "position": [50, 0, 0]},
        ))
        assert mesh.is_empty

    def test_execute_recipe_returns_mesh(self):
        mesh = execute_recipe(_steps({"operation": "add", "shape": "box",
                                      "params": {"length": 100, "width": 10, "height": 10}}))
        assert mesh.extents()[0] == pytest.approx(100)


class TestNormalizeRecipe:
    def test_fills_defaults(self):
        recipe = normalize_recipe({"steps": [
            {"operation": "subtract", "shape": "box", "params": {"length": 1, "height": 1}},
            {"shape": "sphere", "params": {"diameter": 1}, "position": [1, 2]},
        ]})
        first, second = recipe["steps"]
        assert first["id"] == 1
        assert first["operation"] == "add"
        assert first["position"] == [0.0, 0.0, 0.0]
        assert first["note"] == ""
        assert second["id"] == 2
        assert second["operation"] == "add"
        assert second["position"] == [1, 2, 0.0]

    def test_keeps_other_keys(self):
        recipe = normalize_recipe({"description": "lid", "steps": []})
        assert recipe == {"description": "lid", "steps": []}


class TestExampleRecipes:
    """Tests for the bundled example recipes."""

    @pytest.mark.parametrize("name", sorted(EXAMPLE_RECIPES))
    def test_example_builds(self, engine, name):
        mesh = engine.execute(EXAMPLE_RECIPES[name])
        assert not mesh.is_empty
        assert mesh.volume() > 0

    def test_lid_is_hollow(self, engine):
        solid = engine.build(EXAMPLE_RECIPES["water_bottle_lid"])
        body = math.pi * 15 ** 2 * 15
        assert solid.val().Volume() < body * 0.5

    def test_knob_has_center_hole(self, engine):
        solid = engine.build(EXAMPLE_RECIPES["custom_knob"])
        cylinder = math.pi * 10 ** 2 * 30
        dome = 2 / 3 * math.pi * 7.5 ** 3
        # Hole runs through the cylinder and 2.5mm into the dome
        hole = math.pi * 3 ** 2 * (30 + 2.5)
        assert solid.val().Volume() == pytest.approx(cylinder + dome - hole, rel=1e-4)
        assert solid.val().BoundingBox().zmax == pytest.approx(22.5, abs=1e-3)
