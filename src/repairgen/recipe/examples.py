"""Ready-made recipes for common household parts (Z up, mm)."""

from ..models.spec import ShapeRecipe

EXAMPLE_RECIPES: dict[str, ShapeRecipe] = {
    "water_bottle_lid": ShapeRecipe.model_validate({
        "description": "Screw-on water bottle lid",
        "steps": [
            {"id": 1, "operation": "add", "shape": "cylinder",
             "params": {"diameter": 30, "height": 15}, "note": "Main body"},
            {"id": 2, "operation": "subtract", "shape": "cylinder",
             "params": {"diameter": 27.7, "height": 12}, "position": (0, 0, 1.5),
             "note": "Inner cavity"},
            {"id": 3, "operation": "add", "shape": "cylinder",
             "params": {"diameter": 28, "height": 3}, "position": (0, 0, -6),
             "note": "Top seal"},
        ],
    }),
    "simple_funnel": ShapeRecipe.model_validate({
        "description": "Simple funnel",
        "steps": [
            {"id": 1, "operation": "add", "shape": "cone",
             "params": {"top_d": 50, "bottom_d": 10, "height": 60}, "note": "Outer cone"},
            {"id": 2, "operation": "subtract", "shape": "cone",
             "params": {"top_d": 48, "bottom_d": 8, "height": 58}, "note": "Inner cavity"},
        ],
    }),
    "custom_knob": ShapeRecipe.model_validate({
        "description": "Grip knob",
        "steps": [
            {"id": 1, "operation": "add", "shape": "cylinder",
             "params": {"diameter": 20, "height": 30}, "note": "Main cylinder"},
            {"id": 2, "operation": "add", "shape": "sphere",
             "params": {"diameter": 15}, "position": (0, 0, 15), "note": "Rounded top"},
            {"id": 3, "operation": "subtract", "shape": "cylinder",
             "params": {"diameter": 6, "height": 35}, "note": "Center hole"},
        ],
    }),
}
