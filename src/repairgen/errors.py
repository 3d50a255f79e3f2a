"""Exceptions raised by the part generation core."""


class RepairGenError(Exception):
    """Base class for all repairgen errors."""


class UnknownShapeError(RepairGenError, ValueError):
    """A primitive shape tag is not one of the supported shapes."""

    def __init__(self, shape: str):
        self.shape = shape
        super().__init__(f"Unknown shape type: {shape!r}")


class MissingParameterError(RepairGenError, ValueError):
    """A required numeric parameter is absent after synonym resolution."""

    def __init__(self, context: str, names: tuple[str, ...]):
        self.context = context
        self.names = tuple(names)
        super().__init__(
            f"{context} requires one of: {', '.join(self.names)}"
        )


class EmptyRecipeError(RepairGenError, ValueError):
    """A recipe has no steps."""

    def __init__(self):
        super().__init__("Recipe has no steps")


class UnknownOperationError(RepairGenError, ValueError):
    """A recipe step names an operation other than add/subtract/intersect."""

    def __init__(self, operation: str, step_id=None):
        self.operation = operation
        self.step_id = step_id
        where = f" in step {step_id}" if step_id is not None else ""
        super().__init__(f"Unknown operation{where}: {operation!r}")


class UnknownPartTypeError(RepairGenError, ValueError):
    """A named part type is not in the part catalogue."""

    def __init__(self, part_type: str):
        self.part_type = part_type
        super().__init__(f"Unknown part type: {part_type!r}")


class EmptyGeometryError(RepairGenError, ValueError):
    """A mesh with no triangles was handed to the exporter."""

    def __init__(self):
        super().__init__("Mesh has no triangles to export")
