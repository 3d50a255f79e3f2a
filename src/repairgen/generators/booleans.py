"""Boolean composition of solids."""

from enum import Enum

import cadquery as cq

from ..errors import UnknownOperationError


class BooleanOp(str, Enum):
    """Operations used to combine a solid with the running result."""

    ADD = "add"
    SUBTRACT = "subtract"
    INTERSECT = "intersect"

    @classmethod
    def parse(cls, value, step_id=None) -> "BooleanOp":
        try:
            return cls(value)
        except ValueError:
            raise UnknownOperationError(str(value), step_id) from None


def evaluate(base: cq.Workplane, tool: cq.Workplane, op: BooleanOp) -> cq.Workplane:
    """Combine two solids.

    Args:
        base: Running result
        tool: Solid applied to it
        op: ADD keeps both volumes, SUBTRACT removes tool from base,
            INTERSECT keeps only the overlap

    Returns:
        New workplane holding the combined solid
    """
    if op is BooleanOp.ADD:
        return base.union(tool)
    if op is BooleanOp.SUBTRACT:
        return base.cut(tool)
    if op is BooleanOp.INTERSECT:
        return base.intersect(tool)
    raise UnknownOperationError(str(op))
