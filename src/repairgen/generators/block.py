"""Rectangular block / shim generator."""

import cadquery as cq

from ..config import GenerationOptions
from ..models.archetypes import BlockParams
from ..models.geometry import Archetype, PartMetadata


class BlockGenerator:
    """Generator for solid rectangular blocks, shims and spacers."""

    def __init__(self, archetype: Archetype = Archetype.BLOCK):
        """Initialize generator.

        Args:
            archetype: BLOCK for measured shims, DEFAULT_SHIM for the
                no-data fallback
        """
        self.archetype = archetype

    def generate(self, params: BlockParams, options: GenerationOptions) -> cq.Workplane:
        """Generate a block with length along X, width along Y, height along Z."""
        return cq.Workplane("XY").box(
            params.length, params.width, params.height, centered=(True, True, False)
        )

    def get_metadata(self, params: BlockParams, options: GenerationOptions) -> PartMetadata:
        is_default = self.archetype is Archetype.DEFAULT_SHIM
        return PartMetadata(
            part_id=self.archetype.value,
            archetype=self.archetype,
            name="Default Shim" if is_default else "Shim",
            dimensions={
                "length": params.length,
                "width": params.width,
                "height": params.height,
            },
            notes="No usable dimensions supplied, default size used" if is_default else None,
        )
