"""Base protocol for archetype generators."""

from typing import Protocol

import cadquery as cq

from ..config import GenerationOptions
from ..models.archetypes import ArchetypeParams
from ..models.geometry import PartMetadata


class PartGenerator(Protocol):
    """Protocol for archetype generators."""

    def generate(self, params: ArchetypeParams, options: GenerationOptions) -> cq.Workplane:
        """Generate the part geometry.

        Args:
            params: Resolved archetype parameters
            options: Generation options (exact_boolean decides whether
                cavities and holes are cut)

        Returns:
            CadQuery Workplane containing the part solid, resting on z=0
        """
        ...

    def get_metadata(self, params: ArchetypeParams, options: GenerationOptions) -> PartMetadata:
        """Get metadata describing the generated part.

        Args:
            params: Resolved archetype parameters
            options: Generation options used for the geometry

        Returns:
            Part metadata including name, dimensions, material
        """
        ...
