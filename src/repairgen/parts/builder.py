"""Part builder - turns parameter bags and requests into generated parts."""

from __future__ import annotations

import logging
from typing import Optional

from ..classifier import classify, classify_part_type
from ..config import GenerationOptions
from ..export.tessellate import tessellate
from ..generators import (
    BlockGenerator,
    BracketGenerator,
    CapGenerator,
    ClipGenerator,
    CylinderGenerator,
    EnclosureGenerator,
    FacePlateGenerator,
    PartGenerator,
    SphereGenerator,
    UClampGenerator,
    WasherGenerator,
)
from ..models.archetypes import Classification
from ..models.geometry import Archetype, GeneratedPart, Mesh, PartMetadata
from ..models.spec import PartRequest
from ..params import ParameterBag, parameters_from_measurements
from ..recipe.engine import RecipeEngine

logger = logging.getLogger(__name__)


class PartBuilder:
    """Builds parts from parameter bags, named part types or recipes."""

    def __init__(self, options: Optional[GenerationOptions] = None):
        self.options = options or GenerationOptions()

        # One generator per archetype
        self._generators: dict[Archetype, PartGenerator] = {
            Archetype.ENCLOSURE: EnclosureGenerator(),
            Archetype.BRACKET: BracketGenerator(),
            Archetype.CAP: CapGenerator(),
            Archetype.KNOB: CylinderGenerator(Archetype.KNOB),
            Archetype.SPHERE: SphereGenerator(),
            Archetype.BLOCK: BlockGenerator(Archetype.BLOCK),
            Archetype.FACE_PLATE: FacePlateGenerator(),
            Archetype.FALLBACK_CYLINDER: CylinderGenerator(Archetype.FALLBACK_CYLINDER),
            Archetype.DEFAULT_SHIM: BlockGenerator(Archetype.DEFAULT_SHIM),
            Archetype.WASHER: WasherGenerator(),
            Archetype.U_CLAMP: UClampGenerator(),
            Archetype.CLIP: ClipGenerator(),
        }

    def classify(self, params: ParameterBag) -> Classification:
        return classify(params)

    def build_classified(self, classification: Classification) -> GeneratedPart:
        """Run the generator for an already classified parameter set."""
        generator = self._generators[classification.archetype]
        solid = generator.generate(classification.params, self.options)
        metadata = generator.get_metadata(classification.params, self.options)

        mesh = tessellate(solid, self.options)
        logger.debug(
            "Tessellated %s: %d vertices, %d triangles",
            classification.archetype.value, mesh.vertex_count, mesh.triangle_count,
        )
        return GeneratedPart(
            archetype=classification.archetype,
            solid=solid,
            mesh=mesh,
            metadata=metadata,
        )

    def build_from_parameters(self, params: ParameterBag) -> GeneratedPart:
        """Classify a loosely named parameter bag and build the matching part.

        Total over any bag: unrecognized bags fall back to a cylinder or a
        default shim.
        """
        classification = self.classify(params)
        logger.info("Classified parameters as %s", classification.archetype.value)
        return self.build_classified(classification)

    def build_part(self, part_type: str, params: ParameterBag) -> GeneratedPart:
        """Build a catalogued part type from its own parameter names.

        Raises:
            UnknownPartTypeError: part_type is not catalogued
            MissingParameterError: a required parameter is absent
        """
        classification = classify_part_type(part_type, params)
        logger.info("Building part type %s as %s", part_type, classification.archetype.value)
        return self.build_classified(classification)

    def build_request(self, request: PartRequest) -> GeneratedPart:
        """Build whatever a request describes.

        A recipe wins over parameters. Measurements only fill parameter
        names the request does not set itself.
        """
        if request.recipe is not None:
            engine = RecipeEngine(self.options)
            solid = engine.build(request.recipe)
            mesh = tessellate(solid, self.options)
            metadata = PartMetadata(
                part_id="recipe",
                archetype=Archetype.RECIPE,
                name="Recipe",
                dimensions=_mesh_dimensions(mesh),
                notes=request.recipe.description or None,
            )
            return GeneratedPart(Archetype.RECIPE, solid, mesh, metadata)

        params: dict = dict(parameters_from_measurements(request.measurements))
        params.update(request.parameters)

        if request.part_type:
            return self.build_part(request.part_type, params)
        return self.build_from_parameters(params)


def _mesh_dimensions(mesh: Mesh) -> dict[str, float]:
    if mesh.is_empty:
        return {}
    x, y, z = mesh.extents()
    return {"size_x": x, "size_y": y, "size_z": z}


def build_from_parameters(params: ParameterBag, options: Optional[GenerationOptions] = None) -> Mesh:
    """Classify a parameter bag and return the mesh of the matching part."""
    return PartBuilder(options).build_from_parameters(params).mesh
