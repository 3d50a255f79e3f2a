"""Export functionality for STL/STEP files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Dict, List

import cadquery as cq

from ..config import GenerationOptions
from ..models.geometry import GeneratedPart
from .stl import export_ascii, export_binary

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("stl", "ascii", "step")


class Exporter:
    """Writes generated parts to disk."""

    def __init__(
        self,
        output_dir: Path,
        formats: Optional[List[str]] = None,
        options: Optional[GenerationOptions] = None,
    ):
        """Initialize exporter.

        Args:
            output_dir: Directory to write output files
            formats: Export formats (stl, ascii, step). Defaults to stl and step.
            options: Supplies the STL header and ASCII solid name
        """
        self.output_dir = Path(output_dir)
        self.formats = formats or ["stl", "step"]
        self.options = options or GenerationOptions()

        for fmt in self.formats:
            if fmt not in SUPPORTED_FORMATS:
                raise ValueError(f"Unsupported format: {fmt}")

        self.output_dir.mkdir(parents=True, exist_ok=True)

    def export(self, name: str, part: GeneratedPart) -> Dict[str, Path]:
        """Export one part in every configured format plus a manifest.

        Args:
            name: Base name for the output files
            part: Generated part

        Returns:
            Dict mapping output file name to its path

        Raises:
            EmptyGeometryError: an STL format was requested for an empty mesh
        """
        outputs: dict[str, Path] = {}

        for fmt in self.formats:
            path = self._export_part(name, part, fmt)
            outputs[path.name] = path
            logger.info("Wrote %s", path)

        manifest_path = self._export_manifest(name, part, outputs)
        outputs[manifest_path.name] = manifest_path
        logger.info("Wrote %s", manifest_path)

        return outputs

    def _export_part(self, name: str, part: GeneratedPart, fmt: str) -> Path:
        """Export a single part in one format."""
        if fmt == "stl":
            path = self.output_dir / f"{name}.stl"
            path.write_bytes(export_binary(part.mesh, header=self.options.stl_header))
        elif fmt == "ascii":
            path = self.output_dir / f"{name}_ascii.stl"
            path.write_text(export_ascii(part.mesh, name=self.options.solid_name))
        elif fmt == "step":
            path = self.output_dir / f"{name}.step"
            cq.exporters.export(part.solid, str(path), exportType="STEP")
        else:
            raise ValueError(f"Unsupported format: {fmt}")

        return path

    def _export_manifest(self, name: str, part: GeneratedPart, outputs: Dict[str, Path]) -> Path:
        """Export a manifest describing the part and its files."""
        path = self.output_dir / f"{name}_manifest.json"
        meta = part.metadata

        manifest: dict[str, Any] = {
            "name": name,
            "part": {
                "part_id": meta.part_id,
                "archetype": part.archetype.value,
                "name": meta.name,
                "material": meta.material,
                "dimensions": meta.dimensions,
                "notes": meta.notes,
            },
            "mesh": {
                "vertex_count": part.mesh.vertex_count,
                "triangle_count": part.mesh.triangle_count,
            },
            "coordinate_frame": {
                "origin": [0, 0, 0],
                "up_axis": [0, 0, 1],
                "units": "mm",
            },
            "files": sorted(outputs),
        }

        if not part.mesh.is_empty:
            lo, hi = part.mesh.bounds()
            manifest["mesh"]["bounds"] = {"min": list(lo), "max": list(hi)}

        with open(path, "w") as f:
            json.dump(manifest, f, indent=2)

        return path
