"""Mesh tessellation, STL encoding and file export."""

from .exporter import Exporter
from .stl import Facet, export_ascii, export_binary, read_binary
from .tessellate import tessellate

__all__ = ["Exporter", "Facet", "export_ascii", "export_binary", "read_binary", "tessellate"]
