"""Composite part building."""

from .builder import PartBuilder, build_from_parameters

__all__ = ["PartBuilder", "build_from_parameters"]
