"""Parametric repair-part generator: measurements in, printable STL out."""

__version__ = "0.1.0"
