"""Geometric quality checks for 3D bathroom room scans."""

__version__ = "0.1.0"
