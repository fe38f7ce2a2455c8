"""Guided-tour logic for a service robot: places files, map geometry, place learning and goal dispatch."""

__version__ = "0.1.0"