"""
ZooSim package

This package provides a modular architecture for the ZooSim zoo management
game. It separates the core game engine, domain objects, data tables and the
console user interface into distinct subpackages.
"""

__all__ = ["core", "domain", "data", "ui"]
